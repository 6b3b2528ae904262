"""
OCR for scanned PDFs.

Each page is rendered, binarized and recognized before the next one starts.
With `ocr_max_workers > 1` pages go through a bounded thread pool instead and
are put back in page order afterwards.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed

import numpy as np
from PIL import Image

from studyaid.config import settings
from studyaid.core.exceptions import OCREngineError
from studyaid.core.logging import get_logger
from studyaid.services.extraction.base import (
    ExtractionMethod,
    PageRenderer,
    PageResult,
    ProgressCallback,
    TextRecognizer,
)
from studyaid.services.extraction.raster import Pdf2ImageRenderer, binarize

logger = get_logger(__name__)


class TesseractRecognizer:
    def __init__(self, tesseract_cmd: str | None = None):
        self.tesseract_cmd = tesseract_cmd or settings.tesseract_cmd

    def recognize(self, image: Image.Image, language: str) -> str:
        import pytesseract

        if self.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = self.tesseract_cmd
        try:
            return pytesseract.image_to_string(image, lang=language)
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as e:
            raise OCREngineError(f"Tesseract failed: {e}") from e


# Tesseract language codes -> PaddleOCR language codes
PADDLE_LANGUAGES = {"eng": "en"}

_paddle_ocr_instances: dict[str, object] = {}


def _get_paddle_ocr(lang: str):
    """Lazy per-language singleton to avoid PaddleOCR's slow import on startup."""
    if lang not in _paddle_ocr_instances:
        try:
            from paddleocr import PaddleOCR
        except ImportError as e:
            raise OCREngineError(
                "PaddleOCR not installed. Install with: pip install paddleocr"
            ) from e
        try:
            _paddle_ocr_instances[lang] = PaddleOCR(use_angle_cls=True, lang=lang, show_log=False)
        except Exception as e:
            raise OCREngineError(f"PaddleOCR could not start for language '{lang}': {e}") from e
    return _paddle_ocr_instances[lang]


class PaddleRecognizer:
    def recognize(self, image: Image.Image, language: str) -> str:
        ocr = _get_paddle_ocr(PADDLE_LANGUAGES.get(language, language))
        try:
            result = ocr.ocr(np.array(image.convert("RGB")), cls=True)
        except Exception as e:
            raise OCREngineError(f"PaddleOCR failed: {e}") from e

        if not result or not result[0]:
            return ""
        return "\n".join(line[1][0] for line in result[0])


RECOGNIZERS: dict[str, type] = {
    "tesseract": TesseractRecognizer,
    "paddle": PaddleRecognizer,
}


def get_recognizer(engine: str | None = None) -> TextRecognizer:
    engine = (engine or settings.ocr_engine).lower()
    recognizer_class = RECOGNIZERS.get(engine)
    if not recognizer_class:
        raise ValueError(f"Unknown OCR engine: {engine}")
    return recognizer_class()


class OCRProcessor:
    def __init__(
        self,
        renderer: PageRenderer | None = None,
        recognizer: TextRecognizer | None = None,
        scale: float | None = None,
        language: str | None = None,
        max_workers: int | None = None,
    ):
        self.renderer = renderer or Pdf2ImageRenderer()
        self.recognizer = recognizer or get_recognizer()
        self.scale = scale or settings.ocr_render_scale
        self.language = language or settings.ocr_language
        self.max_workers = max(1, max_workers or settings.ocr_max_workers)

    def run(
        self,
        file_data: bytes,
        total_pages: int,
        on_progress: ProgressCallback | None = None,
    ) -> list[PageResult]:
        """OCR every page and return one PageResult per page, in page order.

        `on_progress(n, total_pages)` is called before page n starts when
        running sequentially, and after the n-th page finishes with a pool.
        """
        if self.max_workers == 1 or total_pages <= 1:
            pages = []
            for page_number in range(1, total_pages + 1):
                logger.info(f"OCR page {page_number} of {total_pages}")
                if on_progress:
                    on_progress(page_number, total_pages)
                pages.append(self._process_page(file_data, page_number))
            return pages

        results: dict[int, PageResult] = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._process_page, file_data, page_number)
                for page_number in range(1, total_pages + 1)
            ]
            for future in as_completed(futures):
                page = future.result()
                results[page.page_number] = page
                logger.info(f"OCR finished {len(results)} of {total_pages} pages")
                if on_progress:
                    on_progress(len(results), total_pages)

        return [results[n] for n in range(1, total_pages + 1)]

    def _process_page(self, file_data: bytes, page_number: int) -> PageResult:
        try:
            image = self.renderer.render(file_data, page_number, self.scale)
            text = self.recognizer.recognize(binarize(image), self.language)
        except OCREngineError as e:
            logger.error(f"OCR failed for page {page_number}: {e.message}")
            return PageResult(
                page_number=page_number,
                text="",
                extraction_method=ExtractionMethod.OCR,
                error=e.message,
            )

        return PageResult(
            page_number=page_number,
            text=text,
            extraction_method=ExtractionMethod.OCR,
        )
