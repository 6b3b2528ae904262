import io

from studyaid.core.exceptions import ExtractionError
from studyaid.core.logging import get_logger
from studyaid.services.extraction.base import (
    DocumentExtractor,
    ExtractionMethod,
    ExtractionResult,
    PageResult,
    ProgressCallback,
)
from studyaid.services.extraction.ocr import OCRProcessor
from studyaid.services.extraction.scan_detector import is_scanned_pdf

logger = get_logger(__name__)


def extract_direct_pages(pdf) -> list[PageResult]:
    """Join each page's text fragments with single spaces, in page order.

    `pdf` is an open pdfplumber document (anything with `.pages` whose items
    provide `extract_words()`). No cleanup happens here.
    """
    pages = []
    for i, page in enumerate(pdf.pages):
        fragments = [word["text"] for word in page.extract_words()]
        pages.append(PageResult(
            page_number=i + 1,
            text=" ".join(fragments),
            extraction_method=ExtractionMethod.DIRECT,
        ))
    return pages


class PdfExtractor(DocumentExtractor):
    def __init__(self, ocr_processor: OCRProcessor | None = None, scan_threshold: int | None = None):
        self._ocr_processor = ocr_processor
        self.scan_threshold = scan_threshold

    @property
    def ocr_processor(self) -> OCRProcessor:
        # Built on first scanned document so text-only PDFs never load an OCR engine
        if self._ocr_processor is None:
            self._ocr_processor = OCRProcessor()
        return self._ocr_processor

    def extract(
        self,
        file_data: bytes,
        filename: str,
        on_progress: ProgressCallback | None = None,
    ) -> ExtractionResult:
        pages = self._extract_with_pdfplumber(file_data, filename)
        total = len(pages)
        candidate_text = "\n\n".join(p.text for p in pages)

        if not is_scanned_pdf(candidate_text, total, self.scan_threshold):
            return ExtractionResult(
                pages=pages,
                total_pages=total,
                method=ExtractionMethod.DIRECT,
                metadata={"filename": filename, "extractor": "pdf"},
            )

        # Direct text is dropped wholesale; the document becomes OCR-only
        logger.info(f"Scanned PDF detected, running OCR on {total} pages of {filename}")
        ocr_pages = self.ocr_processor.run(file_data, total, on_progress=on_progress)
        result = ExtractionResult(
            pages=ocr_pages,
            total_pages=total,
            method=ExtractionMethod.OCR,
            metadata={"filename": filename, "extractor": "pdf"},
        )
        if result.is_partial:
            logger.warning(f"OCR skipped pages {result.failed_pages} of {filename}")
        return result

    def _extract_with_pdfplumber(self, file_data: bytes, filename: str) -> list[PageResult]:
        import pdfplumber

        try:
            with pdfplumber.open(io.BytesIO(file_data)) as pdf:
                return extract_direct_pages(pdf)
        except Exception as e:
            # pdfminer raises a wide range of types for corrupt or encrypted files
            logger.warning(f"pdfplumber extraction failed for {filename}: {e}")
            raise ExtractionError() from e
