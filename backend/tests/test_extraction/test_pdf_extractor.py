from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from studyaid.core.exceptions import ExtractionError
from studyaid.services.extraction.base import ExtractionMethod
from studyaid.services.extraction.ocr import OCRProcessor
from studyaid.services.extraction.pdf_extractor import PdfExtractor, extract_direct_pages

LONG_PAGE = (
    "The mitochondrion is the site of aerobic respiration in eukaryotic cells and "
    "produces most of the chemical energy needed to power biochemical reactions."
)


def _fake_pdf(*pages_words):
    pages = [
        SimpleNamespace(extract_words=lambda words=words: [{"text": w} for w in words])
        for words in pages_words
    ]
    return SimpleNamespace(pages=pages)


class TestExtractDirectPages:
    def test_fragments_joined_with_spaces_in_page_order(self):
        pdf = _fake_pdf(["Hello", "World"], ["Second", "page"])
        pages = extract_direct_pages(pdf)

        assert [p.page_number for p in pages] == [1, 2]
        assert [p.text for p in pages] == ["Hello World", "Second page"]
        assert all(p.extraction_method == ExtractionMethod.DIRECT for p in pages)

    def test_no_cleanup(self):
        pdf = _fake_pdf(["inter-", "national"])
        assert extract_direct_pages(pdf)[0].text == "inter- national"

    def test_empty_page(self):
        pages = extract_direct_pages(_fake_pdf([]))
        assert pages[0].text == ""


class TestPdfExtractor:
    def _extractor(self, renderer, recognizer) -> PdfExtractor:
        return PdfExtractor(ocr_processor=OCRProcessor(renderer=renderer, recognizer=recognizer))

    def test_text_pdf_never_runs_ocr(self, direct_pages):
        ocr = MagicMock(spec=OCRProcessor)
        extractor = PdfExtractor(ocr_processor=ocr)
        pages = direct_pages(LONG_PAGE, "Page two.")

        with patch.object(PdfExtractor, "_extract_with_pdfplumber", return_value=pages):
            result = extractor.extract(b"%PDF", "bio.pdf")

        ocr.run.assert_not_called()
        assert result.method == ExtractionMethod.DIRECT
        assert result.total_pages == 2
        assert result.full_text == LONG_PAGE + "\n\nPage two."
        assert not result.is_partial

    def test_scanned_pdf_replaced_by_ocr(self, direct_pages, fake_renderer, fake_recognizer):
        extractor = self._extractor(fake_renderer, fake_recognizer)
        pages = direct_pages("stray", "header 12")

        with patch.object(PdfExtractor, "_extract_with_pdfplumber", return_value=pages):
            result = extractor.extract(b"%PDF", "scan.pdf")

        assert result.method == ExtractionMethod.OCR
        assert result.total_pages == 2
        assert result.full_text == "Recognized text of page 1.\n\nRecognized text of page 2."
        assert "stray" not in result.full_text
        assert "header" not in result.full_text
        assert [call[0] for call in fake_renderer.calls] == [1, 2]

    def test_ocr_progress_forwarded(self, direct_pages, fake_renderer, fake_recognizer):
        extractor = self._extractor(fake_renderer, fake_recognizer)
        progress = []

        with patch.object(PdfExtractor, "_extract_with_pdfplumber", return_value=direct_pages("", "")):
            extractor.extract(b"%PDF", "scan.pdf", on_progress=lambda n, t: progress.append(f"{n}/{t}"))

        assert progress == ["1/2", "2/2"]

    def test_ocr_failure_reported_as_partial(self, direct_pages, renderer_class, fake_recognizer):
        extractor = self._extractor(renderer_class(fail_pages={1}), fake_recognizer)

        with patch.object(PdfExtractor, "_extract_with_pdfplumber", return_value=direct_pages("", "")):
            result = extractor.extract(b"%PDF", "scan.pdf")

        assert result.is_partial
        assert result.failed_pages == [1]
        assert result.full_text == "\n\nRecognized text of page 2."

    def test_zero_page_pdf(self):
        ocr = MagicMock(spec=OCRProcessor)
        with patch.object(PdfExtractor, "_extract_with_pdfplumber", return_value=[]):
            result = PdfExtractor(ocr_processor=ocr).extract(b"%PDF", "empty.pdf")

        ocr.run.assert_not_called()
        assert result.total_pages == 0
        assert result.full_text == ""
        assert result.method == ExtractionMethod.DIRECT

    def test_custom_scan_threshold(self, direct_pages):
        ocr = MagicMock(spec=OCRProcessor)
        extractor = PdfExtractor(ocr_processor=ocr, scan_threshold=5)

        with patch.object(PdfExtractor, "_extract_with_pdfplumber", return_value=direct_pages("Short text")):
            result = extractor.extract(b"%PDF", "short.pdf")

        ocr.run.assert_not_called()
        assert result.method == ExtractionMethod.DIRECT

    def test_corrupt_pdf_raises_extraction_error(self):
        with pytest.raises(ExtractionError):
            PdfExtractor().extract(b"this is not a pdf", "broken.pdf")
