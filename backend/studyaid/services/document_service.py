from dataclasses import dataclass, field

from studyaid.core.logging import get_logger
from studyaid.services.extraction.base import ExtractionMethod, ProgressCallback
from studyaid.services.extraction.classifier import FileKind, classify_file
from studyaid.services.extraction.factory import ExtractorFactory
from studyaid.services.extraction.pdf_extractor import PdfExtractor
from studyaid.services.extraction.text_cleaner import normalize_plain_text, normalize_text

logger = get_logger(__name__)


@dataclass
class ProcessedDocument:
    filename: str
    kind: FileKind
    text: str = ""
    method: ExtractionMethod | None = None
    page_count: int = 0
    failed_pages: list[int] = field(default_factory=list)
    rejection_reason: str | None = None

    @property
    def rejected(self) -> bool:
        return self.rejection_reason is not None

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_pages)


class DocumentService:
    """Classify -> extract -> normalize for a single uploaded file."""

    def __init__(self, pdf_extractor: PdfExtractor | None = None):
        self.pdf_extractor = pdf_extractor

    def process(
        self,
        file_data: bytes,
        filename: str,
        mime_type: str | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> ProcessedDocument:
        """Turn an upload into normalized text.

        Rejected file types come back as a ProcessedDocument with
        `rejection_reason` set. Unreadable files raise ExtractionError or
        FileReadError.
        """
        classification = classify_file(filename, mime_type)
        if classification.rejected:
            logger.info(f"Rejected {filename} ({mime_type}): {classification.reason}")
            return ProcessedDocument(
                filename=filename,
                kind=classification.kind,
                rejection_reason=classification.reason,
            )

        if classification.kind == FileKind.PDF:
            extractor = self.pdf_extractor or ExtractorFactory.get_extractor(FileKind.PDF)
            logger.info(f"Extracting text from {filename}")
            result = extractor.extract(file_data, filename, on_progress=on_progress)
            text = normalize_text(result.full_text)
        else:
            logger.info(f"Reading text file {filename}")
            result = ExtractorFactory.get_extractor(FileKind.PLAIN_TEXT).extract(file_data, filename)
            text = normalize_plain_text(result.full_text)

        logger.info(
            f"Processed {filename} | method={result.method.value} pages={result.total_pages} "
            f"chars={len(text)} failed_pages={result.failed_pages}"
        )
        return ProcessedDocument(
            filename=filename,
            kind=classification.kind,
            text=text,
            method=result.method,
            page_count=result.total_pages,
            failed_pages=result.failed_pages,
        )
