from studyaid.core.exceptions import UnsupportedFileTypeError
from studyaid.services.extraction.base import DocumentExtractor
from studyaid.services.extraction.classifier import FileKind
from studyaid.services.extraction.pdf_extractor import PdfExtractor
from studyaid.services.extraction.txt_extractor import TxtExtractor

EXTRACTOR_MAP: dict[FileKind, type[DocumentExtractor]] = {
    FileKind.PDF: PdfExtractor,
    FileKind.PLAIN_TEXT: TxtExtractor,
}


class ExtractorFactory:
    @staticmethod
    def get_extractor(kind: FileKind) -> DocumentExtractor:
        extractor_class = EXTRACTOR_MAP.get(kind)
        if not extractor_class:
            raise UnsupportedFileTypeError(f"No extractor for {kind.value} files")
        return extractor_class()
