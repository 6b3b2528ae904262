from charset_normalizer import from_bytes

from studyaid.core.exceptions import FileReadError
from studyaid.core.logging import get_logger
from studyaid.services.extraction.base import (
    DocumentExtractor,
    ExtractionMethod,
    ExtractionResult,
    PageResult,
)

logger = get_logger(__name__)


class TxtExtractor(DocumentExtractor):
    def extract(self, file_data: bytes, filename: str) -> ExtractionResult:
        try:
            text = file_data.decode("utf-8-sig")
            encoding = "utf-8"
        except UnicodeDecodeError:
            # Not UTF-8, guess the encoding
            detection = from_bytes(file_data).best()
            if detection is None:
                logger.warning(f"Could not detect a text encoding for {filename}")
                raise FileReadError()
            text = str(detection)
            encoding = detection.encoding

        page = PageResult(
            page_number=1,
            text=text,
            extraction_method=ExtractionMethod.PLAIN_TEXT,
        )

        return ExtractionResult(
            pages=[page],
            total_pages=1,
            method=ExtractionMethod.PLAIN_TEXT,
            metadata={
                "filename": filename,
                "extractor": "txt",
                "encoding": encoding,
            },
        )
