from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol

from PIL import Image


class ExtractionMethod(str, Enum):
    DIRECT = "direct"
    OCR = "ocr"
    PLAIN_TEXT = "plain_text"


@dataclass
class PageResult:
    page_number: int
    text: str
    extraction_method: ExtractionMethod
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class ExtractionResult:
    pages: list[PageResult] = field(default_factory=list)
    total_pages: int = 0
    method: ExtractionMethod = ExtractionMethod.DIRECT
    metadata: dict = field(default_factory=dict)

    @property
    def full_text(self) -> str:
        return "\n\n".join(p.text for p in self.pages)

    @property
    def failed_pages(self) -> list[int]:
        return [p.page_number for p in self.pages if p.failed]

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_pages)


class DocumentExtractor(ABC):
    @abstractmethod
    def extract(self, file_data: bytes, filename: str) -> ExtractionResult:
        """Extract raw, un-normalized text from a document."""
        ...


# Called with (n, total_pages) as OCR advances through a document.
ProgressCallback = Callable[[int, int], None]


class PageRenderer(Protocol):
    def render(self, file_data: bytes, page_number: int, scale: float) -> Image.Image:
        """Render one 1-based page of a PDF at `scale` times its native size.

        Raises OCREngineError when the page cannot be rendered.
        """
        ...


class TextRecognizer(Protocol):
    def recognize(self, image: Image.Image, language: str) -> str:
        """Return the text recognized in `image`.

        Raises OCREngineError on engine failure.
        """
        ...
