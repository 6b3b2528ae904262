import time
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from PIL import Image

from studyaid.config import settings
from studyaid.core.exceptions import OCREngineError
from studyaid.services.extraction.base import ExtractionMethod, PageResult


class FakeRenderer:
    """Renders page N as an N-pixel-wide light grey strip so recognizers can tell pages apart."""

    def __init__(self, fail_pages: set[int] | None = None, delays: dict[int, float] | None = None):
        self.fail_pages = fail_pages or set()
        self.delays = delays or {}
        self.calls: list[tuple[int, float]] = []

    def render(self, file_data: bytes, page_number: int, scale: float) -> Image.Image:
        self.calls.append((page_number, scale))
        if page_number in self.delays:
            time.sleep(self.delays[page_number])
        if page_number in self.fail_pages:
            raise OCREngineError(f"No canvas for page {page_number}")
        return Image.new("RGB", (page_number, 1), (200, 200, 200))


class FakeRecognizer:
    def __init__(self, fail_pages: set[int] | None = None):
        self.fail_pages = fail_pages or set()
        self.images: list[Image.Image] = []
        self.languages: list[str] = []

    def recognize(self, image: Image.Image, language: str) -> str:
        self.images.append(image)
        self.languages.append(language)
        page_number = image.width
        if page_number in self.fail_pages:
            raise OCREngineError("engine crashed")
        return f"Recognized text of page {page_number}."


@pytest.fixture
def renderer_class() -> type[FakeRenderer]:
    return FakeRenderer


@pytest.fixture
def recognizer_class() -> type[FakeRecognizer]:
    return FakeRecognizer


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def fake_recognizer() -> FakeRecognizer:
    return FakeRecognizer()


@pytest.fixture
def offline_mode(monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "")


def make_direct_pages(*texts: str) -> list[PageResult]:
    return [
        PageResult(page_number=i + 1, text=text, extraction_method=ExtractionMethod.DIRECT)
        for i, text in enumerate(texts)
    ]


@pytest.fixture
def direct_pages():
    return make_direct_pages


@pytest_asyncio.fixture(scope="function")
async def client(offline_mode) -> AsyncGenerator[AsyncClient, None]:
    from studyaid.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def long_text() -> str:
    return (
        "Photosynthesis converts light energy into chemical energy inside plant cells. "
        "Chlorophyll absorbs mostly blue and red light while reflecting green light. "
        "The process releases oxygen as a by-product and stores energy as glucose."
    )


@pytest.fixture
def sample_txt_bytes() -> bytes:
    return b"This is a sample text document for testing purposes.\r\nIt has Windows line endings.\r\n"
