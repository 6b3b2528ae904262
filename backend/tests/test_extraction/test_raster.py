from unittest.mock import patch

import pytest
from PIL import Image

from studyaid.core.exceptions import OCREngineError
from studyaid.services.extraction.raster import Pdf2ImageRenderer, binarize


def _strip(*pixels, mode="RGB") -> Image.Image:
    image = Image.new(mode, (len(pixels), 1))
    image.putdata(list(pixels))
    return image


class TestBinarize:
    def test_threshold_on_channel_average(self):
        image = _strip((129, 129, 129), (128, 128, 128), (200, 100, 90), (0, 0, 255))
        result = binarize(image)

        assert list(result.getdata()) == [
            (255, 255, 255),
            (0, 0, 0),
            (255, 255, 255),
            (0, 0, 0),
        ]

    def test_alpha_unchanged(self):
        image = _strip((250, 250, 250, 10), (5, 5, 5, 200), mode="RGBA")
        result = binarize(image)

        assert result.mode == "RGBA"
        assert list(result.getdata()) == [(255, 255, 255, 10), (0, 0, 0, 200)]

    def test_idempotent(self):
        image = _strip((10, 200, 180), (130, 127, 129), (255, 0, 128), (90, 90, 91))
        once = binarize(image)
        twice = binarize(once)

        assert once.tobytes() == twice.tobytes()
        assert once.size == twice.size

    def test_greyscale_converted_to_rgb(self):
        image = Image.new("L", (2, 2), 140)
        result = binarize(image)

        assert result.mode == "RGB"
        assert set(result.getdata()) == {(255, 255, 255)}

    def test_does_not_modify_input(self):
        image = _strip((100, 100, 100))
        binarize(image)
        assert image.getpixel((0, 0)) == (100, 100, 100)

    def test_custom_threshold(self):
        image = _strip((100, 100, 100))
        assert binarize(image, threshold=50).getpixel((0, 0)) == (255, 255, 255)


class TestPdf2ImageRenderer:
    def test_renders_single_page_at_scaled_dpi(self):
        page_image = Image.new("RGB", (10, 10))
        with patch("pdf2image.convert_from_bytes", return_value=[page_image]) as mock_convert:
            result = Pdf2ImageRenderer().render(b"%PDF", page_number=3, scale=2.5)

        assert result is page_image
        mock_convert.assert_called_once_with(b"%PDF", dpi=180, first_page=3, last_page=3)

    def test_render_failure_raises_engine_error(self):
        with patch("pdf2image.convert_from_bytes", side_effect=RuntimeError("poppler missing")):
            with pytest.raises(OCREngineError, match="page 2"):
                Pdf2ImageRenderer().render(b"%PDF", page_number=2, scale=2.5)

    def test_empty_render_raises_engine_error(self):
        with patch("pdf2image.convert_from_bytes", return_value=[]):
            with pytest.raises(OCREngineError):
                Pdf2ImageRenderer().render(b"%PDF", page_number=1, scale=1.0)
