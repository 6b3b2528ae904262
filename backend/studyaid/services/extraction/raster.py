"""
Page rasterization and binarization for the OCR path.

Pages are rendered one at a time so only a single page image is held in
memory per worker.
"""

import numpy as np
from PIL import Image

from studyaid.config import settings
from studyaid.core.exceptions import OCREngineError
from studyaid.core.logging import get_logger

logger = get_logger(__name__)

# PDF user space is 72 units per inch, so scale 1.0 is 72 dpi.
PDF_NATIVE_DPI = 72


class Pdf2ImageRenderer:
    """Renders PDF pages through poppler (pdf2image)."""

    def render(self, file_data: bytes, page_number: int, scale: float) -> Image.Image:
        from pdf2image import convert_from_bytes

        dpi = round(PDF_NATIVE_DPI * scale)
        try:
            images = convert_from_bytes(
                file_data,
                dpi=dpi,
                first_page=page_number,
                last_page=page_number,
            )
        except Exception as e:
            raise OCREngineError(f"Could not render page {page_number}: {e}") from e

        if not images:
            raise OCREngineError(f"Renderer returned no image for page {page_number}")
        return images[0]


def binarize(image: Image.Image, threshold: int | None = None) -> Image.Image:
    """Threshold every pixel to pure black or white.

    The unweighted mean of R, G and B above `threshold` becomes white, anything
    else black. Alpha is left as is. Returns a new image.
    """
    if threshold is None:
        threshold = settings.binarize_threshold

    if image.mode not in ("RGB", "RGBA"):
        has_alpha = "A" in image.getbands() or "transparency" in image.info
        image = image.convert("RGBA" if has_alpha else "RGB")

    pixels = np.array(image)
    channel_sum = pixels[..., :3].astype(np.uint16).sum(axis=-1)
    # mean > threshold  <=>  sum > 3 * threshold, without float rounding
    white = channel_sum > 3 * threshold
    pixels[..., :3] = np.where(white, 255, 0).astype(np.uint8)[..., np.newaxis]
    return Image.fromarray(pixels)
