from studyaid.config import settings
from studyaid.core.logging import get_logger

logger = get_logger(__name__)


def is_scanned_pdf(candidate_text: str, page_count: int, threshold: int | None = None) -> bool:
    """Whether directly extracted text is too thin to trust.

    The decision covers the whole document: a scanned PDF is OCR'd page by page
    and its direct text is thrown away, never merged.
    """
    if page_count <= 0:
        return False

    if threshold is None:
        threshold = settings.scan_text_threshold

    text_length = len(candidate_text.strip())
    is_scanned = text_length < threshold
    logger.debug(
        f"Scanned detection | pages={page_count} chars={text_length} "
        f"threshold={threshold} is_scanned={is_scanned}"
    )
    return is_scanned
