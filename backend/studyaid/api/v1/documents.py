from fastapi import APIRouter, Depends, File, UploadFile

from studyaid.config import settings
from studyaid.core.exceptions import FileReadError, FileTooLargeError, UnsupportedFileTypeError
from studyaid.core.logging import get_logger
from studyaid.dependencies import get_document_service
from studyaid.schemas.common import ErrorResponse
from studyaid.schemas.document import DocumentExtractResponse
from studyaid.services.document_service import DocumentService

router = APIRouter(prefix="/documents", tags=["Documents"])
logger = get_logger(__name__)


def _check_size(size: int | None) -> None:
    if size and size > settings.max_file_size_mb * 1024 * 1024:
        raise FileTooLargeError(
            size_mb=size / (1024 * 1024),
            max_mb=settings.max_file_size_mb,
        )


@router.post(
    "/extract",
    response_model=DocumentExtractResponse,
    responses={
        413: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
def extract_document(
    file: UploadFile = File(...),
    doc_service: DocumentService = Depends(get_document_service),
):
    # Sync endpoint: extraction and OCR block, so FastAPI runs this in its threadpool
    filename = file.filename or "unnamed"
    _check_size(file.size)

    try:
        content = file.file.read()
    except OSError as e:
        logger.warning(f"Could not read upload {filename}: {e}")
        raise FileReadError()

    _check_size(len(content))

    processed = doc_service.process(
        content,
        filename,
        file.content_type,
        on_progress=lambda n, total: logger.info(f"[{filename}] OCR page {n} of {total}"),
    )
    if processed.rejected:
        raise UnsupportedFileTypeError(processed.rejection_reason)

    message = f"Successfully processed '{filename}'!"
    if processed.is_partial:
        message = f"Processed '{filename}', but OCR failed on pages {processed.failed_pages}."

    return DocumentExtractResponse(
        filename=filename,
        text=processed.text,
        method=processed.method.value,
        page_count=processed.page_count,
        failed_pages=processed.failed_pages,
        is_partial=processed.is_partial,
        message=message,
    )
