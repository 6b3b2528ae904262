"""Decides how an uploaded file is read before any extraction work starts."""

from dataclasses import dataclass
from enum import Enum


class FileKind(str, Enum):
    PLAIN_TEXT = "plain_text"
    PDF = "pdf"
    REJECTED = "rejected"


WORD_REJECTION = (
    "This app cannot read .doc/.docx files directly. Please open the file, "
    "copy its content, and paste it into the text area."
)
UNSUPPORTED_REJECTION = (
    "Unsupported file type. Please upload a .pdf, .txt, or .md file. "
    "For other formats like .doc, please copy and paste the text."
)

PLAIN_TEXT_EXTENSIONS = (".txt", ".md")
PLAIN_TEXT_MIME_TYPES = {"text/plain", "text/markdown"}
PDF_MIME_TYPES = {"application/pdf"}
WORD_EXTENSIONS = (".doc", ".docx")
WORD_MIME_PREFIXES = (
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml",
)


@dataclass(frozen=True)
class ClassificationResult:
    kind: FileKind
    reason: str | None = None

    @property
    def rejected(self) -> bool:
        return self.kind == FileKind.REJECTED


def classify_file(filename: str | None, mime_type: str | None) -> ClassificationResult:
    name = (filename or "").lower()
    # Browsers may append parameters, e.g. "text/plain; charset=utf-8"
    mime = (mime_type or "").lower().split(";", 1)[0].strip()

    if mime.startswith(WORD_MIME_PREFIXES) or name.endswith(WORD_EXTENSIONS):
        return ClassificationResult(FileKind.REJECTED, WORD_REJECTION)

    if mime in PDF_MIME_TYPES or name.endswith(".pdf"):
        return ClassificationResult(FileKind.PDF)

    if mime in PLAIN_TEXT_MIME_TYPES or name.endswith(PLAIN_TEXT_EXTENSIONS):
        return ClassificationResult(FileKind.PLAIN_TEXT)

    return ClassificationResult(FileKind.REJECTED, UNSUPPORTED_REJECTION)
