class StudyAidError(Exception):
    """Base exception for the application."""

    def __init__(self, message: str = "An error occurred", status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UnsupportedFileTypeError(StudyAidError):
    def __init__(self, reason: str):
        super().__init__(reason, status_code=415)


class FileTooLargeError(StudyAidError):
    def __init__(self, size_mb: float, max_mb: int):
        super().__init__(
            f"File size {size_mb:.1f}MB exceeds maximum {max_mb}MB",
            status_code=413,
        )


class ExtractionError(StudyAidError):
    def __init__(
        self,
        message: str = (
            "Could not read text from this PDF. The file might be corrupted, "
            "password-protected, or in an unsupported format."
        ),
    ):
        super().__init__(message, status_code=422)


class FileReadError(StudyAidError):
    def __init__(self, message: str = "Failed to read the file."):
        super().__init__(message, status_code=422)


class OCREngineError(StudyAidError):
    """Raised by a renderer or recognizer when a single page cannot be processed."""

    def __init__(self, message: str = "OCR engine failed"):
        super().__init__(message, status_code=500)


class EmptyTextError(StudyAidError):
    def __init__(self, message: str = "Please enter some text first."):
        super().__init__(message, status_code=400)


class LLMError(StudyAidError):
    def __init__(self, message: str = "LLM API call failed"):
        super().__init__(message, status_code=502)
