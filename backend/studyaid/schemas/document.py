from pydantic import BaseModel, Field


class DocumentExtractResponse(BaseModel):
    filename: str
    text: str
    method: str
    page_count: int
    failed_pages: list[int] = Field(default_factory=list)
    is_partial: bool = False
    message: str = "Document processed"
