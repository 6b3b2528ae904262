from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StudyMode(str, Enum):
    OFFLINE = "offline"
    CLOUD = "cloud"


class TextRequest(BaseModel):
    text: str


class SummaryResponse(BaseModel):
    summary: str
    mode: StudyMode


class MCQ(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: list[str] = Field(min_length=2)
    correct_answer: str = Field(alias="correctAnswer")


class MCQResponse(BaseModel):
    questions: list[MCQ]
    mode: StudyMode


class Flashcard(BaseModel):
    term: str
    definition: str


class FlashcardResponse(BaseModel):
    flashcards: list[Flashcard]
    mode: StudyMode


class ExplainRequest(BaseModel):
    topic: str
    context: str | None = None


class ExplainResponse(BaseModel):
    explanation: str
    mode: StudyMode
