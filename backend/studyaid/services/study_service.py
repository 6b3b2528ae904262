from pydantic import ValidationError

from studyaid.config import settings
from studyaid.core.exceptions import EmptyTextError, LLMError
from studyaid.core.logging import get_logger
from studyaid.schemas.study import MCQ, Flashcard, StudyMode
from studyaid.services.summarizer import summarize_text

logger = get_logger(__name__)

OFFLINE_MCQS = [
    MCQ(
        question="What is the capital of France? (Offline Demo)",
        options=["Berlin", "Madrid", "Paris", "Rome"],
        correct_answer="Paris",
    ),
    MCQ(
        question="This is a sample offline question.",
        options=["Option A", "Option B", "Correct", "Option D"],
        correct_answer="Correct",
    ),
]

OFFLINE_FLASHCARDS = [
    Flashcard(term="React (Offline Demo)", definition="A JavaScript library for building user interfaces."),
    Flashcard(term="Component", definition="A reusable, self-contained piece of UI."),
    Flashcard(term="State", definition="An object that represents the parts of the app that can change."),
]

OFFLINE_EXPLANATION = (
    'This is a basic offline explanation for "{topic}". For a more detailed '
    "answer, configure a Gemini API key to enable cloud mode."
)


class StudyService:
    """Summary, quiz, flashcard and explanation generation.

    Cloud mode (Gemini) is used whenever an API key is configured; otherwise
    summaries come from the offline extractive summarizer and the other
    operations return fixed placeholders.
    """

    def __init__(self, llm_service=None):
        self._llm_service = llm_service

    @property
    def mode(self) -> StudyMode:
        if self._llm_service is not None or settings.gemini_api_key:
            return StudyMode.CLOUD
        return StudyMode.OFFLINE

    @property
    def llm_service(self):
        if self._llm_service is None:
            from studyaid.services.llm_service import LLMService

            self._llm_service = LLMService()
        return self._llm_service

    def summarize(self, text: str) -> str:
        _require_text(text)
        if self.mode == StudyMode.CLOUD:
            return self.llm_service.summarize(text)
        return summarize_text(text)

    def generate_mcqs(self, text: str) -> list[MCQ]:
        _require_text(text)
        if self.mode == StudyMode.OFFLINE:
            return list(OFFLINE_MCQS)

        raw = self.llm_service.generate_mcqs(text)
        try:
            return [MCQ.model_validate(item) for item in raw]
        except ValidationError as e:
            logger.error(f"Unexpected MCQ format from model: {e}")
            raise LLMError("Failed to generate MCQs. The model returned an unexpected format.")

    def generate_flashcards(self, text: str) -> list[Flashcard]:
        _require_text(text)
        if self.mode == StudyMode.OFFLINE:
            return list(OFFLINE_FLASHCARDS)

        raw = self.llm_service.generate_flashcards(text)
        try:
            return [Flashcard.model_validate(item) for item in raw]
        except ValidationError as e:
            logger.error(f"Unexpected flashcard format from model: {e}")
            raise LLMError("Failed to generate flashcards. The model returned an unexpected format.")

    def explain(self, topic: str, context: str | None = None) -> str:
        if not topic or not topic.strip():
            raise EmptyTextError("Please enter a topic to explain.")
        if self.mode == StudyMode.OFFLINE:
            return OFFLINE_EXPLANATION.format(topic=topic)
        return self.llm_service.explain(topic, context or None)


def _require_text(text: str) -> None:
    if not text or not text.strip():
        raise EmptyTextError()
