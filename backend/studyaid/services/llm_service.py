import json

import google.generativeai as genai

from studyaid.config import settings
from studyaid.core.exceptions import LLMError
from studyaid.core.logging import get_logger
from studyaid.core.observability import trace_llm_call

logger = get_logger(__name__)

SUMMARY_PROMPT = """Your task is to act as an expert academic assistant. Create a high-quality summary of the following text. Your summary should be structured in two parts:

1.  **Main Summary:** A concise paragraph that captures the core argument, main ideas, and overall conclusion of the text.
2.  **Key Takeaways:** A bulleted list of the most important points, findings, or evidence presented in the text.

Please ensure the summary is objective, accurate, and easy to understand.

---
TEXT:
{text}
---
"""

MCQ_PROMPT = """Based on the following text, generate 3 multiple-choice questions. For each question, provide 4 options and indicate the correct answer.

Return a JSON array where every item has:
- "question": the question text
- "options": an array of 4 possible answers
- "correctAnswer": the correct answer, copied exactly from "options"

---
TEXT:
{text}
---
"""

FLASHCARD_PROMPT = """Based on the following text, identify 5-8 key concepts and generate flashcards for them. For each flashcard, provide a concise term and a clear definition suitable for studying.

Return a JSON array where every item has:
- "term": the key term or concept
- "definition": a clear and concise definition of the term

---
TEXT:
{text}
---
"""

EXPLAIN_WITH_CONTEXT_PROMPT = """Using the provided context, explain the following topic in a clear and concise way, suitable for a high school student. If the topic is not in the context, explain it generally. Use markdown for formatting if needed.

CONTEXT:
---
{context}
---

TOPIC: {topic}"""

EXPLAIN_PROMPT = """Explain the following topic in a clear and concise way, suitable for a high school student. Use markdown for formatting if needed.

TOPIC: {topic}"""


class LLMService:
    def __init__(self, model_name: str | None = None):
        if settings.gemini_api_key:
            genai.configure(api_key=settings.gemini_api_key)
        self.model_name = model_name or settings.gemini_model
        self.model = genai.GenerativeModel(self.model_name)

    def generate(self, prompt: str) -> str:
        try:
            response = self.model.generate_content(prompt)
            return response.text
        except Exception as e:
            logger.error(f"LLM generation failed: {e}")
            raise LLMError(f"Generation failed: {e}")

    def generate_json(self, prompt: str) -> dict | list:
        try:
            response = self.model.generate_content(
                prompt,
                generation_config=genai.GenerationConfig(
                    response_mime_type="application/json",
                ),
            )
        except Exception as e:
            logger.error(f"LLM JSON generation failed: {e}")
            raise LLMError(f"JSON generation failed: {e}")

        try:
            return json.loads(response.text.strip())
        except json.JSONDecodeError:
            logger.error(f"Failed to parse Gemini response as JSON: {response.text[:500]}")
            raise LLMError("Invalid JSON response from model.")

    @trace_llm_call(name="summary")
    def summarize(self, text: str) -> str:
        return self.generate(SUMMARY_PROMPT.format(text=text))

    @trace_llm_call(name="mcqs")
    def generate_mcqs(self, text: str) -> list[dict]:
        result = self.generate_json(MCQ_PROMPT.format(text=text))
        if not isinstance(result, list):
            raise LLMError("Expected a JSON array of questions")
        return result

    @trace_llm_call(name="flashcards")
    def generate_flashcards(self, text: str) -> list[dict]:
        result = self.generate_json(FLASHCARD_PROMPT.format(text=text))
        if not isinstance(result, list):
            raise LLMError("Expected a JSON array of flashcards")
        return result

    @trace_llm_call(name="explain")
    def explain(self, topic: str, context: str | None = None) -> str:
        if context:
            prompt = EXPLAIN_WITH_CONTEXT_PROMPT.format(topic=topic, context=context)
        else:
            prompt = EXPLAIN_PROMPT.format(topic=topic)
        return self.generate(prompt)
