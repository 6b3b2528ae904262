"""
Offline extractive summarizer.

Picks the opening sentence plus the later sentence that covers the most of
the document's top keywords. Pure and deterministic: frequency ties and
sentence-score ties both resolve to whichever came first in the text
(insertion-ordered dict plus a stable sort, strict `>` when scoring).
"""

import re
from dataclasses import dataclass

from studyaid.config import settings

# A run of non-terminators closed by one or more of . ! ?
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")
WORD_PATTERN = re.compile(r"\b\w+\b")

STOP_WORDS = frozenset({
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your",
    "yours", "yourself", "yourselves", "he", "him", "his", "himself", "she",
    "her", "hers", "herself", "it", "its", "itself", "they", "them", "their",
    "theirs", "themselves", "what", "which", "who", "whom", "this", "that",
    "these", "those", "am", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "having", "do", "does", "did", "doing", "a", "an",
    "the", "and", "but", "if", "or", "because", "as", "until", "while", "of",
    "at", "by", "for", "with", "about", "against", "between", "into",
    "through", "during", "before", "after", "above", "below", "to", "from",
    "up", "down", "in", "out", "on", "off", "over", "under", "again",
    "further", "then", "once", "here", "there", "when", "where", "why", "how",
    "all", "any", "both", "each", "few", "more", "most", "other", "some",
    "such", "no", "nor", "not", "only", "own", "same", "so", "than", "too",
    "very", "s", "t", "can", "will", "just", "don", "should", "now",
})


@dataclass(frozen=True)
class SummaryResult:
    lead_sentence: str
    best_sentence: str = ""

    @property
    def text(self) -> str:
        if not self.best_sentence:
            return self.lead_sentence
        return f"{self.lead_sentence} {self.best_sentence}"


def split_sentences(text: str) -> list[str]:
    return SENTENCE_PATTERN.findall(text)


def tokenize(text: str) -> list[str]:
    return WORD_PATTERN.findall(text.lower())


def extract_keywords(text: str, top_n: int | None = None) -> list[str]:
    if top_n is None:
        top_n = settings.summary_keyword_count

    frequencies: dict[str, int] = {}
    for word in tokenize(text):
        if word not in STOP_WORDS:
            frequencies[word] = frequencies.get(word, 0) + 1

    ranked = sorted(frequencies, key=lambda word: -frequencies[word])
    return ranked[:top_n]


def score_sentence(sentence: str, keywords: list[str]) -> int:
    """Number of distinct keywords present; repeats don't count twice."""
    words = set(tokenize(sentence))
    return sum(1 for keyword in keywords if keyword in words)


def summarize(text: str, top_n: int | None = None) -> SummaryResult:
    sentences = split_sentences(text)
    if len(sentences) <= 2:
        # Too short to shorten; hand the text back untouched
        return SummaryResult(lead_sentence=text)

    keywords = extract_keywords(text, top_n)

    best_sentence = ""
    max_score = -1
    for sentence in sentences[1:]:
        score = score_sentence(sentence, keywords)
        if score > max_score:
            max_score = score
            best_sentence = sentence

    return SummaryResult(
        lead_sentence=sentences[0].strip(),
        best_sentence=best_sentence.strip(),
    )


def summarize_text(text: str) -> str:
    return summarize(text).text
