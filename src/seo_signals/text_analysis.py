"""Body-text signals - keyword density, content length, readability."""

import re
from collections import Counter
from typing import List, Optional

from seo_signals.config import AnalysisThresholds, default_thresholds
from seo_signals.document import Document
from seo_signals.models import (
    ContentLengthReport,
    KeywordDensityEntry,
    KeywordDensityReport,
    ReadabilityReport,
)

# ASCII word characters only: letters, digits, underscore
_WORD_PATTERN = re.compile(r"\b(\w+)\b", re.ASCII)
_SENTENCE_DELIMITERS = re.compile(r"[.!?]+")


class TextAnalyzer:
    """Analyzes the rendered text of a page body."""

    def __init__(self, thresholds: Optional[AnalysisThresholds] = None):
        """Initialize the text analyzer.

        Args:
            thresholds: Analysis thresholds configuration
        """
        self.thresholds = thresholds or default_thresholds

    def keyword_density(self, doc: Document) -> KeywordDensityReport:
        """Top keywords by share of all word tokens.

        Tokens are lowercased word-character runs. Entries are sorted by
        density, highest first; equal densities keep the order in which the
        words first appear. A body without tokens yields an empty report.

        Args:
            doc: Parsed page

        Returns:
            KeywordDensityReport with at most ``keyword_density_top_n`` entries
        """
        words = self._tokenize(doc.body_text())
        if not words:
            return KeywordDensityReport()

        total = len(words)
        # Counter keeps first-occurrence order, sorted() is stable
        frequency = Counter(words)
        ranked = sorted(
            (KeywordDensityEntry(word=word, density=(count / total) * 100)
             for word, count in frequency.items()),
            key=lambda entry: entry.density,
            reverse=True,
        )
        return KeywordDensityReport(entries=tuple(ranked[:self.thresholds.keyword_density_top_n]))

    def content_length(self, doc: Document) -> ContentLengthReport:
        word_count = self._count_words(doc.body_text())
        return ContentLengthReport(
            length=word_count,
            recommended=word_count >= self.thresholds.content_length_min_words,
        )

    def readability(self, doc: Document) -> ReadabilityReport:
        """Average words per sentence.

        The sentence count is the number of pieces left by splitting on runs
        of ".", "!" or "?", minus the trailing piece. Text with no sentence
        delimiter scores 0.0 and is not recommended.
        """
        text = doc.body_text().strip()
        word_count = self._count_words(text)
        sentence_count = len(_SENTENCE_DELIMITERS.split(text)) - 1

        if sentence_count <= 0:
            return ReadabilityReport(score=0.0, recommended=False)

        score = round(word_count / sentence_count, 2)
        return ReadabilityReport(
            score=score,
            recommended=score < self.thresholds.readability_max_words_per_sentence,
        )

    @staticmethod
    def _tokenize(text: str) -> List[str]:
        return _WORD_PATTERN.findall(text.lower())

    @staticmethod
    def _count_words(text: str) -> int:
        return len(text.split())
