"""
Word Cloud (Term-Frequency Model)

Builds a word → occurrence count mapping from a reference text and scores
arbitrary phrases against it.

Matching is literal: case-insensitive, whole words only. No stemming, no
stopwords, no fuzzy matching ("built" does not match "builds").

Usage:
    from cvtailor.contexts.targeting.term_frequency import TermFrequencyModel

    model = TermFrequencyModel.build("Python engineer builds scalable systems")
    model.score("Python").weight   # 1
    model.score("Java").weight     # 0
"""

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from cvtailor.contexts.intake import load_reference_text
from cvtailor.contexts.targeting.logger import log_model_built
from cvtailor.utils.report_formatter import Column, TableFormatter, format_percentage
from cvtailor.utils.text_processing import normalize_reference_text, truncate_display


@dataclass(frozen=True)
class PhraseScore:
    """
    Score of one phrase against a word cloud.

    Attributes:
        weight: Sum of the counts of every matched word in the phrase
        total_weight: Total weight of the word cloud the phrase was scored against
    """

    weight: int
    total_weight: int

    @property
    def ratio(self) -> float:
        """Share of the word cloud matched by the phrase (0.0 for an empty cloud)."""
        if self.total_weight == 0:
            return 0.0
        return self.weight / self.total_weight

    def __str__(self) -> str:
        return f"Word Weight: {self.weight} / {self.total_weight} = {self.ratio}"


@dataclass(frozen=True)
class TermFrequencyModel:
    """
    Immutable word cloud built from a reference text.

    Attributes:
        counts: Read-only mapping of normalized word → occurrence count
        total_weight: Sum of all counts
    """

    counts: Mapping[str, int]
    total_weight: int

    def __post_init__(self):
        if self.total_weight != sum(self.counts.values()):
            raise ValueError(
                f"total_weight ({self.total_weight}) does not match sum of counts "
                f"({sum(self.counts.values())})"
            )
        # Read-only private copy
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def build(cls, text: str) -> "TermFrequencyModel":
        """
        Build a word cloud from reference text.

        The whole text is normalized once (trim, lowercase, drop everything that
        is not alphabetic or whitespace), split on runs of whitespace, and every
        token is counted.

        Args:
            text: Reference text (e.g., a job posting). May be empty.

        Returns:
            TermFrequencyModel. Empty text gives an empty cloud with total_weight 0.
        """
        counts = defaultdict(int)
        total_weight = 0

        for word in normalize_reference_text(text).split():
            counts[word] += 1
            total_weight += 1

        log_model_built(len(counts), total_weight)
        return cls(counts=dict(counts), total_weight=total_weight)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TermFrequencyModel":
        """
        Build a word cloud from a reference text file.

        Raises:
            FileNotFoundError: If path does not exist
        """
        return cls.build(load_reference_text(path))

    # =========================================================================
    # SCORING
    # =========================================================================

    def score(self, phrase: str) -> PhraseScore:
        """Score a phrase against this word cloud. See score_phrase()."""
        return score_phrase(self, phrase)

    # =========================================================================
    # DISPLAY
    # =========================================================================

    def most_common(self, n: Optional[int] = None) -> list:
        """
        Words ordered by count (highest first), ties alphabetical.

        Args:
            n: Limit to the top n words (default: all)

        Returns:
            List of (word, count) tuples
        """
        ordered = sorted(self.counts.items(), key=lambda x: (-x[1], x[0]))
        return ordered if n is None else ordered[:n]

    def describe(self, top: Optional[int] = None) -> str:
        """
        Render the word cloud as a text table.

        Args:
            top: Only list the top N words (default: all)

        Returns:
            Formatted table with word, weight and share of total weight
        """
        table = TableFormatter(
            [Column("Word", 30), Column("Weight", 8, ">"), Column("Share", 8, ">")],
            total_width=48,
        )
        table.add_section_header("Word Cloud")
        table.add_text(f"Total Weight: {self.total_weight}")
        table.add_text(f"Unique Words: {len(self.counts)}")
        table.add_table_header()

        for word, count in self.most_common(top):
            ratio = count / self.total_weight if self.total_weight else 0.0
            table.add_row([truncate_display(word, 30), count, format_percentage(ratio)])

        return table.render()

    def __str__(self) -> str:
        return self.describe()


def score_phrase(model: TermFrequencyModel, phrase: str) -> PhraseScore:
    """
    Score a phrase by summing the word cloud counts of its words.

    The phrase is split on single spaces only. A double space or a tab yields
    a token that simply misses. Each token is lowercased but otherwise used as
    is, so punctuation in the phrase is not stripped ("C++" does not match "c").

    Args:
        model: Word cloud to score against
        phrase: Any string, including empty

    Returns:
        PhraseScore with the summed weight and the model's total weight

    Example:
        >>> model = TermFrequencyModel.build("Python engineer builds scalable systems")
        >>> score_phrase(model, "built scalable systems").weight
        2
    """
    weight = 0
    for token in phrase.split(" "):
        weight += model.counts.get(token.lower(), 0)

    return PhraseScore(weight=weight, total_weight=model.total_weight)


class PhraseScorer:
    """
    Scores phrases against a fixed word cloud.

    Thin convenience wrapper used by the assembler as its scoring strategy.
    Holds no mutable state, so one instance can be shared across threads.
    """

    def __init__(self, model: TermFrequencyModel):
        self.model = model

    def score(self, phrase: str) -> PhraseScore:
        return score_phrase(self.model, phrase)

    def weight(self, phrase: str) -> int:
        return score_phrase(self.model, phrase).weight

    def sum_weights(self, phrases: Iterable[str]) -> int:
        """Total weight of several phrases."""
        return sum(self.weight(phrase) for phrase in phrases)
