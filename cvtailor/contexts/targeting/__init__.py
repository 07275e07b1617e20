"""
Targeting Context

Responsibilities:
- Builds the word cloud (term-frequency model) from a reference text
- Scores arbitrary phrases against the word cloud
- Ranks every resume section by the computed weights

Owns: Relevance scoring, ranking, resume assembly
Never: Reads files or renders documents
"""

from cvtailor.contexts.targeting.assembler import (
    Resume,
    ResumeAssembler,
    assemble_resume,
    format_ranking_report,
)
from cvtailor.contexts.targeting.ranking import RankedItem, rank_items, sort_by_weight
from cvtailor.contexts.targeting.term_frequency import (
    PhraseScore,
    PhraseScorer,
    TermFrequencyModel,
    score_phrase,
)

__all__ = [
    # Word cloud and scoring
    "TermFrequencyModel",
    "PhraseScore",
    "PhraseScorer",
    "score_phrase",
    # Ranking primitives
    "RankedItem",
    "rank_items",
    "sort_by_weight",
    # Assembly
    "Resume",
    "ResumeAssembler",
    "assemble_resume",
    "format_ranking_report",
]
