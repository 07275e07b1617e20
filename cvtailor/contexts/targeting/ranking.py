"""
Ranking primitives shared by every resume section.

Every section is ranked the same way: weigh each item with a section-specific
strategy, then stable-sort ascending by weight. Items with equal weight keep
their input order.
"""

import copy
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RankedItem(Generic[T]):
    """
    A resume item paired with its relevance weight.

    Attributes:
        payload: The wrapped value (skill name, work experience, education, project)
        score: Relevance weight computed by the assembler
    """

    payload: T
    score: int


def rank_items(items: Iterable[T], weigh: Callable[[T], int]) -> List[RankedItem[T]]:
    """
    Weigh items and sort them ascending by weight (lowest first).

    `weigh` is called exactly once per item, in input order, before the item
    is copied. Strategies that reorder an item's own lists therefore leave
    both the original and the ranked copy in the reordered state.

    Args:
        items: Items to rank
        weigh: Section-specific scoring strategy

    Returns:
        RankedItems holding deep copies of the items, stable-sorted by score
    """
    ranked = []
    for item in items:
        score = weigh(item)
        ranked.append(RankedItem(payload=copy.deepcopy(item), score=score))

    ranked.sort(key=lambda ranked_item: ranked_item.score)
    return ranked


def sort_by_weight(texts: List[str], weigh: Callable[[str], int]) -> None:
    """
    Reorder a list of strings in place, ascending by weight (stable).

    Args:
        texts: List to reorder (mutated)
        weigh: Phrase weight function
    """
    texts.sort(key=weigh)
