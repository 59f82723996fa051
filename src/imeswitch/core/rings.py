from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .errors import CandidateListError
from .item import Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rings:
    """The two rotation rings derived from one candidate list."""

    aware: Tuple[Item, ...] = ()
    unaware: Tuple[Item, ...] = ()

    def ring_for(self, item: Item) -> Tuple[Item, ...]:
        """Return the ring containing ``item`` (by value), or an empty tuple."""
        if item in self.aware:
            return self.aware
        if item in self.unaware:
            return self.unaware
        return ()


def sort_candidates(candidates: Iterable[Item]) -> List[Item]:
    """Stable sort in comparator order; ties keep their input order."""
    return sorted(candidates, key=Item.sort_key)


def validate_candidates(candidates: Iterable[Item]) -> List[Item]:
    """Return the candidates as a list, rejecting malformed entries.

    Raises:
        CandidateListError: for non-Item entries or a repeated
            (provider_name, variant_index) pair.
    """
    items = list(candidates)
    seen = set()
    for position, item in enumerate(items):
        if not isinstance(item, Item):
            raise CandidateListError(
                f"Candidate at position {position} is not an Item: {item!r}"
            )
        key = (item.provider_name, item.variant_index)
        if key in seen:
            raise CandidateListError(
                f"Duplicate candidate for provider '{item.provider_name}' "
                f"variant index {item.variant_index}"
            )
        seen.add(key)
    return items


def partition(candidates: Iterable[Item]) -> Rings:
    """Split a candidate list into the rotation-aware and -unaware rings.

    Both rings keep the sorted relative order. Either ring may come back empty.
    """
    ordered = sort_candidates(validate_candidates(candidates))
    aware = tuple(item for item in ordered if item.supports_rotation)
    unaware = tuple(item for item in ordered if not item.supports_rotation)
    logger.debug(
        f"Partitioned {len(ordered)} candidates: aware={len(aware)}, unaware={len(unaware)}"
    )
    return Rings(aware=aware, unaware=unaware)
