from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from .item import Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsageRecord:
    """Value identity of the most recently used aware item.

    Holds the same fields ``Item`` equality uses, so a record taken from one
    candidate list can be resolved against a regenerated one.
    """

    provider_name: str
    variant_index: int
    locale_tag: str = ""

    @classmethod
    def from_item(cls, item: Item) -> "UsageRecord":
        return cls(item.provider_name, item.variant_index, item.locale_tag)

    def matches(self, item: Item) -> bool:
        return (
            self.provider_name == item.provider_name
            and self.variant_index == item.variant_index
            and self.locale_tag == item.locale_tag
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider_name": self.provider_name,
            "variant_index": self.variant_index,
            "locale_tag": self.locale_tag,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional["UsageRecord"]:
        """Rebuild a record from ``to_dict`` output; None for missing/invalid data."""
        if not data:
            return None
        try:
            return cls(
                provider_name=str(data["provider_name"]),
                variant_index=int(data["variant_index"]),
                locale_tag=str(data.get("locale_tag") or ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Ignoring malformed usage record {data!r}: {e}")
            return None


class UsageTracker:
    """Tracks the most recently used item of the rotation-aware ring.

    The effective order is the sorted ring with that single item moved to the
    front. Only one promotion is kept, not a full recency stack.
    """

    def __init__(self, ring: Sequence[Item], record: Optional[UsageRecord] = None):
        self._ring: Tuple[Item, ...] = tuple(ring)
        self._most_recent: Optional[Item] = None
        if record is not None:
            self._most_recent = self._resolve(record)
            if self._most_recent is None:
                logger.debug(
                    f"Dropping stale usage record for '{record.provider_name}' "
                    f"(index={record.variant_index})"
                )

    def _resolve(self, record: UsageRecord) -> Optional[Item]:
        for item in self._ring:
            if record.matches(item):
                return item
        return None

    @property
    def ring(self) -> Tuple[Item, ...]:
        return self._ring

    @property
    def most_recent(self) -> Optional[Item]:
        return self._most_recent

    @property
    def record(self) -> Optional[UsageRecord]:
        if self._most_recent is None:
            return None
        return UsageRecord.from_item(self._most_recent)

    def record_use(self, item: Item) -> bool:
        """Promote ``item`` to the front of the effective order.

        Returns True when the record changed. Rotation-unaware items, items
        outside the ring and repeated calls leave the order untouched.
        """
        if not item.supports_rotation:
            return False
        try:
            member = self._ring[self._ring.index(item)]
        except ValueError:
            return False
        if member == self._most_recent:
            return False
        self._most_recent = member
        logger.debug(f"Usage promoted: {member}")
        return True

    def effective_order(self) -> Tuple[Item, ...]:
        if self._most_recent is None:
            return self._ring
        rest = tuple(item for item in self._ring if item != self._most_recent)
        return (self._most_recent,) + rest

    def usage_rank(self, item: Item) -> int:
        """Position of ``item`` in the effective order, or -1 if absent."""
        try:
            return self.effective_order().index(item)
        except ValueError:
            return -1
