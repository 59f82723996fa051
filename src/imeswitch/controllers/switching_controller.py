from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Tuple

from imeswitch.core.item import Item
from imeswitch.core.rings import Rings, partition
from imeswitch.core.usage import UsageRecord, UsageTracker
from imeswitch.helpers.navigation_utils import step_cyclic

logger = logging.getLogger(__name__)


class SwitchingController:
    """Computes next/previous targets over the two rotation rings.

    Not thread-safe: the owning service serializes every call. State is
    replaced wholesale by ``rebuild_from``; ``record_user_action`` only touches
    the usage record of the rotation-aware ring.
    """

    def __init__(
        self, candidates: Iterable[Item], usage: Optional[UsageRecord] = None
    ):
        self._rings: Rings = partition(candidates)
        self._candidates: Tuple[Item, ...] = self._rings.aware + self._rings.unaware
        self._usage = UsageTracker(self._rings.aware, usage)

    @classmethod
    def rebuild_from(
        cls,
        previous: Optional["SwitchingController"],
        candidates: Iterable[Item],
    ) -> "SwitchingController":
        """Build a controller for a new candidate list.

        The previous controller's usage record is carried over when its item is
        still in the new rotation-aware ring; otherwise the new controller starts
        from the freshly sorted order.
        """
        carried = previous.usage_record if previous is not None else None
        controller = cls(candidates, usage=carried)
        if carried is not None and controller.usage_record is None:
            logger.debug(
                f"Usage record for '{carried.provider_name}' not carried over: "
                "item is no longer in the switching-aware ring"
            )
        return controller

    create_from = rebuild_from

    # --- State access ---
    @property
    def candidates(self) -> Tuple[Item, ...]:
        return self._candidates

    @property
    def aware_ring(self) -> Tuple[Item, ...]:
        return self._rings.aware

    @property
    def unaware_ring(self) -> Tuple[Item, ...]:
        return self._rings.unaware

    @property
    def usage_record(self) -> Optional[UsageRecord]:
        return self._usage.record

    def effective_order(self, item: Item) -> Tuple[Item, ...]:
        """Rotation order of the ring holding ``item`` (empty if unknown)."""
        if item in self._rings.aware:
            return self._usage.effective_order()
        if item in self._rings.unaware:
            return self._rings.unaware
        return ()

    # --- Navigation ---
    def get_next(
        self, only_current_provider: bool, current_item: Item, forward: bool
    ) -> Optional[Item]:
        if current_item is None:
            return None
        order = self.effective_order(current_item)
        if not order:
            logger.debug(f"No rotation target: {current_item} is not a candidate")
            return None
        accept = None
        if only_current_provider:
            provider = current_item.provider_name

            def accept(candidate: Item) -> bool:
                return candidate.provider_name == provider

        return step_cyclic(order, current_item, forward, accept)

    def record_user_action(self, item: Item) -> bool:
        if item is None or item not in self._candidates:
            return False
        return self._usage.record_use(item)

    # --- Diagnostics ---
    def dump(self) -> List[str]:
        lines = ["switching-aware rotation:"]
        for index, item in enumerate(self._rings.aware):
            rank = self._usage.usage_rank(item)
            lines.append(f"  rank={rank} index={index} item={item}")
        lines.append("switching-unaware rotation:")
        for index, item in enumerate(self._rings.unaware):
            lines.append(f"  index={index} item={item}")
        return lines

    def log_state(self) -> None:
        for line in self.dump():
            logger.debug(line)
