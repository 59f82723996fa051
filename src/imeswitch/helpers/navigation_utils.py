from __future__ import annotations
from typing import Callable, Optional, Sequence, TypeVar

# Navigation helpers shared by the controllers. These are UI-agnostic and operate
# on ordered sequences; callers decide which sequence is the rotation order.

T = TypeVar("T")


def step_cyclic(
    ordered: Sequence[T],
    current: T,
    forward: bool,
    accept: Optional[Callable[[T], bool]] = None,
) -> Optional[T]:
    """Return the neighbour of ``current`` within a cyclic ordering.

    forward: True for the next element, False for the previous one.
    accept: optional filter; elements it rejects are skipped, ``current`` is
    always kept as the anchor.
    Wraps around at both ends. Returns None when ``current`` is not in
    ``ordered`` or when no other acceptable element exists.
    """
    if current not in ordered:
        return None
    candidates = [
        x for x in ordered if x == current or accept is None or accept(x)
    ]
    if len(candidates) < 2:
        return None
    idx = candidates.index(current)
    step = 1 if forward else -1
    return candidates[(idx + step) % len(candidates)]
