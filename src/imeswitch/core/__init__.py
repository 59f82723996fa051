# Core ordering logic package

from .constants import NOT_A_VARIANT_INDEX, DEFAULT_SYSTEM_LOCALE
from .item import Item, compare_items, language_subtag
from .rings import Rings, partition, sort_candidates, validate_candidates
from .usage import UsageRecord, UsageTracker
from .candidates import (
    ProviderInfo,
    VariantInfo,
    build_candidates,
    get_sorted_candidates,
    items_for_provider,
)
from .errors import CandidateListError

__all__ = [
    "NOT_A_VARIANT_INDEX",
    "DEFAULT_SYSTEM_LOCALE",
    "Item",
    "compare_items",
    "language_subtag",
    "Rings",
    "partition",
    "sort_candidates",
    "validate_candidates",
    "UsageRecord",
    "UsageTracker",
    "ProviderInfo",
    "VariantInfo",
    "build_candidates",
    "get_sorted_candidates",
    "items_for_provider",
    "CandidateListError",
]
