# Input-method variant switching order
#
# The settings-backed service lives in imeswitch.service (requires PyQt6).

from .core.item import Item, compare_items
from .core.candidates import ProviderInfo, VariantInfo, build_candidates
from .core.errors import CandidateListError
from .core.usage import UsageRecord
from .controllers.switching_controller import SwitchingController

__all__ = [
    "Item",
    "compare_items",
    "ProviderInfo",
    "VariantInfo",
    "build_candidates",
    "CandidateListError",
    "UsageRecord",
    "SwitchingController",
]
