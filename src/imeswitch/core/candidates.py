"""
Candidate list construction.

Turns provider descriptors handed over by an enumerator into the flat list of
``Item`` objects the switching controller rotates through. Which providers are
installed or enabled is decided by the caller; this module only expands and
filters what it is given.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .constants import NOT_A_VARIANT_INDEX
from .item import Item
from .rings import sort_candidates, validate_candidates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariantInfo:
    """One sub-variant offered by a provider (typically a keyboard locale)."""

    locale_tag: str = ""
    name: Optional[str] = None
    is_auxiliary: bool = False

    @property
    def display_name(self) -> Optional[str]:
        # Unnamed variants are listed under their locale tag
        return self.name if self.name is not None else (self.locale_tag or None)


@dataclass(frozen=True)
class ProviderInfo:
    """An enabled input-method provider and its variants, in declaration order."""

    name: str
    variants: Sequence[VariantInfo] = field(default_factory=tuple)
    supports_rotation: bool = True


def items_for_provider(
    provider: ProviderInfo,
    system_locale: str,
    show_variants: bool = True,
    include_auxiliary: bool = False,
) -> List[Item]:
    """Expand one provider into its candidate items.

    Args:
        provider: The provider descriptor.
        system_locale: Locale tag used to derive the locale priority of items.
        show_variants: When False, the provider is listed once without a variant.
        include_auxiliary: Whether auxiliary variants are listed.

    Returns:
        List[Item]: One item per listed variant, keeping ``variant_index`` equal
        to the variant's position in ``provider.variants``. A provider without
        variants yields a single variant-less item.
    """
    if not show_variants or not provider.variants:
        return [
            Item(
                provider_name=provider.name,
                variant_name=None,
                variant_index=NOT_A_VARIANT_INDEX,
                locale_tag="",
                supports_rotation=provider.supports_rotation,
                system_locale=system_locale,
            )
        ]
    items: List[Item] = []
    for index, variant in enumerate(provider.variants):
        if variant.is_auxiliary and not include_auxiliary:
            continue
        items.append(
            Item(
                provider_name=provider.name,
                variant_name=variant.display_name,
                variant_index=index,
                locale_tag=variant.locale_tag,
                supports_rotation=provider.supports_rotation,
                system_locale=system_locale,
            )
        )
    return items


def build_candidates(
    providers: Iterable[ProviderInfo],
    system_locale: str,
    show_variants: bool = True,
    include_auxiliary: bool = False,
) -> List[Item]:
    """Flatten providers into a validated candidate list (enumeration order)."""
    items: List[Item] = []
    for provider in providers:
        items.extend(
            items_for_provider(
                provider,
                system_locale,
                show_variants=show_variants,
                include_auxiliary=include_auxiliary,
            )
        )
    items = validate_candidates(items)
    logger.debug(
        f"Built {len(items)} candidates for system locale '{system_locale}'"
    )
    return items


def get_sorted_candidates(
    providers: Iterable[ProviderInfo],
    system_locale: str,
    show_variants: bool = True,
    include_auxiliary: bool = False,
) -> List[Item]:
    """Candidate list in comparator order, e.g. for a picker dialog."""
    return sort_candidates(
        build_candidates(
            providers,
            system_locale,
            show_variants=show_variants,
            include_auxiliary=include_auxiliary,
        )
    )
