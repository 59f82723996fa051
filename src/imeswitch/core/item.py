from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import LOCALE_SUBTAG_SEPARATORS, NOT_A_VARIANT_INDEX

_SUBTAG_SPLIT = re.compile(
    "[" + "".join(re.escape(sep) for sep in LOCALE_SUBTAG_SEPARATORS) + "]"
)


def _nullable_key(text: Optional[str]) -> Tuple[bool, str]:
    # Empty or missing text sorts after any non-empty text.
    return (not text, text or "")


def language_subtag(locale_tag: Optional[str]) -> str:
    """Return the lower-cased language part of a locale tag ("en_US" -> "en")."""
    if not locale_tag:
        return ""
    return _SUBTAG_SPLIT.split(locale_tag, maxsplit=1)[0].lower()


def _compare_nullable(a: Optional[str], b: Optional[str]) -> int:
    key_a = _nullable_key(a)
    key_b = _nullable_key(b)
    return (key_a > key_b) - (key_a < key_b)


@dataclass(frozen=True)
class Item:
    """One selectable navigation target: a provider plus an optional variant.

    Equality and hashing only look at ``provider_name``, ``variant_index`` and
    ``locale_tag`` so that items regenerated from a fresh enumeration match the
    ones held by an older controller. ``is_system_locale`` and
    ``is_system_language`` are derived once from ``system_locale``.
    """

    provider_name: str
    variant_name: Optional[str] = field(default=None, compare=False)
    variant_index: int = NOT_A_VARIANT_INDEX
    locale_tag: str = ""
    supports_rotation: bool = field(default=True, compare=False)
    system_locale: str = field(default="", compare=False, repr=False)
    is_system_locale: bool = field(init=False, compare=False)
    is_system_language: bool = field(init=False, compare=False)

    def __post_init__(self):
        locale_tag = self.locale_tag or ""
        object.__setattr__(self, "locale_tag", locale_tag)
        system_locale = self.system_locale or ""
        is_system_locale = bool(locale_tag) and (
            locale_tag.lower() == system_locale.lower()
        )
        system_language = language_subtag(system_locale)
        is_system_language = is_system_locale or (
            bool(system_language) and language_subtag(locale_tag) == system_language
        )
        object.__setattr__(self, "is_system_locale", is_system_locale)
        object.__setattr__(self, "is_system_language", is_system_language)

    @property
    def has_variant(self) -> bool:
        return self.variant_index != NOT_A_VARIANT_INDEX

    @property
    def locale_priority(self) -> int:
        """0 for the system locale, 1 for the system language, 2 otherwise."""
        if self.is_system_locale:
            return 0
        if self.is_system_language:
            return 1
        return 2

    def sort_key(self) -> Tuple[bool, str, bool, str, int]:
        """Key whose natural order matches ``compare_items``."""
        return (
            _nullable_key(self.provider_name)
            + _nullable_key(self.variant_name)
            + (self.locale_priority,)
        )

    def compare_to(self, other: "Item") -> int:
        return compare_items(self, other)

    def __lt__(self, other: "Item") -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return compare_items(self, other) < 0

    def __str__(self) -> str:
        name = self.variant_name if self.variant_name is not None else "-"
        return (
            f"{self.provider_name}/{name} "
            f"(index={self.variant_index}, locale={self.locale_tag or '-'})"
        )


def compare_items(a: Item, b: Item) -> int:
    """Total order used to build the reference rotation sequence.

    Provider name first, then variant name (both with empty text last), then
    system locale before system language before everything else. Items whose
    locales are neither compare equal on that last key.
    """
    if a is b:
        return 0
    result = _compare_nullable(a.provider_name, b.provider_name)
    if result != 0:
        return result
    result = _compare_nullable(a.variant_name, b.variant_name)
    if result != 0:
        return result
    return a.locale_priority - b.locale_priority
