"""
Application Settings Module
Manages persistent switching settings using QSettings.
"""

from typing import Any, Dict

from PyQt6.QtCore import QSettings

from .constants import (  # noqa: F401  # re-exported for settings consumers
    DEFAULT_SYSTEM_LOCALE,
    NOT_A_VARIANT_INDEX,
)


# --- Settings Constants ---

# Settings organization and application name
SETTINGS_ORGANIZATION = "imeswitch"
SETTINGS_APPLICATION = "imeswitch"

# Settings keys
SYSTEM_LOCALE_OVERRIDE_KEY = "Locale/SystemLocaleOverride"  # Forced system locale tag
SHOW_VARIANTS_KEY = "Switching/ShowVariants"  # One candidate per provider variant
INCLUDE_AUXILIARY_KEY = "Switching/IncludeAuxiliary"  # Auxiliary variants rotate too
REMEMBER_USAGE_KEY = "Switching/RememberUsage"  # Keep usage across rebuilds and restarts
LAST_USED_VARIANT_KEY = "Switching/LastUsedVariant"  # Serialized usage record

# Default values
DEFAULT_SYSTEM_LOCALE_OVERRIDE = ""  # Empty means "use the process locale"
DEFAULT_SHOW_VARIANTS = True
DEFAULT_INCLUDE_AUXILIARY = False
DEFAULT_REMEMBER_USAGE = True


def _get_settings() -> QSettings:
    """Get a QSettings instance with the application's organization and name."""
    return QSettings(SETTINGS_ORGANIZATION, SETTINGS_APPLICATION)


# --- System Locale ---
def get_system_locale_override() -> str:
    """Gets the forced system locale tag, or an empty string when unset."""
    settings = _get_settings()
    value = settings.value(
        SYSTEM_LOCALE_OVERRIDE_KEY, DEFAULT_SYSTEM_LOCALE_OVERRIDE, type=str
    )
    return (value or "").strip()


def set_system_locale_override(locale_tag: str):
    """Sets the forced system locale tag. Pass an empty string to clear it."""
    settings = _get_settings()
    settings.setValue(SYSTEM_LOCALE_OVERRIDE_KEY, (locale_tag or "").strip())


# --- Candidate Filters ---
def get_show_variants() -> bool:
    """Get whether providers are expanded into one candidate per variant."""
    settings = _get_settings()
    return settings.value(SHOW_VARIANTS_KEY, DEFAULT_SHOW_VARIANTS, type=bool)


def set_show_variants(show: bool):
    settings = _get_settings()
    settings.setValue(SHOW_VARIANTS_KEY, show)


def get_include_auxiliary() -> bool:
    """Get whether auxiliary variants are part of the candidate list."""
    settings = _get_settings()
    return settings.value(INCLUDE_AUXILIARY_KEY, DEFAULT_INCLUDE_AUXILIARY, type=bool)


def set_include_auxiliary(include: bool):
    settings = _get_settings()
    settings.setValue(INCLUDE_AUXILIARY_KEY, include)


# --- Usage Memory ---
def get_remember_usage() -> bool:
    """Get whether the usage record survives rebuilds and restarts."""
    settings = _get_settings()
    return settings.value(REMEMBER_USAGE_KEY, DEFAULT_REMEMBER_USAGE, type=bool)


def set_remember_usage(remember: bool):
    settings = _get_settings()
    settings.setValue(REMEMBER_USAGE_KEY, remember)


def get_last_used_variant() -> Dict[str, Any]:
    """Gets the serialized usage record, or an empty dict when none is stored."""
    settings = _get_settings()
    value = settings.value(LAST_USED_VARIANT_KEY, {})
    # INI backends hand back an empty string for cleared maps
    return dict(value) if isinstance(value, dict) else {}


def set_last_used_variant(record: Dict[str, Any]):
    """Stores the serialized usage record. An empty dict clears it."""
    settings = _get_settings()
    if record:
        settings.setValue(LAST_USED_VARIANT_KEY, dict(record))
    else:
        settings.remove(LAST_USED_VARIANT_KEY)
