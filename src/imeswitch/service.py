from __future__ import annotations
import locale
import logging
import threading
from typing import List, Optional, Protocol, Sequence

from imeswitch.controllers.switching_controller import SwitchingController
from imeswitch.core import app_settings
from imeswitch.core.candidates import (
    ProviderInfo,
    build_candidates,
    get_sorted_candidates,
)
from imeswitch.core.item import Item
from imeswitch.core.usage import UsageRecord

logger = logging.getLogger(__name__)


class ProviderEnumerator(Protocol):
    """Supplies the enabled providers, in enumeration order."""

    def list_enabled_providers(self) -> Sequence[ProviderInfo]: ...


class LocaleContext(Protocol):
    def get_system_locale(self) -> str: ...


class SettingsLocaleContext:
    """Locale context backed by settings, then the process locale."""

    def get_system_locale(self) -> str:
        override = app_settings.get_system_locale_override()
        if override:
            return override
        try:
            process_locale = locale.getlocale()[0]
        except ValueError as e:
            logger.warning(f"Could not read process locale: {e}")
            process_locale = None
        return process_locale or app_settings.DEFAULT_SYSTEM_LOCALE


class SwitchingService:
    """Owns the switching controller and serializes access to it.

    Every navigation query, user action and rebuild runs under one lock, so
    the controller itself never sees concurrent calls.
    """

    def __init__(
        self,
        enumerator: ProviderEnumerator,
        locale_context: Optional[LocaleContext] = None,
    ):
        self._enumerator = enumerator
        self._locale_context = locale_context or SettingsLocaleContext()
        self._lock = threading.RLock()
        self._controller: Optional[SwitchingController] = None

    @property
    def controller(self) -> Optional[SwitchingController]:
        return self._controller

    def _restore_usage(self) -> Optional[UsageRecord]:
        if not app_settings.get_remember_usage():
            return None
        return UsageRecord.from_dict(app_settings.get_last_used_variant())

    def _store_usage(self) -> None:
        if not app_settings.get_remember_usage() or self._controller is None:
            return
        record = self._controller.usage_record
        app_settings.set_last_used_variant(record.to_dict() if record else {})

    def reset(self) -> SwitchingController:
        """Re-enumerate providers and rebuild the rotation rings."""
        with self._lock:
            system_locale = self._locale_context.get_system_locale()
            providers = list(self._enumerator.list_enabled_providers())
            candidates = build_candidates(
                providers,
                system_locale,
                show_variants=app_settings.get_show_variants(),
                include_auxiliary=app_settings.get_include_auxiliary(),
            )
            previous = self._controller
            if not app_settings.get_remember_usage():
                # Usage memory off: every rebuild starts from the sorted order
                self._controller = SwitchingController(candidates)
            elif previous is None:
                # First build: seed the usage record from settings
                self._controller = SwitchingController(
                    candidates, usage=self._restore_usage()
                )
            else:
                self._controller = SwitchingController.rebuild_from(
                    previous, candidates
                )
            self._store_usage()
            logger.info(
                f"Switching rings rebuilt from {len(providers)} providers "
                f"({len(candidates)} candidates, locale '{system_locale}')"
            )
            return self._controller

    def _ensure_controller(self) -> SwitchingController:
        if self._controller is None:
            return self.reset()
        return self._controller

    def get_next(
        self, only_current_provider: bool, current_item: Item, forward: bool
    ) -> Optional[Item]:
        with self._lock:
            controller = self._ensure_controller()
            return controller.get_next(only_current_provider, current_item, forward)

    def record_user_action(self, item: Item) -> bool:
        with self._lock:
            changed = self._ensure_controller().record_user_action(item)
            if changed:
                self._store_usage()
            return changed

    def get_sorted_candidates(
        self,
        show_variants: Optional[bool] = None,
        include_auxiliary: Optional[bool] = None,
    ) -> List[Item]:
        """Comparator-sorted candidates; None arguments fall back to settings."""
        if show_variants is None:
            show_variants = app_settings.get_show_variants()
        if include_auxiliary is None:
            include_auxiliary = app_settings.get_include_auxiliary()
        with self._lock:
            return get_sorted_candidates(
                self._enumerator.list_enabled_providers(),
                self._locale_context.get_system_locale(),
                show_variants=show_variants,
                include_auxiliary=include_auxiliary,
            )

    def dump(self) -> List[str]:
        with self._lock:
            if self._controller is None:
                return ["switching controller not built"]
            return self._controller.dump()
