"""Plugin discovery, loading, and the bridge from room events to hooks."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from coatcheck.plugins.hookspecs import CoatcheckHookSpec

if TYPE_CHECKING:
    from coatcheck.domain.events import GuestEvent
    from coatcheck.domain.room import CoatRoom

PROJECT_NAME = "coatcheck"
ENTRY_POINT_GROUP = "coatcheck.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery and relays room notifications to hooks."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CoatcheckHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``coatcheck.plugins`` entry-point group.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    # ------------------------------------------------------------------
    # Room bridge
    # ------------------------------------------------------------------

    def on_guest_came(self, event: GuestEvent) -> None:
        stored = len(event.storage.retrieve_coats()) if event.storage is not None else 0
        self._pm.hook.guest_arrived(guest_name=event.guest.name, stored_coats=stored)

    def on_guest_left(self, event: GuestEvent) -> None:
        coat = event.guest.coat
        self._pm.hook.guest_departed(
            guest_name=event.guest.name,
            coat_type=coat.coat_type if coat is not None else None,
        )

    def attach(self, room: CoatRoom) -> None:
        """Subscribe the hook bridge to *room*.

        Call after the attendant is attached so hooks observe its effects.
        Hook exceptions propagate out of the room's notification.
        """
        room.guest_came_event.subscribe(self.on_guest_came)
        room.guest_left_event.subscribe(self.on_guest_left)

    def detach(self, room: CoatRoom) -> None:
        room.guest_came_event.unsubscribe(self.on_guest_came)
        room.guest_left_event.unsubscribe(self.on_guest_left)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            self._pm.register(plugin(), name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("coatcheck")`` sets a ``coatcheck_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "coatcheck_impl", None):
                return True
        return False
