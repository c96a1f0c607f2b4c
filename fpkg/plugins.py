"""Plugin descriptions and the registry that dispatches to them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence


class ActorType(enum.IntEnum):
    """The kind of work a plugin performs."""

    DOWNLOADER = 0x00000001
    DECOMPRESSOR = 0x00000002
    HOOKHANDLER = 0x00000003


class ActorOption(enum.IntFlag):
    """Options a plugin declares about how it acts."""

    NONE = 0
    EXCLUDE_OTHERS = 0x00010001


@dataclass
class Plugin:
    """A plugin: its identity, the actor role it fills and its action."""

    name: str
    version: str
    actor: ActorType
    act: Callable[[Sequence[Any]], int]
    opts: ActorOption = ActorOption.NONE
    debug: bool = False
    on_debug: Optional[Callable[[], None]] = None

    def enable_debug(self) -> None:
        """Switch the plugin into debug mode."""
        self.debug = True
        if self.on_debug is not None:
            self.on_debug()


class PluginRegistry:
    """Holds registered plugins and runs those that fill a given role."""

    def __init__(self) -> None:
        self._plugins: List[Plugin] = []

    def register(self, plugin: Plugin, verbose: bool = False) -> None:
        """Add a plugin to the registry."""
        if verbose:
            print(f"\t...loading plug: {plugin.name}-{plugin.version}")
        self._plugins.append(plugin)

    def find_actors(
        self, actor_type: ActorType, verbose: bool = False, data: Sequence[Any] = ()
    ) -> List[int]:
        """Run every plugin of ``actor_type`` on ``data``; return their results in order."""
        if verbose:
            print(f"\t...searching for plug actors of type {int(actor_type)}")
        return [plugin.act(data) for plugin in self._plugins if plugin.actor == actor_type]

    def deregister_all(self, verbose: bool = False) -> None:
        """Forget every registered plugin."""
        self._plugins.clear()

    def __len__(self) -> int:
        return len(self._plugins)