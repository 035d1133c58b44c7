"""Locating the top-most active screen in a parent/child screen chain."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ScreenResolver(ABC):
    """Read access to the host's stack of UI screens."""

    @abstractmethod
    def current(self) -> Any:
        """Return the root screen."""
        pass

    @abstractmethod
    def child(self, screen: Any) -> Any | None:
        """Return the screen shown on top of ``screen``, or None."""
        pass


class LinkedScreenResolver(ScreenResolver):
    """Resolver over screen objects linked through a ``child`` attribute."""

    def __init__(self, root: Any) -> None:
        self.root = root

    def current(self) -> Any:
        return self.root

    def child(self, screen: Any) -> Any | None:
        return getattr(screen, "child", None)


def active_screen(resolver: ScreenResolver) -> Any:
    """Follow child links from the root screen down to the deepest one."""
    screen = resolver.current()
    while (child := resolver.child(screen)) is not None:
        screen = child
    return screen
