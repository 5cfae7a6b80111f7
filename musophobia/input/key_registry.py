"""Single-key command table."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key identifiers to a single command action."""

    keys: tuple[str, ...]
    action: Callable[[], None]


class KeyCommandTable:
    """Exact-match key dispatch for commands that fire on one keystroke."""

    def __init__(self) -> None:
        self._actions: dict[str, Callable[[], None]] = {}

    def register(self, key: str, action: Callable[[], None]) -> KeyCommandTable:
        """Bind ``key``, overwriting an existing action for it."""
        self._actions[key] = action
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyCommandTable:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            for key in binding.keys:
                self.register(key, binding.action)
        return self

    def __contains__(self, key: str) -> bool:
        return key in self._actions

    def keys(self) -> list[str]:
        return list(self._actions)

    def dispatch(self, key: str) -> bool:
        """Run the action bound to ``key``; return ``False`` when unbound."""
        action = self._actions.get(key)
        if action is None:
            return False
        action()
        return True
