"""Top-level key routing with modal precedence.

Key-down handling, highest precedence first:

1. editable target: only Escape (blur) is honored
2. help toggle key, even while help is showing; opening help closes any
   hint session
3. help showing: Escape hides it, everything else is ignored
4. active hint session
5. hint-session openers
6. sequence recognizer
7. single-key command table
8. axis hold keys

The boolean result of ``handle_key_down`` tells the host whether to suppress
its default handling of the key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..commands import HELP_TOGGLE_KEY, HINT_KEY, HINT_NEW_TAB_KEY
from ..hints.session import HintSession, HintTarget
from ..render.help import HelpView
from ..runtime.frames import FrameScheduler
from ..scroll.axis import HOLD_KEYS, HORIZONTAL_HOLD_KEYS, VERTICAL_HOLD_KEYS, ScrollAxis, direction_for_key
from .key_registry import KeyBinding, KeyCommandTable
from .sequence import SequenceRecognizer

logger = logging.getLogger(__name__)

ESCAPE_KEY = "Escape"


@dataclass(frozen=True)
class DispatcherContext:
    """Components and host hooks the dispatcher routes keys to."""

    vertical: ScrollAxis
    horizontal: ScrollAxis
    scheduler: FrameScheduler
    recognizer: SequenceRecognizer
    hints: HintSession
    help_view: HelpView
    discover_targets: Callable[[], list[HintTarget]]
    blur_active_element: Callable[[], None]
    viewport_height: Callable[[], float]
    document_height: Callable[[], float]


class InputDispatcher:
    """Route one key event at a time to the component that owns it."""

    def __init__(self, context: DispatcherContext) -> None:
        self.context = context
        self.commands = KeyCommandTable()
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        ctx = self.context

        def go_to_top() -> None:
            ctx.vertical.jump_absolute(0)
            ctx.scheduler.start()

        def go_to_bottom() -> None:
            bottom = ctx.document_height() - ctx.viewport_height()
            ctx.vertical.jump_absolute(max(0.0, bottom))
            ctx.scheduler.start()

        def half_page_down() -> None:
            ctx.vertical.jump_relative(ctx.viewport_height() / 2)
            ctx.scheduler.start()

        def half_page_up() -> None:
            ctx.vertical.jump_relative(-ctx.viewport_height() / 2)
            ctx.scheduler.start()

        ctx.recognizer.register("gg", go_to_top)
        self.commands.register_bindings(
            KeyBinding(("G",), go_to_bottom),
            KeyBinding(("d",), half_page_down),
            KeyBinding(("u",), half_page_up),
        )

    def register_key(self, sequence: str, action: Callable[[], None]) -> None:
        """Bind a single key or a multi-key sequence to ``action``."""
        if not sequence:
            raise ValueError("sequence must be non-empty")
        if len(sequence) > 1:
            self.context.recognizer.register(sequence, action)
            return
        if sequence in self.commands:
            logger.debug("rebinding single-key command %r", sequence)
        self.commands.register(sequence, action)

    def _axis_for_key(self, key: str) -> ScrollAxis | None:
        if key not in HOLD_KEYS:
            return None
        if key in VERTICAL_HOLD_KEYS:
            return self.context.vertical
        if key in HORIZONTAL_HOLD_KEYS:
            return self.context.horizontal
        return None

    def _open_hints(self, new_tab: bool) -> None:
        ctx = self.context
        if ctx.hints.active:
            return
        if not ctx.hints.open(ctx.discover_targets(), new_tab=new_tab):
            logger.debug("no hint targets discovered")

    def handle_key_down(self, key: str, is_text_editable_target: bool = False) -> bool:
        """Handle one key-down and return ``True`` when it was consumed."""
        ctx = self.context

        if is_text_editable_target:
            if key == ESCAPE_KEY:
                ctx.blur_active_element()
                return True
            return False

        if key == HELP_TOGGLE_KEY:
            if not ctx.help_view.is_visible():
                ctx.hints.close()
            ctx.help_view.toggle()
            return True

        if ctx.help_view.is_visible():
            if key == ESCAPE_KEY:
                ctx.help_view.hide()
                return True
            return False

        if ctx.hints.active and ctx.hints.consume_key(key):
            return True

        if key == HINT_KEY:
            self._open_hints(new_tab=False)
            return True
        if key == HINT_NEW_TAB_KEY:
            self._open_hints(new_tab=True)
            return True

        if ctx.recognizer.handle_key(key):
            return True

        if self.commands.dispatch(key):
            return True

        axis = self._axis_for_key(key)
        if axis is not None:
            axis.hold_start(direction_for_key(key))
            ctx.scheduler.start()
            return True

        return False

    def handle_key_up(self, key: str) -> None:
        axis = self._axis_for_key(key)
        if axis is not None:
            axis.hold_end(direction_for_key(key))
