"""Navigator composition.

Wires two scroll axes, the frame scheduler, the sequence recognizer, the hint
session, and the help view to one ``NavigatorHost``. Host glue forwards native
key events to ``handle_key_down``/``handle_key_up``.
"""

from __future__ import annotations

from collections.abc import Callable

from ..commands import COMMAND_DEFINITIONS, CommandDefinition
from ..hints.session import ElementOperations, HintSession
from ..host import NavigatorHost
from ..input.dispatcher import DispatcherContext, InputDispatcher
from ..input.sequence import SequenceRecognizer
from ..render.help import HelpView
from ..scroll.axis import ScrollAxis
from .config import NavigatorConfig
from .frames import FrameScheduler


class Navigator:
    """Keyboard navigation engine bound to one host document."""

    def __init__(
        self,
        host: NavigatorHost,
        config: NavigatorConfig | None = None,
        *,
        clock: Callable[[], float] | None = None,
        on_help_change: Callable[[bool], None] | None = None,
    ) -> None:
        self.host = host
        self.config = config if config is not None else NavigatorConfig()
        tuning = self.config.tuning

        self.vertical = ScrollAxis(host.get_scroll_y, host.scroll_to_y, tuning)
        self.horizontal = ScrollAxis(host.get_scroll_x, host.scroll_to_x, tuning)

        self.scheduler = FrameScheduler(host.request_frame)
        self.scheduler.register(self.vertical.tick_frame)
        self.scheduler.register(self.horizontal.tick_frame)

        if clock is None:
            self.recognizer = SequenceRecognizer(self.config.sequence_timeout_ms)
        else:
            self.recognizer = SequenceRecognizer(self.config.sequence_timeout_ms, clock=clock)

        self.hints = HintSession(
            ElementOperations(
                activate=host.activate,
                focus=host.focus,
                open_in_new_context=host.open_in_new_context,
            )
        )
        self.help_view = HelpView(on_change=on_help_change)
        self.dispatcher = InputDispatcher(
            DispatcherContext(
                vertical=self.vertical,
                horizontal=self.horizontal,
                scheduler=self.scheduler,
                recognizer=self.recognizer,
                hints=self.hints,
                help_view=self.help_view,
                discover_targets=host.discover_targets,
                blur_active_element=host.blur_active_element,
                viewport_height=host.viewport_height,
                document_height=host.document_height,
            )
        )

    def register_key(self, sequence: str, action: Callable[[], None]) -> None:
        self.dispatcher.register_key(sequence, action)

    def handle_key_down(self, key: str, is_text_editable_target: bool = False) -> bool:
        return self.dispatcher.handle_key_down(key, is_text_editable_target)

    def handle_key_up(self, key: str) -> None:
        self.dispatcher.handle_key_up(key)

    def available_commands(self) -> list[CommandDefinition]:
        return list(COMMAND_DEFINITIONS)
