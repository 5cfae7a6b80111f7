"""Help view state and text rendering."""

from .help import HelpView, help_lines, render_help_text

__all__ = ["HelpView", "help_lines", "render_help_text"]
