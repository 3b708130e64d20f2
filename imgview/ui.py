"""
Console user interface: frame output and the help overlay.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, TextIO

if TYPE_CHECKING:
    from .actions.base import Action

logger = logging.getLogger(__name__)


@dataclass
class HelpOverlay:
    """Keybinding help shown over the image."""
    visible: bool = False
    lines: list[str] = field(default_factory=list)

    def is_visible(self) -> bool:
        return self.visible

    def show(self, keybinds: dict[str, list["Action"]]) -> None:
        """Populate the overlay from a keybinding table and show it."""
        self.lines = [
            f"{key}: {'; '.join(str(a) for a in actions)}"
            for key, actions in sorted(keybinds.items())
        ]
        self.visible = True

    def hide(self) -> None:
        self.visible = False
        self.lines = []


@dataclass
class ConsoleUi:
    """
    Text stand-in for the viewer window.

    Redraw requests are collected and served by flush(), once per
    processed input event.
    """
    render: Callable[[], list[str]] | None = None
    stream: TextIO | None = None
    fullscreen: bool = False
    redraw_pending: bool = False
    frames: int = 0

    def toggle_fullscreen(self) -> None:
        """Switch between window and fullscreen, redrawing the frame."""
        self.fullscreen = not self.fullscreen
        logger.debug("Fullscreen: %s", self.fullscreen)
        self.request_redraw()

    def request_redraw(self) -> None:
        self.redraw_pending = True

    def flush(self) -> None:
        """Draw the frame if a redraw was requested."""
        if not self.redraw_pending:
            return
        self.redraw_pending = False
        self.frames += 1
        if self.render is None:
            return
        out = self.stream or sys.stdout
        for line in self.render():
            print(line, file=out)
