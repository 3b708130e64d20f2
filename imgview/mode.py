"""
Viewer modes.

A mode owns the current image position and its own keybindings, and handles
the actions that only make sense inside it (navigation).
"""

import logging
from typing import Protocol

from .actions.base import Action, ActionType
from .imagelist import Image, ImageList
from .info import STATUS, InfoBar
from .ui import ConsoleUi

logger = logging.getLogger(__name__)


class Mode(Protocol):
    """Capabilities the dispatcher needs from the active mode."""
    name: str

    def get_current(self) -> Image | None: ...

    def get_keybinds(self) -> dict[str, list[Action]]: ...

    def handle_action(self, action: Action) -> bool: ...


class ViewerMode:
    """
    Single image navigation mode.

    The info bar and UI are optional: without them the mode only tracks
    the current image.
    """

    def __init__(
        self,
        name: str,
        images: ImageList,
        keybinds: dict[str, list[Action]],
        info: InfoBar | None = None,
        ui: ConsoleUi | None = None,
    ):
        self.name = name
        self.images = images
        self.keybinds = keybinds
        self.info = info
        self.ui = ui
        self.current = self._visible(images.first(), forward=True)

    def get_current(self) -> Image | None:
        return self.current

    def get_keybinds(self) -> dict[str, list[Action]]:
        return self.keybinds

    def handle_action(self, action: Action) -> bool:
        """
        Handle a mode-specific action.

        Returns:
            True if the action belongs to this mode.
        """
        if action.type == ActionType.FIRST_FILE:
            self._select(self._visible(self.images.first(), forward=True))
        elif action.type == ActionType.LAST_FILE:
            self._select(self._visible(self.images.last(), forward=False))
        elif action.type == ActionType.NEXT_FILE:
            if self.current is not None:
                self._select(self.images.next(self.current, True))
        elif action.type == ActionType.PREV_FILE:
            if self.current is not None:
                self._select(self.images.prev(self.current, True))
        elif action.type == ActionType.SKIP_FILE:
            self._skip()
        elif action.type == ActionType.RELOAD:
            logger.info("Reload %s", self.current)
            if self.info is not None:
                self.info.update(STATUS, "Reloaded")
        else:
            return False
        if self.ui is not None:
            self.ui.request_redraw()
        return True

    def position(self) -> str:
        """Position of the current image as 'N of M'."""
        if self.current is None:
            return ""
        return f"{self.images.index(self.current) + 1} of {len(self.images)}"

    def _select(self, img: Image | None) -> None:
        # Stay in place at the list boundaries
        if img is not None:
            self.current = img

    def _skip(self) -> None:
        """Hide the current image and move to a neighbour."""
        if self.current is None:
            return
        skipped = self.current
        skipped.hidden = True
        self.current = self.images.next(skipped, True) or self.images.prev(skipped, True)
        logger.info("Skipped %s", skipped.source)

    def _visible(self, img: Image | None, forward: bool) -> Image | None:
        if img is None or not img.hidden:
            return img
        if forward:
            return self.images.next(img, True)
        return self.images.prev(img, True)
