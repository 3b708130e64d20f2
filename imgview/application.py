"""
Application: owns the modes and the collaborators, turns keys into actions.
"""

import logging
from typing import TextIO

from .actions.base import ActionContext
from .config import Config
from .dispatcher import dispatch
from .imagelist import ImageList
from .info import STATUS, InfoBar
from .mode import ViewerMode
from .shellcmd import ShellEngine
from .ui import ConsoleUi, HelpOverlay

logger = logging.getLogger(__name__)


class Application:
    """
    Headless viewer application.

    Keys are read one per line from a text stream, looked up in the active
    mode's keybindings, and the bound actions are dispatched in order.
    """

    def __init__(
        self,
        config: Config,
        images: ImageList,
        ui: ConsoleUi | None = None,
        shell: ShellEngine | None = None,
    ):
        self.config = config
        self.images = images
        self.running = True
        self.exit_code = 0

        self.ui = ui or ConsoleUi()
        if self.ui.render is None:
            self.ui.render = self.render
        info = InfoBar(sections=list(config.info.sections))

        self.modes = {
            name: ViewerMode(name, images, keybinds, info=info, ui=self.ui)
            for name, keybinds in config.keys.items()
        }
        if config.general.mode not in self.modes:
            raise ValueError(f"Unknown mode: {config.general.mode}")
        self.mode = self.modes[config.general.mode]

        self.ctx = ActionContext(
            images=images,
            info=info,
            help=HelpOverlay(),
            ui=self.ui,
            app=self,
            shell=shell or ShellEngine(timeout=config.general.exec_timeout),
            max_status=config.general.max_status,
        )

    def switch_mode(self, name: str) -> None:
        """Activate another mode, keeping the current image."""
        new_mode = self.modes.get(name)
        if new_mode is None:
            logger.warning("Unknown mode: %s", name)
            self.ctx.info.update(STATUS, f"Unknown mode: {name}")
        else:
            current = self.mode.get_current()
            if current is not None and not current.hidden:
                new_mode.current = current
            self.mode = new_mode
            logger.info("Switched to %s mode", name)
        self.ui.request_redraw()

    def exit(self, code: int) -> None:
        """Stop the main loop with the given exit code."""
        self.exit_code = code
        self.running = False

    def handle_key(self, key: str) -> None:
        """Dispatch all actions bound to a key in the active mode."""
        actions = self.mode.get_keybinds().get(key)
        if not actions:
            logger.debug("Key %s is not bound in %s mode", key, self.mode.name)
            return
        for action in actions:
            dispatch(self.ctx, self.mode, action)
            if not self.running:
                break
        # Mark indicator follows the image shown after navigation
        current = self.mode.get_current()
        self.ctx.info.update_mark(current is not None and current.marked)

    def render(self) -> list[str]:
        """Text lines of the current frame."""
        lines = [f"[{self.mode.name}]"]
        lines.extend(self.ctx.info.render(self.mode.get_current(), self.mode.position()))
        if self.ctx.help.is_visible():
            lines.extend(self.ctx.help.lines)
        return lines

    def run(self, stream: TextIO) -> int:
        """
        Process keys until the input ends or exit is requested.

        Returns:
            The application exit code.
        """
        self.ui.request_redraw()
        self.ui.flush()
        for line in stream:
            key = line.strip()
            if key:
                self.handle_key(key)
                self.ui.flush()
            if not self.running:
                break
        return self.exit_code
