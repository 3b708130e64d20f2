"""
Text info bar.

Holds the status line, the mark indicator and the currently displayed
info section.
"""

import logging
from dataclasses import dataclass, field

from .imagelist import Image

logger = logging.getLogger(__name__)

# Info bar fields
STATUS = "status"
MARK = "mark"

DEFAULT_SECTIONS = ["off", "brief", "full"]


@dataclass
class InfoBar:
    """Status/info bar state."""
    sections: list[str] = field(default_factory=lambda: list(DEFAULT_SECTIONS))
    section: str = ""
    fields: dict[str, str] = field(default_factory=dict)
    mark: bool = False

    def __post_init__(self) -> None:
        if not self.sections:
            self.sections = list(DEFAULT_SECTIONS)
        if self.section not in self.sections:
            self.section = self.sections[-1]

    @property
    def status(self) -> str:
        return self.fields.get(STATUS, "")

    def update(self, name: str, text: str) -> None:
        """Set text of an info field."""
        self.fields[name] = text

    def update_mark(self, marked: bool) -> None:
        """Set the mark indicator."""
        self.mark = marked

    def switch(self, name: str) -> None:
        """
        Switch the displayed section.

        An empty name cycles to the next section in order.
        """
        if not name:
            pos = self.sections.index(self.section)
            self.section = self.sections[(pos + 1) % len(self.sections)]
        elif name in self.sections:
            self.section = name
        else:
            logger.warning("Unknown info mode: %s", name)
            self.update(STATUS, f"Unknown info mode: {name}")
            return
        logger.debug("Info section: %s", self.section)

    def render(self, image: Image | None, position: str = "") -> list[str]:
        """Build the text lines for the current frame."""
        lines: list[str] = []
        if self.section != "off" and image is not None:
            title = f"{image.source}"
            if self.mark:
                title = f"[*] {title}"
            lines.append(title)
            if self.section == "full" and position:
                lines.append(f"Image: {position}")
        status = self.status
        if status:
            lines.append(status)
        return lines
