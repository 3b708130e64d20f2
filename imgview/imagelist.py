"""
Ordered list of images.

Images are kept in a plain list; traversal goes through first()/next() so that
hidden images can be skipped the same way everywhere.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".tif", ".tiff",
    ".avif", ".heic", ".svg", ".jxl", ".exr", ".qoi",
})


@dataclass(eq=False)
class Image:
    """A single viewable image."""
    source: str
    marked: bool = False
    hidden: bool = False

    def toggle_marked(self) -> bool:
        """Flip the mark flag and return the new state."""
        self.marked = not self.marked
        return self.marked

    def __str__(self) -> str:
        return self.source


class ImageList:
    """Ordered, forward/backward traversable list of images."""

    def __init__(self, sources: list[str] | None = None):
        self._images = [Image(source=src) for src in sources or []]
        # identity -> position, the list is never reordered
        self._positions = {id(img): pos for pos, img in enumerate(self._images)}

    def __len__(self) -> int:
        return len(self._images)

    def __iter__(self) -> Iterator[Image]:
        return iter(self._images)

    def __getitem__(self, index: int) -> Image:
        return self._images[index]

    def index(self, img: Image) -> int:
        """Get position of the image in the list."""
        pos = self._positions.get(id(img))
        if pos is None or self._images[pos] is not img:
            raise ValueError(f"Image not in list: {img.source}")
        return pos

    def first(self) -> Image | None:
        """Get the first image (hidden ones included)."""
        return self._images[0] if self._images else None

    def last(self) -> Image | None:
        """Get the last image (hidden ones included)."""
        return self._images[-1] if self._images else None

    def next(self, img: Image, skip_hidden: bool) -> Image | None:
        """Get the image after `img`, or None at the end of the list."""
        for pos in range(self.index(img) + 1, len(self._images)):
            entry = self._images[pos]
            if not (skip_hidden and entry.hidden):
                return entry
        return None

    def prev(self, img: Image, skip_hidden: bool) -> Image | None:
        """Get the image before `img`, or None at the start of the list."""
        for pos in range(self.index(img) - 1, -1, -1):
            entry = self._images[pos]
            if not (skip_hidden and entry.hidden):
                return entry
        return None


def is_image_file(path: Path) -> bool:
    """Check whether the file extension is a supported image format."""
    return path.suffix.lower() in IMAGE_EXTENSIONS


def from_paths(paths: list[str], recursive: bool = False) -> ImageList:
    """
    Build an image list from command line paths.

    Files are taken as given, directories are expanded to the image files
    they contain (sorted by path).

    Args:
        paths: Files and/or directories.
        recursive: Descend into subdirectories.

    Returns:
        ImageList with the collected sources.
    """
    sources: list[str] = []
    for arg in paths:
        path = Path(arg)
        if path.is_dir():
            pattern = "**/*" if recursive else "*"
            found = sorted(p for p in path.glob(pattern) if p.is_file() and is_image_file(p))
            sources.extend(str(p) for p in found)
        elif path.exists():
            sources.append(str(path))
        else:
            logger.warning("File not found: %s", path)
    return ImageList(sources)
