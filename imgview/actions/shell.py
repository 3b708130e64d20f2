"""
Built-in external command actions.
"""

import logging
import os
import sys

from ..imagelist import ImageList
from ..info import STATUS
from ..mode import Mode
from ..shellcmd import TIMEOUT
from .base import Action, ActionContext, ActionType, builtin

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


def trim_status(msg: str, max_status: int) -> str:
    """
    Cut a status message down to max_status characters.

    A trimmed message always ends with an ellipsis, so its length is exactly
    max_status.
    """
    if len(msg) <= max_status:
        return msg
    if max_status < len(ELLIPSIS):
        return ELLIPSIS[:max(max_status, 0)]
    return msg[:max_status - len(ELLIPSIS)] + ELLIPSIS


def format_status(cmd: str, rc: int, out: bytes | None, err: bytes | None) -> str:
    """Build the status message for a finished command."""
    if rc == 0:
        if out:
            return out.decode(errors="replace")
        return f"Success: {cmd}"
    if rc == TIMEOUT:
        return f"Child process timed out: {cmd}"

    msg = f"Error {rc}: "
    if err:
        msg += err.decode(errors="replace")
    elif out:
        msg += out.decode(errors="replace")
    else:
        msg += os.strerror(rc)
    return msg


def mirror_output(stream, data: bytes) -> None:
    """Write captured bytes unchanged to a process stream."""
    stream.flush()
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        # text-only replacement stream (e.g. io.StringIO)
        stream.write(data.decode(errors="replace"))
    else:
        buffer.write(data)
        buffer.flush()
    stream.flush()


def execute_cmd(ctx: ActionContext, expr: str, paths: list[str] | tuple[str, ...]) -> int | None:
    """
    Execute system command for the specified images.

    Args:
        ctx: Action context.
        expr: Command expression.
        paths: File paths to substitute into the expression.

    Returns:
        The command result code, or None if no command was built.
    """
    cmd = ctx.shell.build(expr, paths)
    if not cmd:
        ctx.info.update(STATUS, "Error: no command to execute")
        ctx.ui.request_redraw()
        return None

    with ctx.shell.run(cmd) as outcome:
        # duplicate output to stdout/stderr
        if outcome.stdout:
            mirror_output(sys.stdout, outcome.stdout)
        if outcome.stderr:
            mirror_output(sys.stderr, outcome.stderr)

        rc = outcome.rc
        if rc != 0:
            logger.info("Command %r finished with code %d", cmd, rc)
        msg = format_status(cmd, rc, outcome.stdout, outcome.stderr)
        ctx.info.update(STATUS, trim_status(msg, ctx.max_status))

    ctx.ui.request_redraw()
    return rc


def collect_marked_paths(images: ImageList) -> tuple[str, ...] | None:
    """
    Get source paths of all marked images in list order.

    The returned paths are the images' own source strings and stay valid
    only while the list is not modified.

    Returns:
        Tuple of paths, or None if no image is marked.
    """
    count = 0
    img = images.first()
    while img is not None:
        if img.marked:
            count += 1
        img = images.next(img, False)
    if count == 0:
        return None

    paths: list[str] = [""] * count
    pos = 0
    img = images.first()
    while img is not None:
        if img.marked:
            paths[pos] = img.source
            pos += 1
        img = images.next(img, False)
    return tuple(paths)


@builtin(ActionType.EXEC)
def exec_current(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """Execute command for the current image."""
    current = mode.get_current()
    if current is None:
        ctx.info.update(STATUS, "No image")
        ctx.ui.request_redraw()
        return
    execute_cmd(ctx, action.params, (current.source,))


@builtin(ActionType.EXEC_MARKED)
def exec_marked(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """Execute command for all marked images."""
    paths = collect_marked_paths(ctx.images)
    if paths:
        execute_cmd(ctx, action.params, paths)
