"""
Built-in actions common to all modes.
"""

from ..info import STATUS
from ..mode import Mode
from .base import Action, ActionContext, ActionType, builtin


@builtin(ActionType.INFO)
def switch_info(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """Switch the info section."""
    ctx.info.switch(action.params)
    ctx.ui.request_redraw()


@builtin(ActionType.STATUS)
def set_status(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """Show a message in the status line."""
    ctx.info.update(STATUS, action.params)
    ctx.ui.request_redraw()


@builtin(ActionType.FULLSCREEN)
def toggle_fullscreen(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """Toggle fullscreen."""
    ctx.ui.toggle_fullscreen()


@builtin(ActionType.MODE)
def switch_mode(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """Switch to another mode."""
    ctx.app.switch_mode(action.params)


@builtin(ActionType.MARK)
def toggle_mark(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """Mark/unmark the current image."""
    current = mode.get_current()
    if current is None:
        ctx.info.update(STATUS, "No image")
    else:
        ctx.info.update_mark(current.toggle_marked())
    ctx.ui.request_redraw()


@builtin(ActionType.HELP)
def toggle_help(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """Show/hide the keybinding help."""
    if ctx.help.is_visible():
        ctx.help.hide()
    else:
        ctx.help.show(mode.get_keybinds())
    ctx.ui.request_redraw()


@builtin(ActionType.EXIT)
def exit_app(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """Exit the application, closing the help first if it is open."""
    if ctx.help.is_visible():
        ctx.help.hide()
        ctx.ui.request_redraw()
    else:
        ctx.app.exit(0)
