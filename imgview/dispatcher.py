"""
Action dispatcher: routes actions to built-in handlers or the active mode.
"""

import importlib
import logging

from .actions.base import Action, ActionContext, action_typename, get_builtin_handlers
from .info import STATUS
from .mode import Mode

logger = logging.getLogger(__name__)


def load_builtin_actions() -> None:
    """
    Load all built-in actions.

    This imports the built-in action modules to trigger their @builtin decorators.
    """
    importlib.import_module(".actions.builtin", __package__)
    from .actions import shell  # noqa: F401


load_builtin_actions()


def dispatch(ctx: ActionContext, mode: Mode, action: Action) -> None:
    """
    Handle a single action in the context of the active mode.

    Actions common to all modes are handled here, anything else is passed
    to the mode itself.

    Args:
        ctx: Application collaborators.
        mode: The active mode.
        action: The action to handle.
    """
    logger.debug("[%s] %s", mode.name, action)

    handler = get_builtin_handlers().get(action.type)
    if handler is not None:
        handler(ctx, mode, action)
        return

    if not mode.handle_action(action):
        logger.debug("Unhandled action %s in mode %s", action, mode.name)
        ctx.info.update(STATUS, f"Unhandled action: {action_typename(action)}")
        ctx.ui.request_redraw()
