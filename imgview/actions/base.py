"""
Base action infrastructure.

Provides the Action type, action string parsing, ActionContext and the
@builtin decorator for registering built-in action handlers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from ..imagelist import ImageList
from ..info import InfoBar
from ..shellcmd import ShellEngine
from ..ui import ConsoleUi, HelpOverlay

if TYPE_CHECKING:
    from ..application import Application
    from ..mode import Mode


class ActionType(Enum):
    """Closed set of action types, valued by their config name."""
    INFO = "info"
    STATUS = "status"
    FULLSCREEN = "fullscreen"
    MODE = "mode"
    EXEC = "exec"
    MARK = "mark"
    EXEC_MARKED = "exec_marked"
    HELP = "help"
    EXIT = "exit"
    # Mode-specific actions
    FIRST_FILE = "first_file"
    LAST_FILE = "last_file"
    PREV_FILE = "prev_file"
    NEXT_FILE = "next_file"
    SKIP_FILE = "skip_file"
    RELOAD = "reload"


@dataclass(frozen=True)
class Action:
    """A single action with its optional parameter string."""
    type: ActionType
    params: str = ""

    def __str__(self) -> str:
        if self.params:
            return f"{self.type.value} {self.params}"
        return self.type.value


def action_typename(action: Action) -> str:
    """Get the textual name of the action type."""
    return action.type.value


def parse_action(text: str) -> Action:
    """
    Parse a single action from its text form.

    The first word is the action type, the rest of the string (stripped)
    becomes the parameters: "exec echo %" -> Action(EXEC, "echo %").

    Raises:
        ValueError: If the text is empty or the type is unknown.
    """
    text = text.strip()
    if not text:
        raise ValueError("Empty action")

    name, _, params = text.partition(" ")
    try:
        action_type = ActionType(name)
    except ValueError:
        raise ValueError(f"Unknown action: {name}") from None

    return Action(type=action_type, params=params.strip())


def parse_actions(text: str) -> list[Action]:
    """Parse a sequence of actions separated by ';'."""
    return [parse_action(part) for part in text.split(";") if part.strip()]


@dataclass
class ActionContext:
    """Collaborators shared by all action handlers."""
    images: ImageList
    info: InfoBar
    help: HelpOverlay
    ui: ConsoleUi
    app: "Application"
    shell: ShellEngine
    max_status: int = 60


ActionHandler = Callable[[ActionContext, "Mode", Action], None]

# Global registry of built-in handlers
_builtin_registry: dict[ActionType, ActionHandler] = {}


def builtin(action_type: ActionType):
    """
    Decorator to register a built-in action handler.

    Usage:
        @builtin(ActionType.HELP)
        def toggle_help(ctx: ActionContext, mode: Mode, action: Action) -> None:
            ...
    """
    def decorator(func: ActionHandler) -> ActionHandler:
        _builtin_registry[action_type] = func
        return func

    return decorator


def get_builtin_handlers() -> dict[ActionType, ActionHandler]:
    """Get a copy of all registered built-in handlers."""
    return _builtin_registry.copy()
