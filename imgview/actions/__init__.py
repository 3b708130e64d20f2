"""
Action system for the image viewer.

Provides the Action type, action parsing, ActionContext and the @builtin
decorator for registering handlers.
"""

from .base import (
    Action,
    ActionContext,
    ActionType,
    action_typename,
    builtin,
    get_builtin_handlers,
    parse_action,
    parse_actions,
)

__all__ = [
    "Action",
    "ActionContext",
    "ActionType",
    "action_typename",
    "builtin",
    "get_builtin_handlers",
    "parse_action",
    "parse_actions",
]
