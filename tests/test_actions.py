import pytest

from imgview.actions.base import Action, ActionType, action_typename, get_builtin_handlers, parse_action, parse_actions
from imgview.dispatcher import load_builtin_actions


def test_parse_action_with_params():
    action = parse_action("exec  echo %  ")

    assert action == Action(ActionType.EXEC, "echo %")
    assert str(action) == "exec echo %"


def test_parse_action_without_params():
    assert parse_action("mark") == Action(ActionType.MARK)
    assert action_typename(parse_action("exit")) == "exit"


def test_parse_unknown_action():
    with pytest.raises(ValueError, match="Unknown action: zoom"):
        parse_action("zoom 200")


def test_parse_empty_action():
    with pytest.raises(ValueError):
        parse_action("  ")


def test_parse_action_sequence():
    actions = parse_actions("exec rm % ; skip_file;")

    assert actions == [Action(ActionType.EXEC, "rm %"), Action(ActionType.SKIP_FILE)]


def test_common_actions_have_builtin_handlers():
    load_builtin_actions()
    handlers = get_builtin_handlers()

    common = {
        ActionType.INFO, ActionType.STATUS, ActionType.FULLSCREEN, ActionType.MODE,
        ActionType.EXEC, ActionType.MARK, ActionType.EXEC_MARKED, ActionType.HELP,
        ActionType.EXIT,
    }
    assert set(handlers) == common
