import pytest

from imgview.actions.base import Action, ActionType
from imgview.dispatcher import dispatch
from imgview.imagelist import ImageList
from imgview.mode import ViewerMode


class NullMode:
    """Mode that handles nothing on its own."""
    name = "null"

    def __init__(self):
        self.seen = []

    def get_current(self):
        return None

    def get_keybinds(self):
        return {}

    def handle_action(self, action):
        self.seen.append(action)
        return False


def test_info_switches_section(ctx, mode):
    dispatch(ctx, mode, Action(ActionType.INFO, "brief"))

    assert ctx.info.section == "brief"
    assert ctx.ui.redraw_pending


def test_status_is_set_verbatim(ctx, mode):
    dispatch(ctx, mode, Action(ActionType.STATUS, "  Hello, world  "))

    assert ctx.info.status == "  Hello, world  "
    assert ctx.ui.redraw_pending


def test_fullscreen_toggles(ctx, mode):
    dispatch(ctx, mode, Action(ActionType.FULLSCREEN))
    assert ctx.ui.fullscreen

    dispatch(ctx, mode, Action(ActionType.FULLSCREEN))
    assert not ctx.ui.fullscreen


def test_mode_switch_goes_to_app(ctx, mode, app):
    dispatch(ctx, mode, Action(ActionType.MODE, "gallery"))

    assert app.modes == ["gallery"]


def test_mark_toggles_current_image(ctx, mode, images):
    dispatch(ctx, mode, Action(ActionType.MARK))

    assert images[0].marked
    assert ctx.info.mark
    assert ctx.ui.redraw_pending

    dispatch(ctx, mode, Action(ActionType.MARK))

    assert not images[0].marked
    assert not ctx.info.mark


def test_mark_without_image(ctx):
    empty = ViewerMode("viewer", ImageList(), {})

    dispatch(ctx, empty, Action(ActionType.MARK))

    assert ctx.info.status == "No image"


def test_help_toggles_with_keybinds(ctx, mode):
    dispatch(ctx, mode, Action(ActionType.HELP))

    assert ctx.help.is_visible()
    assert ctx.help.lines == ["m: mark; next_file", "q: exit"]
    assert ctx.ui.redraw_pending

    ctx.ui.redraw_pending = False
    dispatch(ctx, mode, Action(ActionType.HELP))

    assert not ctx.help.is_visible()
    assert ctx.ui.redraw_pending


def test_exit_closes_help_first(ctx, mode, app):
    dispatch(ctx, mode, Action(ActionType.HELP))
    dispatch(ctx, mode, Action(ActionType.EXIT))

    assert not ctx.help.is_visible()
    assert app.exit_codes == []

    dispatch(ctx, mode, Action(ActionType.EXIT))

    assert app.exit_codes == [0]


def test_mode_specific_action_is_delegated(ctx, mode, images):
    dispatch(ctx, mode, Action(ActionType.NEXT_FILE))

    assert mode.get_current() is images[1]
    assert ctx.info.status == ""


@pytest.mark.parametrize("action_type", [ActionType.NEXT_FILE, ActionType.RELOAD])
def test_unhandled_action_sets_status(ctx, action_type):
    null_mode = NullMode()

    dispatch(ctx, null_mode, Action(action_type))

    assert null_mode.seen == [Action(action_type)]
    assert ctx.info.status == f"Unhandled action: {action_type.value}"
    assert ctx.ui.redraw_pending


def test_reload_sets_status(ctx, mode):
    dispatch(ctx, mode, Action(ActionType.RELOAD))

    assert ctx.info.status == "Reloaded"
    assert ctx.ui.redraw_pending


def test_navigation_requests_redraw(ctx, mode):
    dispatch(ctx, mode, Action(ActionType.LAST_FILE))

    assert ctx.ui.redraw_pending
