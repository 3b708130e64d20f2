"""Shared fixtures: a fake command engine and application around real collaborators."""

from dataclasses import dataclass, field

import pytest

from imgview.actions.base import Action, ActionContext, ActionType
from imgview.imagelist import ImageList
from imgview.info import InfoBar
from imgview.mode import ViewerMode
from imgview.shellcmd import CommandOutcome, build_command
from imgview.ui import ConsoleUi, HelpOverlay


@dataclass
class FakeShell:
    """Command engine that records commands and returns a preset outcome."""
    rc: int = 0
    stdout: bytes | None = None
    stderr: bytes | None = None
    commands: list[str] = field(default_factory=list)
    outcomes: list[CommandOutcome] = field(default_factory=list)

    def build(self, expr, paths):
        return build_command(expr, paths)

    def run(self, cmd):
        self.commands.append(cmd)
        outcome = CommandOutcome(rc=self.rc, stdout=self.stdout, stderr=self.stderr)
        self.outcomes.append(outcome)
        return outcome


@dataclass
class FakeApp:
    modes: list[str] = field(default_factory=list)
    exit_codes: list[int] = field(default_factory=list)

    def switch_mode(self, name):
        self.modes.append(name)

    def exit(self, code):
        self.exit_codes.append(code)


@pytest.fixture
def images():
    return ImageList(["/img/a.jpg", "/img/b.png", "/img/c d.gif"])


@pytest.fixture
def shell():
    return FakeShell()


@pytest.fixture
def app():
    return FakeApp()


@pytest.fixture
def ctx(images, shell, app):
    return ActionContext(
        images=images,
        info=InfoBar(),
        help=HelpOverlay(),
        ui=ConsoleUi(),
        app=app,
        shell=shell,
    )


@pytest.fixture
def mode(images, ctx):
    keybinds = {
        "q": [Action(ActionType.EXIT)],
        "m": [Action(ActionType.MARK), Action(ActionType.NEXT_FILE)],
    }
    return ViewerMode("viewer", images, keybinds, info=ctx.info, ui=ctx.ui)
