"""
Command-line interface for the image viewer.
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .actions.base import ActionContext, ActionType
from .actions.shell import execute_cmd
from .application import Application
from .config import DEFAULT_KEYS, load_config
from .imagelist import from_paths
from .info import InfoBar
from .logger import setup_logger
from .shellcmd import ShellEngine
from .ui import ConsoleUi, HelpOverlay

logger = logging.getLogger(__name__)

ACTION_HELP = {
    ActionType.INFO: "Switch info section (name, or next if empty)",
    ActionType.STATUS: "Show text in the status line",
    ActionType.FULLSCREEN: "Toggle fullscreen",
    ActionType.MODE: "Switch mode (viewer, gallery)",
    ActionType.EXEC: "Execute shell command, % is replaced by the current file",
    ActionType.MARK: "Mark/unmark the current image",
    ActionType.EXEC_MARKED: "Execute shell command, % is replaced by all marked files",
    ActionType.HELP: "Show/hide the keybinding help",
    ActionType.EXIT: "Exit (closes the help first)",
    ActionType.FIRST_FILE: "Go to the first image",
    ActionType.LAST_FILE: "Go to the last image",
    ActionType.PREV_FILE: "Go to the previous image",
    ActionType.NEXT_FILE: "Go to the next image",
    ActionType.SKIP_FILE: "Hide the current image from the list",
    ActionType.RELOAD: "Reload the current image",
}


def load_or_exit(args: argparse.Namespace):
    """Load the config, reporting errors to the user."""
    try:
        return load_config(Path(args.config) if args.config else None)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: Failed to load config: {e}")
        return None


def cmd_run(args: argparse.Namespace) -> int:
    """Run the viewer, reading key names from stdin."""
    config = load_or_exit(args)
    if config is None:
        return 1

    images = from_paths(getattr(args, "images", None) or [], recursive=args.recursive)
    if not len(images):
        print("Error: No images to view")
        return 1

    try:
        app = Application(config, images)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    logger.info("Loaded %d images", len(images))
    return app.run(sys.stdin)


def cmd_exec(args: argparse.Namespace) -> int:
    """Execute a command expression once for the given images."""
    config = load_or_exit(args)
    if config is None:
        return 1

    images = from_paths(args.images, recursive=args.recursive)
    info = InfoBar(sections=list(config.info.sections))
    ui = ConsoleUi(render=lambda: [info.status])
    ctx = ActionContext(
        images=images,
        info=info,
        help=HelpOverlay(),
        ui=ui,
        app=None,
        shell=ShellEngine(timeout=config.general.exec_timeout),
        max_status=config.general.max_status,
    )

    rc = execute_cmd(ctx, args.expr, tuple(img.source for img in images))
    ui.flush()
    return 0 if rc == 0 else 1


def cmd_list_actions(args: argparse.Namespace) -> int:
    """List available actions."""
    print("Available actions:")
    print()
    for action_type in ActionType:
        print(f"  {action_type.value}: {ACTION_HELP.get(action_type, 'No description')}")
    print()
    print(f"Modes: {', '.join(sorted(DEFAULT_KEYS))}")
    return 0


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="imgview",
        description="Keyboard driven image viewer with shell command actions",
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help="Path to config file (default: built-in settings)",
    )
    parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Read directories recursively",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # run command (default)
    run_parser = subparsers.add_parser("run", help="View images, keys are read from stdin")
    run_parser.add_argument("images", nargs="*", help="Image files or directories")
    run_parser.set_defaults(func=cmd_run)

    # exec command
    exec_parser = subparsers.add_parser("exec", help="Execute a command for images")
    exec_parser.add_argument("expr", help="Command expression, %% is replaced by file paths")
    exec_parser.add_argument("images", nargs="+", help="Image files or directories")
    exec_parser.set_defaults(func=cmd_exec)

    # list-actions command
    list_act_parser = subparsers.add_parser("list-actions", help="List available actions")
    list_act_parser.set_defaults(func=cmd_list_actions)

    args = parser.parse_args()

    # Default to 'run' if no command specified
    if args.command is None:
        args.func = cmd_run

    setup_logger(logging.DEBUG if args.verbose else logging.WARNING)

    # Ensure unbuffered output
    sys.stdout.reconfigure(line_buffering=True)

    sys.exit(args.func(args))
