"""
Shell command engine.

Builds commands from expressions with file paths substituted in place of '%'
and runs them through the system shell, capturing their output.
"""

import logging
import shlex
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Result code reported when the child process exceeds the timeout
TIMEOUT = -1

DEFAULT_TIMEOUT = 10.0


@dataclass
class CommandOutcome:
    """
    Result of a single command execution.

    Used as a context manager: leaving the block releases the captured
    output buffers.
    """
    rc: int
    stdout: bytes | None = None
    stderr: bytes | None = None
    released: bool = False

    def release(self) -> None:
        """Drop the captured output buffers."""
        self.stdout = None
        self.stderr = None
        self.released = True

    def __enter__(self) -> "CommandOutcome":
        return self

    def __exit__(self, *exc_info) -> None:
        self.release()


def build_command(expr: str, paths: list[str] | tuple[str, ...]) -> str | None:
    """
    Substitute file paths into a command expression.

    Every '%' is replaced by all paths, shell-quoted and separated by spaces.
    A doubled '%%' stands for a literal '%'.

    Args:
        expr: Command expression, e.g. "rm %".
        paths: File paths to substitute.

    Returns:
        The command string, or None if there is nothing to execute.
    """
    if not expr or not expr.strip() or not paths:
        return None

    quoted = " ".join(shlex.quote(path) for path in paths)
    parts = []
    pos = 0
    while pos < len(expr):
        char = expr[pos]
        if char == "%":
            if expr.startswith("%%", pos):
                parts.append("%")
                pos += 2
                continue
            parts.append(quoted)
        else:
            parts.append(char)
        pos += 1

    return "".join(parts).strip() or None


def run_command(cmd: str, timeout: float = DEFAULT_TIMEOUT) -> CommandOutcome:
    """
    Execute a command in the system shell.

    Args:
        cmd: Command to execute.
        timeout: Seconds to wait for the child before giving up.

    Returns:
        CommandOutcome with the exit status (0 on success, TIMEOUT on timeout,
        128+signal if killed, errno if the shell could not be started).
    """
    logger.debug("Executing: %s", cmd)
    try:
        result = subprocess.run(
            cmd,
            shell=True,
            capture_output=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        logger.warning("Command timed out after %ss: %s", timeout, cmd)
        return CommandOutcome(rc=TIMEOUT, stdout=e.stdout or None, stderr=e.stderr or None)
    except OSError as e:
        logger.error("Error running command %r: %s", cmd, e)
        return CommandOutcome(rc=e.errno or 1)

    rc = result.returncode
    if rc < 0:
        logger.debug("Command killed by signal %d", -rc)
        rc = 128 - rc

    return CommandOutcome(rc=rc, stdout=result.stdout or None, stderr=result.stderr or None)


@dataclass
class ShellEngine:
    """Command engine with a fixed execution timeout."""
    timeout: float = DEFAULT_TIMEOUT

    def build(self, expr: str, paths: list[str] | tuple[str, ...]) -> str | None:
        return build_command(expr, paths)

    def run(self, cmd: str) -> CommandOutcome:
        return run_command(cmd, self.timeout)
