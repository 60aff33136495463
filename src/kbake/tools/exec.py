from dataclasses import dataclass
from pathlib import Path
import shlex
import subprocess

from loguru import logger


@dataclass
class ToolError(Exception):
    """
    Raised when an external tool exits with a non-zero status code.
    """

    command: list[str]
    statuscode: int
    stderr: str | None = None

    def __str__(self) -> str:
        message = f"{Path(self.command[0]).name} command failed with status code {self.statuscode}"
        if self.stderr and self.stderr.strip():
            message += f": {self.stderr.strip()}"
        return message


@dataclass
class ToolNotFoundError(Exception):
    """
    Raised when the executable of an external tool cannot be found.
    """

    tool: str

    def __str__(self) -> str:
        return f"Could not find '{self.tool}'. Make sure it is installed and on the PATH, or configure its location."


def run(command: list[str], error: type[ToolError] = ToolError) -> "subprocess.CompletedProcess[str]":
    """
    Run a command and capture its output as text.

    Args:
        command: The command to run. The first element is the executable.
        error: The exception type to raise if the command exits with a non-zero status code.
    Raises:
        ToolNotFoundError: If the executable does not exist.
        ToolError: If the command failed (or whichever subclass was passed as *error*).
    """

    logger.debug("Running command: $ {}", " ".join(map(shlex.quote, command)))
    try:
        result = subprocess.run(command, capture_output=True, text=True)
    except FileNotFoundError:
        raise ToolNotFoundError(command[0])

    if result.returncode != 0:
        raise error(command, result.returncode, result.stderr)

    return result
