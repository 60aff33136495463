"""
Kbake renders Helm charts, Docker Compose files and Kustomize overlays into a single Kubernetes manifest file and
publishes its path as a pipeline variable.
"""

from enum import Enum
import sys
from loguru import logger
from typer import Option
from kbake.tools.typer import new_typer


app = new_typer(help=__doc__)


from . import bake  # noqa: F401,E402


class LogLevel(str, Enum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@app.callback()
def _callback(
    log_level: LogLevel = Option(
        LogLevel.INFO, "--log-level", "-l", envvar="KBAKE_LOG_LEVEL", help="The log level to use."
    ),
) -> None:
    logger.remove()
    logger.add(sys.stderr, level=log_level.name)
