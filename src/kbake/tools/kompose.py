from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from kbake.tools.exec import ToolError, run


class KomposeError(ToolError):
    pass


@dataclass
class Kompose:
    """
    Wrapper for interfacing with `kompose`.
    """

    path: str = "kompose"

    def convert(self, compose_file: Path, output: Path) -> None:
        """
        Convert a Docker Compose file to Kubernetes manifests, written to *output* by Kompose itself.
        """

        result = run([self.path, "convert", "-f", str(compose_file), "-o", str(output)], error=KomposeError)
        # Kompose reports progress on stderr even when it succeeds.
        if result.stderr.strip():
            logger.debug("Kompose reported: {}", result.stderr.strip())
