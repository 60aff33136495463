from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from kbake.engines import RenderEngine, RenderError
from kbake.tools.kompose import Kompose


@dataclass
class KomposeRenderEngine(RenderEngine):
    """
    Converts a Docker Compose file with `kompose convert`.
    """

    kompose: Kompose
    compose_file: Path | None

    def bake(self, output: Path) -> None:
        if self.compose_file is None or not str(self.compose_file).strip():
            raise RenderError(self, "Docker Compose file path not supplied")
        if not self.compose_file.is_file():
            raise RenderError(self, f"Docker Compose file '{self.compose_file}' not found")

        logger.info("Converting Docker Compose file '{}' with Kompose", self.compose_file)
        self.kompose.convert(self.compose_file, output)
