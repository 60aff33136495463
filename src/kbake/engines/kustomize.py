from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from kbake.engines import RenderEngine, RenderError
from kbake.tools.kubectl import Kubectl, supports_kustomize


@dataclass
class KustomizeRenderEngine(RenderEngine):
    """
    Builds a kustomization with `kubectl kustomize`.
    """

    kubectl: Kubectl
    path: Path | None

    def check_kubectl(self) -> None:
        version = self.kubectl.version()
        logger.debug("kubectl client version: {}", version)
        if not supports_kustomize(version):
            raise RenderError(
                self, "kubectl client version equal to v1.14 or higher is required to use kustomize features"
            )

    def bake(self, output: Path) -> None:
        if self.path is None or not str(self.path).strip():
            raise RenderError(self, "Kustomization path not supplied")

        self.check_kubectl()
        logger.info("[command] {} kustomize {}", self.kubectl.path, self.path)
        output.write_text(self.kubectl.kustomize(self.path))
