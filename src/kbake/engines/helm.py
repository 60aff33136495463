from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from kbake.engines import RenderEngine, RenderError
from kbake.tools.helm import Helm, NameValuePair


@dataclass
class HelmRenderEngine(RenderEngine):
    """
    Renders a Helm chart with `helm template`.
    """

    helm: Helm

    chart: str | None
    """ The chart to render. A local chart directory or archive, or a chart reference that Helm can resolve. """

    release_name: str | None = None

    override_files: list[str] = field(default_factory=list)
    """ Values files, passed with `-f` in order. """

    overrides: list[NameValuePair] = field(default_factory=list)
    """ Individual values, passed with `--set` in order. """

    def bake(self, output: Path) -> None:
        if not self.chart:
            raise RenderError(self, "Helm chart path not supplied")

        logger.info("Rendering Helm chart '{}' with Helm {}", self.chart, self.helm.version)
        manifests = self.helm.template(self.release_name, self.chart, self.override_files, self.overrides)
        output.write_text(manifests)
