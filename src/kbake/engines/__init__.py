"""
This package contains the render engines that turn a source description (a Helm chart, a Docker Compose file or a
Kustomize overlay) into a single flattened Kubernetes manifest file.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
import textwrap
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kbake.bake import BakeInputs
    from kbake.config import ToolPaths


class RenderType(str, Enum):
    HELM2 = "helm2"
    HELM3 = "helm3"
    KOMPOSE = "kompose"
    KUSTOMIZE = "kustomize"


@dataclass
class RenderError(Exception):
    """
    Raised when the inputs of a render engine are invalid or the rendering tool is not usable.
    """

    engine: "RenderEngine"
    message: str

    def __str__(self) -> str:
        if "\n" in self.message:
            message = "\n\n" + textwrap.indent(self.message, "  ")
        else:
            message = self.message
        return f"Error baking manifests with {type(self.engine).__name__}: {message}"


@dataclass
class UnknownRenderTypeError(Exception):
    render_type: str

    def __str__(self) -> str:
        choices = ", ".join(t.value for t in RenderType)
        return f"Unknown render type {self.render_type!r}, expected one of {choices}"


class RenderEngine(ABC):
    """
    Base class for render engines.
    """

    @abstractmethod
    def bake(self, output: Path) -> None:
        """
        Render the source into a flattened Kubernetes manifest file.

        Args:
            output: The file to write the manifest to. The file does not exist yet.
        """

        raise NotImplementedError


def create_render_engine(render_type: RenderType | str, inputs: "BakeInputs", tools: "ToolPaths") -> RenderEngine:
    """
    Create the render engine for the given render type.

    Args:
        render_type: One of the `RenderType` values.
        inputs: The task inputs. Each engine only looks at the inputs that apply to it.
        tools: Locations of the external tools.
    Raises:
        UnknownRenderTypeError: If *render_type* is not supported.
    """

    from kbake.engines.helm import HelmRenderEngine
    from kbake.engines.kompose import KomposeRenderEngine
    from kbake.engines.kustomize import KustomizeRenderEngine
    from kbake.inputs import get_delimited
    from kbake.tools.helm import Helm, parse_overrides
    from kbake.tools.kompose import Kompose
    from kbake.tools.kubectl import Kubectl

    try:
        render_type = RenderType(render_type)
    except ValueError:
        raise UnknownRenderTypeError(str(render_type))

    match render_type:
        case RenderType.HELM2 | RenderType.HELM3:
            return HelmRenderEngine(
                helm=Helm(
                    path=tools.helm,
                    version="2" if render_type == RenderType.HELM2 else "3",
                    namespace=inputs.namespace or None,
                ),
                chart=inputs.helm_chart,
                release_name=inputs.release_name or None,
                override_files=get_delimited(inputs.override_files),
                overrides=parse_overrides(get_delimited(inputs.overrides)),
            )
        case RenderType.KOMPOSE:
            return KomposeRenderEngine(kompose=Kompose(tools.kompose), compose_file=inputs.docker_compose_file)
        case RenderType.KUSTOMIZE:
            return KustomizeRenderEngine(kubectl=Kubectl(tools.kubectl), path=inputs.kustomization_path)
