import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from typer import Option

from kbake.bake import BakeInputs, bake as bake_manifests
from kbake.config import ConfigFile
from kbake.engines import RenderError, RenderType, UnknownRenderTypeError
from kbake.tools.exec import ToolError, ToolNotFoundError

from . import app


@app.command()
def bake(
    render_type: RenderType = Option(
        ...,
        envvar="INPUT_RENDERTYPE",
        case_sensitive=False,
        help="The engine to render the manifests with.",
    ),
    helm_chart: Optional[str] = Option(
        None, envvar="INPUT_HELMCHART", help="The Helm chart to render (`helm2` and `helm3`)."
    ),
    release_name: Optional[str] = Option(
        None, envvar="INPUT_RELEASENAME", help="The Helm release name (`helm2` and `helm3`)."
    ),
    namespace: Optional[str] = Option(
        None, envvar="INPUT_NAMESPACE", help="The namespace to render the Helm release into (`helm2` and `helm3`)."
    ),
    override_files: Optional[str] = Option(
        None,
        envvar="INPUT_OVERRIDEFILES",
        help="Newline-delimited list of Helm values files (`helm2` and `helm3`).",
    ),
    overrides: Optional[str] = Option(
        None,
        envvar="INPUT_OVERRIDES",
        help="Newline-delimited list of `name:value` pairs to pass to Helm with `--set` (`helm2` and `helm3`).",
    ),
    docker_compose_file: Optional[Path] = Option(
        None, envvar="INPUT_DOCKERCOMPOSEFILE", help="The Docker Compose file to convert (`kompose`)."
    ),
    kustomization_path: Optional[Path] = Option(
        None, envvar="INPUT_KUSTOMIZATIONPATH", help="The directory containing the kustomization (`kustomize`)."
    ),
    variable: Optional[str] = Option(
        None, help="The pipeline variable to publish the manifest path as. Overrides the configuration file."
    ),
    config_file: Optional[Path] = Option(
        None,
        "--config",
        envvar="KBAKE_CONFIG",
        help="Path to the `kbake.yaml` to use. If not set, it will be searched in the current directory and its "
        "parents.",
    ),
) -> None:
    """
    Bake the source into a single Kubernetes manifest file and publish its path as a pipeline variable.
    """

    config = ConfigFile.load(config_file).config
    if variable:
        config.variable = variable
    runner = config.get_runner()

    inputs = BakeInputs(
        render_type=render_type,
        helm_chart=helm_chart,
        release_name=release_name,
        namespace=namespace,
        override_files=override_files,
        overrides=overrides,
        docker_compose_file=docker_compose_file,
        kustomization_path=kustomization_path,
    )

    try:
        bake_manifests(inputs, config, runner)
    except (RenderError, UnknownRenderTypeError, ToolError, ToolNotFoundError) as exc:
        logger.opt(exception=exc).debug("Bake failed")
        runner.set_failed(str(exc))
        sys.exit(1)
