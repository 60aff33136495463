from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from kbake.config import Config
from kbake.engines import RenderType, create_render_engine
from kbake.runner import PipelineRunner
from kbake.tools.fs import new_manifest_path


@dataclass
class BakeInputs:
    """
    The task inputs. Multi-value inputs are newline-delimited, as the pipeline runner passes them.
    """

    render_type: RenderType | str
    helm_chart: str | None = None
    release_name: str | None = None
    namespace: str | None = None
    override_files: str | None = None
    overrides: str | None = None
    docker_compose_file: Path | None = None
    kustomization_path: Path | None = None


def bake(inputs: BakeInputs, config: Config, runner: PipelineRunner) -> Path:
    """
    Render the manifests selected by *inputs* into a new file and publish its path to the pipeline.

    Returns:
        The path of the baked manifest file.
    """

    engine = create_render_engine(inputs.render_type, inputs, config.tools)

    directory = config.temp_dir or runner.temp_directory()
    directory.mkdir(parents=True, exist_ok=True)
    output = new_manifest_path(directory)

    engine.bake(output)
    logger.info("Baked manifests written to '{}'", output)

    runner.set_variable(config.variable, str(output))
    return output
