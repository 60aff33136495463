from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from kbake.runner import PipelineRunner, detect_runner
from kbake.tools.fs import find_config_file

DEFAULT_VARIABLE = "manifestsBundle"


@dataclass
class ToolPaths:
    """
    Locations of the external tools. Plain names are looked up on the `PATH`.
    """

    helm: str = "helm"
    kompose: str = "kompose"
    kubectl: str = "kubectl"


@dataclass
class Config:
    """
    Configuration for Kbake that is stored in a `kbake.yaml` file.
    """

    tools: ToolPaths = field(default_factory=ToolPaths)

    variable: str = DEFAULT_VARIABLE
    """ The name of the pipeline variable that receives the path of the baked manifest. """

    temp_dir: Path | None = None
    """ The directory to write baked manifests to. Defaults to the runner's temporary directory. """

    runner: PipelineRunner | None = None
    """ The pipeline runner to report to. Detected from the environment if not set. """

    def get_runner(self) -> PipelineRunner:
        if self.runner is None:
            self.runner = detect_runner()
        return self.runner


@dataclass
class ConfigFile:
    """
    Wrapper for the configuration file.
    """

    FILENAME = "kbake.yaml"

    file: Path | None
    config: Config

    @staticmethod
    def load(file: Path | None = None, /) -> "ConfigFile":
        """
        Load the configuration from the given or the default configuration file. If the configuration file does not
        exist, a default configuration is returned.
        """

        from databind.json import load as deser
        from yaml import safe_load

        if file is None:
            file = find_config_file(ConfigFile.FILENAME, required=False)
        if file is None:
            return ConfigFile(None, Config())

        logger.debug("Loading configuration from '{}'", file)
        config = deser(safe_load(file.read_text()) or {}, Config, filename=str(file))

        if config.temp_dir is not None and not config.temp_dir.is_absolute():
            config.temp_dir = file.parent / config.temp_dir

        return ConfigFile(file, config)
