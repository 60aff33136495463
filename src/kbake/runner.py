"""
Adapters for the logging commands and conventions of the CI/CD pipeline runners that Kbake runs in.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import os
from pathlib import Path
import tempfile
import uuid

from databind.core import Union
from loguru import logger


@Union(style=Union.FLAT, discriminator_key="type")
@dataclass
class PipelineRunner(ABC):
    """
    A PipelineRunner publishes variables to subsequent pipeline steps and reports the result of the task.
    """

    @abstractmethod
    def set_variable(self, name: str, value: str) -> None:
        """
        Publish a variable for the steps that run after this task.
        """

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """
        Mark the task as failed with the given message.
        """

    def temp_directory(self) -> Path:
        """
        Return the directory that the runner designates for temporary files.
        """

        return Path(tempfile.gettempdir())


@Union.register(PipelineRunner, name="azure")
@dataclass
class AzurePipelines(PipelineRunner):
    """
    Azure Pipelines, which parses `##vso[...]` logging commands from the task's stdout.
    """

    @staticmethod
    def _escape_property(value: str) -> str:
        return (
            value.replace("%", "%AZP25")
            .replace(";", "%3B")
            .replace("\r", "%0D")
            .replace("\n", "%0A")
            .replace("]", "%5D")
        )

    @staticmethod
    def _escape_data(value: str) -> str:
        return value.replace("%", "%AZP25").replace("\r", "%0D").replace("\n", "%0A")

    def set_variable(self, name: str, value: str) -> None:
        print(f"##vso[task.setvariable variable={self._escape_property(name)};]{self._escape_data(value)}", flush=True)

    def set_failed(self, message: str) -> None:
        print(f"##vso[task.logissue type=error;]{self._escape_data(message)}", flush=True)
        print(f"##vso[task.complete result=Failed;]{self._escape_data(message)}", flush=True)

    def temp_directory(self) -> Path:
        if value := os.environ.get("AGENT_TEMPDIRECTORY"):
            return Path(value)
        return super().temp_directory()


@Union.register(PipelineRunner, name="github")
@dataclass
class GitHubActions(PipelineRunner):
    """
    GitHub Actions, which reads step outputs from the file named by `$GITHUB_OUTPUT`.
    """

    output_file: Path | None = None
    """ The file to append outputs to. Defaults to `$GITHUB_OUTPUT`. """

    def _output_file(self) -> Path:
        if self.output_file is not None:
            return self.output_file
        if value := os.environ.get("GITHUB_OUTPUT"):
            return Path(value)
        raise RuntimeError("GITHUB_OUTPUT is not set, cannot publish step outputs")

    def set_variable(self, name: str, value: str) -> None:
        file = self._output_file()
        logger.debug("Writing output '{}' to '{}'", name, file)
        with file.open("a") as fp:
            if "\n" in value or "\r" in value:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                fp.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                fp.write(f"{name}={value}\n")

    def set_failed(self, message: str) -> None:
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        print(f"::error::{escaped}", flush=True)

    def temp_directory(self) -> Path:
        if value := os.environ.get("RUNNER_TEMP"):
            return Path(value)
        return super().temp_directory()


@Union.register(PipelineRunner, name="console")
@dataclass
class Console(PipelineRunner):
    """
    Prints variables as `NAME=VALUE` lines. Used when Kbake does not run inside a known pipeline runner.
    """

    def set_variable(self, name: str, value: str) -> None:
        print(f"{name}={value}", flush=True)

    def set_failed(self, message: str) -> None:
        logger.error("{}", message)


def detect_runner() -> PipelineRunner:
    """
    Pick the pipeline runner from the environment variables that the runners set for every job.
    """

    if os.environ.get("TF_BUILD"):
        logger.debug("Detected Azure Pipelines")
        return AzurePipelines()
    if os.environ.get("GITHUB_ACTIONS"):
        logger.debug("Detected GitHub Actions")
        return GitHubActions()
    return Console()
