from dataclasses import dataclass
from typing import Iterable, Literal

from loguru import logger

from kbake.tools.exec import ToolError, run

HelmVersion = Literal["2", "3"]


class HelmError(ToolError):
    pass


@dataclass
class NameValuePair:
    """
    A single `--set` override for a Helm chart.
    """

    name: str
    value: str


def parse_overrides(lines: Iterable[str]) -> list[NameValuePair]:
    """
    Parse override lines of the form `name:value`. Only the first colon separates the name from the value, so
    values may contain colons themselves (e.g. image references or URLs). A line without a colon yields an empty
    value.
    """

    result = []
    for line in lines:
        name, _, value = line.partition(":")
        result.append(NameValuePair(name, value))
    return result


@dataclass
class Helm:
    """
    Wrapper for interfacing with `helm`.
    """

    path: str = "helm"
    """ The Helm executable. """

    version: HelmVersion = "3"
    """ The major version of Helm. The `template` command takes the release name differently in Helm 2 and 3. """

    namespace: str | None = None
    """ The namespace to render the release into. """

    def template_command(
        self,
        release_name: str | None,
        chart: str,
        override_files: list[str],
        overrides: list[NameValuePair],
    ) -> list[str]:
        command = [self.path, "template"]
        if self.version == "3":
            if release_name:
                command.append(release_name)
            command.append(chart)
        else:
            command.append(chart)
            if release_name:
                command.extend(["--name", release_name])

        if self.namespace:
            command.extend(["--namespace", self.namespace])
        for file in override_files:
            command.extend(["-f", file])
        for pair in overrides:
            command.extend(["--set", f"{pair.name}={pair.value}"])

        return command

    def template(
        self,
        release_name: str | None,
        chart: str,
        override_files: list[str] | None = None,
        overrides: list[NameValuePair] | None = None,
    ) -> str:
        """
        Render the chart with `helm template` and return the manifests as a YAML string.
        """

        command = self.template_command(release_name, chart, override_files or [], overrides or [])
        result = run(command, error=HelmError)
        if result.stderr.strip():
            logger.warning("Helm reported: {}", result.stderr.strip())
        return result.stdout
