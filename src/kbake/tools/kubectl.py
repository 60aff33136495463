from dataclasses import dataclass
import json
from pathlib import Path
import re
from typing import TypedDict

from kbake.tools.exec import ToolError, run

KUSTOMIZE_MIN_MAJOR = 1
KUSTOMIZE_MIN_MINOR = 14


class KubectlError(ToolError):
    pass


class KubectlVersion(TypedDict, total=False):
    major: str
    minor: str
    gitVersion: str
    gitCommit: str
    gitTreeState: str
    buildDate: str
    goVersion: str
    compiler: str
    platform: str


@dataclass
class Kubectl:
    """
    Wrapper for interfacing with `kubectl`.
    """

    path: str = "kubectl"

    def version(self) -> KubectlVersion | None:
        """
        Return the client version of kubectl, or None if kubectl did not report one.
        """

        result = run([self.path, "version", "--client=true", "-o", "json"], error=KubectlError)
        return json.loads(result.stdout).get("clientVersion")

    def kustomize(self, path: Path) -> str:
        """
        Build a kustomization with `kubectl kustomize` and return the manifests as a YAML string.
        """

        return run([self.path, "kustomize", str(path)], error=KubectlError).stdout


def _leading_int(value: str | None) -> int | None:
    # Managed clusters report versions like "14+".
    match = re.match(r"\s*(\d+)", value or "")
    return int(match.group(1)) if match else None


def supports_kustomize(version: KubectlVersion | None) -> bool:
    """
    Check if a kubectl client of the given version has the `kustomize` subcommand (v1.14 or newer).
    """

    if not version:
        return False

    major = _leading_int(version.get("major"))
    minor = _leading_int(version.get("minor"))
    if major is None or minor is None:
        return False

    return major >= KUSTOMIZE_MIN_MAJOR and minor >= KUSTOMIZE_MIN_MINOR
