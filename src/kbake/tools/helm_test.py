import subprocess
from unittest.mock import patch

import pytest
from kbake.tools.helm import Helm, HelmError, NameValuePair, parse_overrides


def test__parse_overrides__splits_at_first_colon() -> None:
    assert parse_overrides(["image.tag:1.2.3", "image.repository:registry.io:5000/app", "flag"]) == [
        NameValuePair("image.tag", "1.2.3"),
        NameValuePair("image.repository", "registry.io:5000/app"),
        NameValuePair("flag", ""),
    ]


def test__Helm__template_command__helm3() -> None:
    helm = Helm(path="helm", version="3", namespace="web")
    command = helm.template_command(
        "frontend", "./charts/app", ["values.yaml", "prod.yaml"], [NameValuePair("replicas", "3")]
    )
    assert command == [
        "helm",
        "template",
        "frontend",
        "./charts/app",
        "--namespace",
        "web",
        "-f",
        "values.yaml",
        "-f",
        "prod.yaml",
        "--set",
        "replicas=3",
    ]


def test__Helm__template_command__helm2_passes_release_name_as_option() -> None:
    helm = Helm(path="/opt/helm2", version="2")
    assert helm.template_command("frontend", "./charts/app", [], []) == [
        "/opt/helm2",
        "template",
        "./charts/app",
        "--name",
        "frontend",
    ]


def test__Helm__template_command__without_release_name() -> None:
    assert Helm(version="3").template_command(None, "chart", [], []) == ["helm", "template", "chart"]
    assert Helm(version="2").template_command(None, "chart", [], []) == ["helm", "template", "chart"]


def test__Helm__template__returns_stdout() -> None:
    completed = subprocess.CompletedProcess(["helm"], 0, stdout="kind: Service\n", stderr="")
    with patch("subprocess.run", return_value=completed) as run:
        assert Helm().template("rel", "chart") == "kind: Service\n"
    assert run.call_args.args[0] == ["helm", "template", "rel", "chart"]


def test__Helm__template__raises_on_failure() -> None:
    completed = subprocess.CompletedProcess(["helm"], 1, stdout="", stderr="Error: chart not found")
    with patch("subprocess.run", return_value=completed), pytest.raises(HelmError) as excinfo:
        Helm().template("rel", "chart")
    assert excinfo.value.statuscode == 1
    assert "chart not found" in str(excinfo.value)
