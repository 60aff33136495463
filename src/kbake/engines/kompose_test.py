from pathlib import Path
import subprocess
from unittest.mock import patch

import pytest
from kbake.engines import RenderError
from kbake.engines.kompose import KomposeRenderEngine
from kbake.tools.kompose import Kompose, KomposeError


def test__KomposeRenderEngine__bake(tmp_path: Path) -> None:
    compose_file = tmp_path / "docker-compose.yml"
    compose_file.write_text("services: {}\n")
    output = tmp_path / "out.yaml"

    completed = subprocess.CompletedProcess(["kompose"], 0, stdout="", stderr="INFO Kubernetes file created\n")
    with patch("subprocess.run", return_value=completed) as run:
        KomposeRenderEngine(kompose=Kompose("/opt/kompose"), compose_file=compose_file).bake(output)

    assert run.call_args.args[0] == ["/opt/kompose", "convert", "-f", str(compose_file), "-o", str(output)]


def test__KomposeRenderEngine__bake__raises_on_failure(tmp_path: Path) -> None:
    compose_file = tmp_path / "docker-compose.yml"
    compose_file.write_text("services: {}\n")

    completed = subprocess.CompletedProcess(["kompose"], 1, stdout="", stderr="FATA unknown service\n")
    with patch("subprocess.run", return_value=completed), pytest.raises(KomposeError):
        KomposeRenderEngine(kompose=Kompose(), compose_file=compose_file).bake(tmp_path / "out.yaml")


def test__KomposeRenderEngine__bake__compose_file_not_supplied(tmp_path: Path) -> None:
    with patch("subprocess.run") as run, pytest.raises(RenderError) as excinfo:
        KomposeRenderEngine(kompose=Kompose(), compose_file=None).bake(tmp_path / "out.yaml")
    assert "not supplied" in str(excinfo.value)
    run.assert_not_called()


def test__KomposeRenderEngine__bake__compose_file_not_found(tmp_path: Path) -> None:
    with patch("subprocess.run") as run, pytest.raises(RenderError) as excinfo:
        KomposeRenderEngine(kompose=Kompose(), compose_file=tmp_path / "missing.yml").bake(tmp_path / "out.yaml")
    assert "not found" in str(excinfo.value)
    run.assert_not_called()
