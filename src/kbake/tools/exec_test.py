from unittest.mock import patch

import pytest
from kbake.tools.exec import ToolError, ToolNotFoundError, run


def test__run__missing_executable() -> None:
    with patch("subprocess.run", side_effect=FileNotFoundError), pytest.raises(ToolNotFoundError) as excinfo:
        run(["kompose", "version"])
    assert excinfo.value.tool == "kompose"


def test__ToolError__str() -> None:
    assert str(ToolError(["/usr/bin/helm", "template"], 2, "boom\n")) == "helm command failed with status code 2: boom"
    assert str(ToolError(["kubectl"], 1)) == "kubectl command failed with status code 1"
