import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "check_hours.py"


@pytest.fixture(scope="module")
def check_hours():
    spec = importlib.util.spec_from_file_location("check_hours", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_open(check_hours, capsys):
    code = check_hours.main(["Mon-Fri 09:00-17:00", "--at", "2006-01-02T13:00:00+00:00"])
    assert code == 0
    assert "Mon-Fri 09:00-17:00 UTC: OPEN" in capsys.readouterr().out


def test_closed(check_hours, capsys):
    code = check_hours.main(["Mon-Fri 09:00-17:00 Europe/Berlin", "--at", "2006-01-01T13:00:00+00:00"])
    assert code == 1
    assert "CLOSED (closed_today)" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["Mon-Fri 9-5"],
    ["Mon-Fri 09:00-17:00 Europe"],
    ["Mon-Fri 09:00-17:00", "--at", "yesterday"],
])
def test_invalid_input(check_hours, argv):
    assert check_hours.main(argv) == 2
