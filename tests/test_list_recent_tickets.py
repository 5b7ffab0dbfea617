import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "list_recent_tickets.py"


@pytest.fixture
def script():
    spec = importlib.util.spec_from_file_location("list_recent_tickets", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize("argv", [[], ["PROJ", "ten"], ["PROJ", "0"], ["PROJ", "-5"]])
def test_bad_arguments_print_usage(script, argv, capsys):
    assert script.main(argv) == 2
    assert script.USAGE in capsys.readouterr().out


def test_limit_defaults_to_twenty(script, monkeypatch):
    seen = []

    async def fake_list(project_key, limit):
        seen.append((project_key, limit))
        return 0

    monkeypatch.setattr(script, "list_recent_tickets", fake_list)

    assert script.main(["PROJ"]) == 0
    assert script.main(["PROJ", "5"]) == 0
    assert seen == [("PROJ", 20), ("PROJ", 5)]
