import json
import logging
from typing import Any, Iterator

import pytest

from seed_alias import cli


@pytest.fixture(autouse=True)
def _isolate_pkg_logger() -> Iterator[None]:
    pkg_logger = logging.getLogger("seed_alias")
    old_handlers = pkg_logger.handlers[:]
    old_level = pkg_logger.level
    old_propagate = pkg_logger.propagate
    yield
    for h in pkg_logger.handlers[:]:
        if h not in old_handlers:
            pkg_logger.removeHandler(h)
    pkg_logger.setLevel(old_level)
    pkg_logger.propagate = old_propagate


def test_cli_prints_selected_values(capsys: Any) -> None:
    rc = cli.main(["352", "--keep-top-k", "1", "--value", "37", "--value", "999999"])
    out = capsys.readouterr().out.strip()
    assert rc == 0
    assert json.loads(out) == {"37": ["35+2"], "999999": []}


def test_cli_full_map_has_string_keys(capsys: Any) -> None:
    cli.main(["11"])
    data = json.loads(capsys.readouterr().out)
    assert data["1"] == ["1*1", "1/1", "(-1)*(-1)"]
    assert "-1" not in data


def test_cli_invalid_seed_exits() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["0"])
    assert str(exc.value.code).startswith("Error:")


def test_cli_invalid_config_exits() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["352", "--keep-top-k", "0"])
    assert "keep_top_k" in str(exc.value.code)


def test_cli_verify_passes(capsys: Any) -> None:
    assert cli.main(["352", "--verify"]) == 0
    assert "mismatch" not in capsys.readouterr().err


def test_cli_verify_reports_failures(monkeypatch: Any, capsys: Any) -> None:
    monkeypatch.setattr(cli, "generate_aliases_with_config", lambda seed, config: {6: ["3+5"]})
    assert cli.main(["352", "--verify"]) == 1
    assert "mismatch: 6: 3+5" in capsys.readouterr().err


def test_cli_writes_out_file(tmp_path: Any, capsys: Any) -> None:
    target = tmp_path / "aliases.json"
    cli.main(["352", "--no-unary-minus", "--out", str(target)])
    assert "written to" in capsys.readouterr().out
    data = json.loads(target.read_text("utf-8"))
    assert data["1"] == ["3/(5-2)"]


def test_log_level_is_isolated(monkeypatch: Any, capsys: Any) -> None:
    root = logging.getLogger()
    old_handlers = root.handlers[:]
    for h in old_handlers:
        root.removeHandler(h)

    def fake_generate(seed, config):
        logging.getLogger().debug("root debug")
        logging.getLogger("seed_alias.generator").debug("pkg debug")
        return {1: ["3/3"]}

    monkeypatch.setattr(cli, "generate_aliases_with_config", fake_generate)
    try:
        cli.main(["33", "--log-level", "DEBUG"])
        err = capsys.readouterr().err
        assert "pkg debug" in err
        assert "root debug" not in err
    finally:
        for h in old_handlers:
            root.addHandler(h)


def test_cli_verify_all_zero_seed(capsys: Any) -> None:
    assert cli.main(["00", "--verify"]) == 0
    captured = capsys.readouterr()
    assert "mismatch" not in captured.err
    assert json.loads(captured.out)["1"] == ["00/00"]
