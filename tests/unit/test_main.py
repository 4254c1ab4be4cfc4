import json
import logging
from pathlib import Path

import pytest

import main as cli
from infrastructure.observability.logging import configure_logging


@pytest.fixture(autouse=True)
def _keep_pytest_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    # configure_logging would replace pytest's capture handlers
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)


def _write_key(tmp_path: Path, doc: object) -> Path:
    path = tmp_path / "key.json"
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


def test_sparrow_scenario_end_to_end(tmp_path: Path) -> None:
    key = _write_key(tmp_path, {"Birds": [{"Sparrow": [{"Can fly": True}, {"Has feathers": True}]}]})
    out = tmp_path / "out"

    assert cli.main([str(key), "-d", str(out)]) == 0
    assert (out / "si tiene Can fly" / "si tiene Has feathers" / "Sparrow.txt").is_file()


def test_suffix_scenario_end_to_end(tmp_path: Path) -> None:
    key = _write_key(tmp_path, {"Birds": [{"Sparrow": [{"Can fly": True}, {"Has feathers": False}]}]})
    out = tmp_path / "out"

    assert cli.main([str(key), "-d", str(out), "-f", "no", "-s"]) == 0
    assert (out / "Can fly si tiene" / "Has feathers no" / "Sparrow.txt").is_file()


def test_no_arguments_prints_usage_and_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 1

    err = capsys.readouterr().err
    assert "usage:" in err
    assert "-d" in err


def test_unknown_flag_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    key = _write_key(tmp_path, {})

    assert cli.main([str(key), "-z"]) == 1
    assert "usage:" in capsys.readouterr().err


def test_missing_json_argument_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["-s"]) == 1
    assert "JSON key file is required" in capsys.readouterr().err


def test_missing_config_file_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    key = _write_key(tmp_path, {})

    assert cli.main([str(key), "-c", str(tmp_path / "nope.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().err


def test_malformed_json_fails(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    key = tmp_path / "key.json"
    key.write_text('{"Birds": [', encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert cli.main([str(key), "-d", str(tmp_path / "out")]) == 1

    assert "line 1" in caplog.text
    assert not (tmp_path / "out").exists()


def test_missing_json_file_fails(tmp_path: Path) -> None:
    assert cli.main([str(tmp_path / "missing.json")]) == 1


def test_category_object_warns_but_succeeds(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    key = _write_key(tmp_path, {"Birds": {"Sparrow": [{"Can fly": True}]}})
    out = tmp_path / "out"

    with caplog.at_level(logging.WARNING):
        assert cli.main([str(key), "-d", str(out)]) == 0

    assert "Birds" in caplog.text
    assert list(out.iterdir()) == []


def test_root_directory_failure_fails_without_species_files(tmp_path: Path) -> None:
    key = _write_key(tmp_path, {"Birds": [{"Sparrow": [{"Can fly": True}]}]})
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    assert cli.main([str(key), "-d", str(blocker / "out")]) == 1
    assert list(tmp_path.rglob("Sparrow.txt")) == []


def test_question_directory_failure_fails(tmp_path: Path) -> None:
    key = _write_key(tmp_path, {"Birds": [{"Sparrow": [{"a/b": True}]}]})

    assert cli.main([str(key), "-d", str(tmp_path / "out")]) == 1


def test_second_run_succeeds(tmp_path: Path) -> None:
    key = _write_key(tmp_path, {"Birds": [{"Sparrow": [{"Can fly": True}]}]})
    out = tmp_path / "out"

    assert cli.main([str(key), "-d", str(out)]) == 0
    assert cli.main([str(key), "-d", str(out)]) == 0
    assert len(list(out.rglob("*.txt"))) == 1


def test_malformed_yaml_config_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    key = _write_key(tmp_path, {})
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("root_dir: [unclosed\n", encoding="utf-8")

    assert cli.main([str(key), "-c", str(config_file)]) == 1
    assert "Invalid YAML" in capsys.readouterr().err


def test_unusable_log_file_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(cli, "configure_logging", configure_logging)
    key = _write_key(tmp_path, {})
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    assert cli.main([str(key), "-d", str(tmp_path / "out"), "--log-file", str(blocker / "run.log")]) == 1
    assert "cannot open log file" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_unrepresentable_question_name_fails_cleanly(tmp_path: Path) -> None:
    key = _write_key(tmp_path, {"Birds": [{"Sparrow": [{"Can\u0000fly": True}]}]})

    assert cli.main([str(key), "-d", str(tmp_path / "out")]) == 1
