# tests/test_main.py
import logging

import pytest

from mclang_up import main as cli
from mclang_up.workflow import Mode, Status, WorkflowResult


@pytest.fixture
def captured(monkeypatch):
    calls = {}

    def fake_configure_logging(*, verbose=False, log_path=None):
        calls["logging"] = {"verbose": verbose, "log_path": log_path}
        return logging.getLogger("mclang_up")

    def fake_run_workflow(mode, **kwargs):
        calls["workflow"] = dict(kwargs, mode=mode)
        return WorkflowResult(mode=mode, status=calls.get("status", Status.SUCCESS))

    monkeypatch.setattr(cli, "configure_logging", fake_configure_logging)
    monkeypatch.setattr(cli, "run_workflow", fake_run_workflow)
    return calls


def test_no_action_is_usage_error(captured, caplog):
    assert cli.main([]) == cli.EXIT_USAGE
    assert "workflow" not in captured
    assert "No arguments provided" in caplog.text


def test_install_defaults(captured):
    assert cli.main(["--install"]) == cli.EXIT_OK

    wf = captured["workflow"]
    assert wf["mode"] is Mode.INSTALL
    assert wf["component"] == "all"
    assert wf["verbose"] is False
    assert wf["dry_run"] is False
    assert [c.name for c in wf["manifest"].components][0] == "mclangc"


def test_update_with_options(captured, tmp_path):
    log_file = str(tmp_path / "up.log")

    assert cli.main(["-u", "-v", "-c", "mclangc", "--dry-run", "--log", log_file]) == cli.EXIT_OK

    wf = captured["workflow"]
    assert wf["mode"] is Mode.UPDATE
    assert wf["component"] == "mclangc"
    assert wf["verbose"] is True
    assert wf["dry_run"] is True
    assert captured["logging"] == {"verbose": True, "log_path": log_file}


def test_failed_run_exits_nonzero(captured):
    captured["status"] = Status.FAILED
    assert cli.main(["--install"]) == cli.EXIT_FAILED


def test_aborted_run_exits_zero(captured):
    captured["status"] = Status.ABORTED
    assert cli.main(["--install"]) == cli.EXIT_OK


def test_install_and_update_are_exclusive(captured):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--install", "--update"])
    assert excinfo.value.code == 2


def test_custom_manifest(captured, tmp_path):
    p = tmp_path / "m.yaml"
    p.write_text("components:\n  - {name: only, url: https://example.invalid/only.git}\n")

    cli.main(["--install", "--manifest", str(p)])

    assert [c.name for c in captured["workflow"]["manifest"].components] == ["only"]


def test_missing_manifest_is_usage_error(captured, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--install", "--manifest", str(tmp_path / "missing.yaml")])

    assert excinfo.value.code == cli.EXIT_USAGE
    assert "workflow" not in captured
    assert "Could not load manifest" in capsys.readouterr().err


def test_malformed_manifest_is_usage_error(captured, tmp_path, capsys):
    p = tmp_path / "broken.yaml"
    p.write_text("components: [unclosed\n")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--update", "--manifest", str(p)])

    assert excinfo.value.code == cli.EXIT_USAGE
    assert "Could not load manifest" in capsys.readouterr().err


def test_manifest_that_is_not_a_mapping_is_usage_error(captured, tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- just\n- a list\n")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--install", "--manifest", str(p)])

    assert excinfo.value.code == cli.EXIT_USAGE
