"""Tests for the codemod runner.

``npx`` is never executed; ``run_streamed`` is replaced by a recorder that
can be told which package should fail.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from patternfly_cli import codemods
from patternfly_cli.codemods import CODEMODS, build_codemod_command, run_codemods
from patternfly_cli.config import CliConfig
from patternfly_cli.exceptions import TransformError


def recorder(fail_on: str | None = None, returncode: int = 2) -> MagicMock:
    def _run(cmd, *, cwd = None, error = TransformError):
        if fail_on is not None and cmd[1] == fail_on:
            raise error(f"Command failed with exit code {returncode}", command = cmd, returncode = returncode)
        return 0

    return MagicMock(side_effect = _run)


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    path = tmp_path / "src"
    path.mkdir()
    return path


def test_build_command_places_fix_before_target(tmp_path: Path) -> None:
    assert build_codemod_command("@patternfly/pf-codemods", tmp_path, fix = True) == [
        "npx", "@patternfly/pf-codemods", "--fix", str(tmp_path)]
    assert build_codemod_command("@patternfly/pf-codemods", tmp_path) == [
        "npx", "@patternfly/pf-codemods", str(tmp_path)]


def test_runs_every_codemod_in_order_with_fix(
        src_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
        ) -> None:
    run = recorder()
    monkeypatch.setattr(codemods, "run_streamed", run)

    completed = run_codemods(src_dir, fix = True)

    assert completed == list(CODEMODS)
    commands = [c.args[0] for c in run.call_args_list]
    assert commands == [["npx", package, "--fix", str(src_dir.resolve())] for package in CODEMODS]
    assert "Codemods completed successfully." in capsys.readouterr().out


def test_stops_at_first_failure(src_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    run = recorder(fail_on = CODEMODS[0])
    monkeypatch.setattr(codemods, "run_streamed", run)

    with pytest.raises(TransformError) as exc_info:
        run_codemods(src_dir, fix = True)

    assert run.call_count == 1
    assert exc_info.value.returncode == 2
    assert CODEMODS[0] in str(exc_info.value)


def test_later_failure_keeps_earlier_results(src_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    run = recorder(fail_on = CODEMODS[-1])
    monkeypatch.setattr(codemods, "run_streamed", run)

    with pytest.raises(TransformError):
        run_codemods(src_dir)

    assert run.call_count == len(CODEMODS)


def test_defaults_to_src(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "src").mkdir()
    monkeypatch.chdir(tmp_path)
    run = recorder()
    monkeypatch.setattr(codemods, "run_streamed", run)

    run_codemods()

    assert run.call_args_list[0].args[0][-1] == str((tmp_path / "src").resolve())


def test_missing_target_runs_nothing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    run = recorder()
    monkeypatch.setattr(codemods, "run_streamed", run)

    with pytest.raises(TransformError, match = "does not exist"):
        run_codemods(tmp_path / "missing")
    run.assert_not_called()


def test_uses_configured_npx(src_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    run = recorder()
    monkeypatch.setattr(codemods, "run_streamed", run)

    run_codemods(src_dir, config = CliConfig(npx_executable = "pnpx"))

    assert {c.args[0][0] for c in run.call_args_list} == {"pnpx"}
