import logging
from pathlib import Path

import pytest

from approx_lab import cli


@pytest.fixture
def release_build(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "is_debug_build", lambda: False)
    monkeypatch.delenv("APPROX_LOOP_COUNT", raising=False)
    monkeypatch.delenv("APPROX_VERBOSE", raising=False)


def test_list_functions(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["--list"]) == cli.EXIT_OK
    out = capsys.readouterr().out
    for name in ("sqrtf", "invsqrtf", "log10f", "expf", "sqrti", "atan2f"):
        assert name in out


def test_missing_function(release_build: None, capsys: pytest.CaptureFixture) -> None:
    assert cli.main([]) == cli.EXIT_NO_FUNCTION
    assert "No function name passed!" in capsys.readouterr().out


def test_unsupported_function(release_build: None, capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["-f", "cosf"]) == cli.EXIT_UNSUPPORTED_FUNCTION
    assert 'Unsupported function "cosf"' in capsys.readouterr().out


def test_refuses_to_time_under_a_tracer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "is_debug_build", lambda: True)
    assert cli.main(["-f", "sqrti"]) == cli.EXIT_DEBUG_BUILD


def test_console_run_with_json_output(
    release_build: None, tmp_path: Path, capsys: pytest.CaptureFixture
) -> None:
    code = cli.main([
        "-f", "sqrti", "-n", "20", "-l", "1",
        "-p", "json", "-o", str(tmp_path), "--no-color",
    ])

    assert code == cli.EXIT_OK
    out = capsys.readouterr().out
    assert "Testing: sqrti" in out
    assert "20 samples in range" in out
    assert (tmp_path / "sqrti.json").exists()


def test_html_output_writes_page_and_chart(release_build: None, tmp_path: Path) -> None:
    code = cli.main(["-f", "invsqrtf", "-n", "16", "-l", "1", "-p", "html", "-o", str(tmp_path)])

    assert code == cli.EXIT_OK
    assert (tmp_path / "invsqrtf.svg").exists()
    page = (tmp_path / "invsqrtf.html").read_text()
    assert '<img src="invsqrtf.svg"' in page


def test_png_output(release_build: None, tmp_path: Path) -> None:
    assert cli.main(["-f", "expf", "-n", "10", "-l", "1", "-p", "png", "-o", str(tmp_path)]) == cli.EXIT_OK
    assert (tmp_path / "expf.png").exists()


def test_log_level_is_isolated(release_build: None, capsys: pytest.CaptureFixture) -> None:
    root = logging.getLogger()
    pkg_logger = logging.getLogger("approx_lab")
    pkg_old_handlers = pkg_logger.handlers[:]
    pkg_old_level = pkg_logger.level
    pkg_old_propagate = pkg_logger.propagate

    try:
        cli.main(["-f", "sqrti", "-n", "4", "-l", "1", "--log-level", "DEBUG"])
        root.debug("root debug")
        err = capsys.readouterr().err
        assert "calibrated" in err
        assert "root debug" not in err
    finally:
        for h in pkg_logger.handlers[:]:
            pkg_logger.removeHandler(h)
        for h in pkg_old_handlers:
            pkg_logger.addHandler(h)
        pkg_logger.setLevel(pkg_old_level)
        pkg_logger.propagate = pkg_old_propagate
