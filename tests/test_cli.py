import io
import logging
import sys

import pytest

from imgview.cli import main


@pytest.fixture(autouse=True)
def isolated_logger(monkeypatch):
    # main() installs a handler on the captured stderr of each test
    logger = logging.getLogger("imgview")
    monkeypatch.setattr(logger, "handlers", [])
    monkeypatch.setattr(logger, "level", logger.level)


def run_cli(monkeypatch, *argv: str) -> int:
    monkeypatch.setattr(sys, "argv", ["imgview", *argv])
    with pytest.raises(SystemExit) as exc:
        main()
    return exc.value.code


def test_list_actions(monkeypatch, capsys):
    assert run_cli(monkeypatch, "list-actions") == 0

    out = capsys.readouterr().out
    assert "exec_marked:" in out
    assert "Modes: gallery, viewer" in out


def test_exec_prints_output(monkeypatch, capsys, tmp_path):
    image = tmp_path / "a.png"
    image.write_bytes(b"")

    assert run_cli(monkeypatch, "exec", "echo %", str(image)) == 0

    assert str(image) in capsys.readouterr().out


def test_exec_failure(monkeypatch, capsys, tmp_path):
    image = tmp_path / "a.png"
    image.write_bytes(b"")

    assert run_cli(monkeypatch, "exec", "exit 4 #%", str(image)) == 1

    assert "Error 4: " in capsys.readouterr().out


def test_run_reads_keys(monkeypatch, capsys, tmp_path):
    for name in ("a.png", "b.png"):
        (tmp_path / name).write_bytes(b"")
    monkeypatch.setattr(sys, "stdin", io.StringIO("Right\nstatus\nq\n"))

    assert run_cli(monkeypatch, "run", str(tmp_path)) == 0

    out = capsys.readouterr().out
    assert "Image: 2 of 2" in out


def test_run_without_images(monkeypatch, capsys, tmp_path):
    assert run_cli(monkeypatch, "run", str(tmp_path)) == 1

    assert "No images to view" in capsys.readouterr().out


def test_bad_config(monkeypatch, capsys, tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("keys:\n  viewer:\n    x: explode\n")

    assert run_cli(monkeypatch, "-c", str(config), "list-actions") == 0
    assert run_cli(monkeypatch, "-c", str(config), "run", str(tmp_path)) == 1

    assert "Error: Failed to load config" in capsys.readouterr().out


def test_exec_success_printing_error_text(monkeypatch, capsys, tmp_path):
    image = tmp_path / "a.png"
    image.write_bytes(b"")

    assert run_cli(monkeypatch, "exec", "echo Error: none for %", str(image)) == 0

    assert "Error: none for" in capsys.readouterr().out
