"""Tests for the plain CLI and its output routing."""

import logging

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.main import app
from cli.output import route_output, write_text
from plain.config import settings

runner = CliRunner()

_URL = "https://example.com/page"
_HTML = "<h1>hi</h1><p>line1\nline2</p>"


@pytest.fixture
def test_logger(monkeypatch):
    """Route CLI logging to a propagating logger so caplog can see it."""
    logger = logging.getLogger("tests.cli")
    monkeypatch.setattr("cli.main.get_logger", lambda: logger)
    return logger


# ---------------------------------------------------------------------------
# route_output
# ---------------------------------------------------------------------------

def test_route_output_prints_without_path(capsys):
    assert route_output("HELLO\n\nworld") is True
    assert capsys.readouterr().out == "HELLO\n\nworld\n"


def test_route_output_writes_file(tmp_path, capsys):
    target = tmp_path / "out.txt"
    assert route_output("HI\n\nline1 line2", str(target)) is True

    assert target.read_text(encoding="utf-8") == "HI\n\nline1 line2"
    assert f"Text successfully written to '{target}'" in capsys.readouterr().out


def test_route_output_overwrites_existing_file(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old contents that are longer", encoding="utf-8")

    route_output("new", str(target))
    assert target.read_text(encoding="utf-8") == "new"


def test_route_output_reports_write_failure(tmp_path, capsys, caplog):
    target = tmp_path / "missing" / "out.txt"
    logger = logging.getLogger("tests.cli")

    with caplog.at_level(logging.ERROR, logger="tests.cli"):
        assert route_output("text", str(target), logger=logger) is False

    assert f"Failed to write text to '{target}'" in capsys.readouterr().out
    assert str(target) in caplog.text
    assert not target.exists()


def test_write_text_round_trip(tmp_path):
    text = "CAFÉ\n\nunicode paragraph ✓"
    path = write_text(tmp_path / "page.txt", text)
    assert path.read_text(encoding="utf-8") == text


# ---------------------------------------------------------------------------
# plain command
# ---------------------------------------------------------------------------

def test_cli_prints_text(test_logger):
    with respx.mock:
        respx.get(_URL).mock(return_value=httpx.Response(200, text=_HTML))
        result = runner.invoke(app, ["--url", _URL])

    assert result.exit_code == 0
    assert "HI\n\nline1 line2" in result.stdout


def test_cli_writes_file(test_logger, tmp_path):
    target = tmp_path / "example-output.txt"
    with respx.mock:
        respx.get(_URL).mock(return_value=httpx.Response(200, text=_HTML))
        result = runner.invoke(app, ["--url", _URL, "--file", str(target)])

    assert result.exit_code == 0
    assert "Text successfully written to" in result.stdout
    assert target.read_text(encoding="utf-8") == "HI\n\nline1 line2"


def test_cli_uses_default_url(test_logger):
    with respx.mock:
        route = respx.route(host="en.wikipedia.org").mock(
            return_value=httpx.Response(200, text="<p>Hello</p>")
        )
        result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert route.called
    assert settings.default_url.startswith("https://en.wikipedia.org/")


def test_cli_not_found_exits_nonzero(test_logger, tmp_path, caplog):
    target = tmp_path / "out.txt"
    with respx.mock, caplog.at_level(logging.ERROR, logger="tests.cli"):
        respx.get(_URL).mock(return_value=httpx.Response(404, text="gone"))
        result = runner.invoke(app, ["--url", _URL, "--file", str(target)])

    assert result.exit_code == 1
    assert not target.exists()
    assert "Unexpected status code: 404 Not Found" in caplog.text


def test_cli_network_failure_exits_nonzero(test_logger):
    with respx.mock:
        respx.get(_URL).mock(side_effect=httpx.ConnectError("connection refused"))
        result = runner.invoke(app, ["--url", _URL])

    assert result.exit_code == 1
    assert "HI" not in result.stdout


def test_cli_write_failure_exits_nonzero(test_logger, tmp_path):
    target = tmp_path / "no-such-dir" / "out.txt"
    with respx.mock:
        respx.get(_URL).mock(return_value=httpx.Response(200, text=_HTML))
        result = runner.invoke(app, ["--url", _URL, "--file", str(target)])

    assert result.exit_code == 1
    assert "Failed to write text to" in result.stdout


def test_cli_empty_page_prints_blank(test_logger):
    with respx.mock:
        respx.get(_URL).mock(return_value=httpx.Response(200, text="<div>none</div>"))
        result = runner.invoke(app, ["--url", _URL])

    assert result.exit_code == 0
    assert result.stdout == "\n"


def test_cli_malformed_url_exits_nonzero(test_logger, caplog):
    with caplog.at_level(logging.ERROR, logger="tests.cli"):
        result = runner.invoke(app, ["--url", "http://[::1"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Invalid URL" in caplog.text
    assert "nothing to process" in caplog.text


def test_cli_unknown_log_level_does_not_crash(monkeypatch):
    monkeypatch.setattr("plain.log.settings.log_level", "VERBOSE")
    with respx.mock:
        respx.get(_URL).mock(return_value=httpx.Response(200, text=_HTML))
        result = runner.invoke(app, ["--url", _URL])

    assert result.exit_code == 0
    assert "HI\n\nline1 line2" in result.stdout
