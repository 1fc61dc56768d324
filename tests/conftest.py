# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    marklist_dir = fake_home / ".marklist"
    marklist_dir.mkdir()

    # minimal config.json w/ test defaults; other keys fall back to dataclass defaults
    config_data = {
        "navigation": "scan",
        "theme": "deep_blue",
        "view_height": 10,
        "dev_mode": False,
    }
    config_file = marklist_dir / "config.json"
    config_file.write_text(json.dumps(config_data, indent=2), encoding="utf-8")

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("MARKLIST_CONFIG", raising=False)

    # ! reset global settings_manager state & point it at the isolated location
    from marklist.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! reset output manager to NullOutputManager for test isolation
    from marklist.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    reset_output_manager()


@pytest.fixture(autouse=True)
def block_network():
    # Block all network calls by default w/ pytest-socket
    # tests requiring network must explicitly enable w/ pytest.mark.enable_socket
    try:
        pytest_socket = pytest.importorskip("pytest_socket")
        pytest_socket.disable_socket()
    except pytest.skip.Exception:
        # pytest-socket not installed, skip network blocking
        pass


@pytest.fixture(autouse=True)
def block_browser():
    # never open a real browser; tests that care patch webbrowser.open themselves
    with patch("marklist.lookup.providers.browser.webbrowser.open", return_value=False) as m:
        yield m


@pytest.fixture
def settings():
    from marklist.config.settings import MarklistSettings

    return MarklistSettings()


@pytest.fixture
def checklist_file(tmp_path):
    # small checklist w/ a marked run, an unmarked line & a trailing newline
    path = tmp_path / "checklist.txt"
    path.write_text("#Alpha\n#Beta\nGamma ray\n?Delta\n", encoding="utf-8")
    return path


@pytest.fixture
def cli_env():
    # env that makes Rich & the CLI behave deterministically under CliRunner
    return {"NO_COLOR": "1", "TERM": "dumb"}


@pytest.fixture
def rich_capture():
    # recording console swapped in behind the shared console proxy
    from rich.console import Console

    from marklist.mark_io.console import console, reset_console
    from marklist.ui.theming.theme_engine import get_marklist_theme

    recording = Console(record=True, width=100, height=30, force_terminal=True)
    recording.push_theme(get_marklist_theme())
    console._set_console(recording)
    try:
        yield recording
    finally:
        reset_console()
