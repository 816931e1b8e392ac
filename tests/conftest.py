"""Shared test fixtures for the mysh test suite."""

import io
import os

import pytest
from rich.console import Console

from mysh.dispatcher import Dispatcher
from mysh.history import HistoryStore


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def history_path(tmp_path):
    return str(tmp_path / ".mymysh_history")


@pytest.fixture
def store(history_path):
    """An empty HistoryStore backed by a temporary file."""
    return HistoryStore(history_path)


@pytest.fixture
def console():
    """A Console writing to memory; read it back with ``console.file.getvalue()``."""
    return Console(file=io.StringIO(), width=200, highlight=False)


@pytest.fixture
def dispatcher(store, console):
    return Dispatcher(store, search_path=("/bin", "/usr/bin"), console=console)


@pytest.fixture
def bin_dir(tmp_path):
    """A directory holding a fake ``hello`` executable and a non-executable ``data``."""
    directory = tmp_path / "bin"
    directory.mkdir()
    script = directory / "hello"
    script.write_text("#!/bin/sh\necho hello\n")
    os.chmod(script, 0o755)
    data = directory / "data"
    data.write_text("not a program\n")
    os.chmod(data, 0o644)
    return directory
