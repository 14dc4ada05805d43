"""
Pytest configuration and shared fixtures for aboutkit tests.
"""
import io

import pytest
from rich.console import Console

from aboutkit.kernel import Kernel
from tests.fixtures.mock_data import (
    create_mock_release,
    create_mock_settings,
    create_project_layout,
)


@pytest.fixture
def project_dir(tmp_path):
    """Provide a project directory with cache and log contents."""
    create_project_layout(tmp_path)
    return tmp_path


@pytest.fixture
def kernel(project_dir):
    return Kernel.from_settings(create_mock_settings(project_dir))


@pytest.fixture
def release():
    return create_mock_release()


@pytest.fixture
def output():
    """A StringIO-backed console; read the text with output.file.getvalue()."""
    return Console(file=io.StringIO(), width=160, color_system=None, force_terminal=False)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("APP_ENV", "APP_DEBUG", "APP_CHARSET", "APP_DOTENV_VARS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
