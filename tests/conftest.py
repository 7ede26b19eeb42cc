"""Shared pytest fixtures for CGA tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cga.config.settings import Settings
from cga.workflow.state import BootstrapContext
from tests.fakes import FakeCommandRunner, make_gcloud_runner


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary global config file with sample values."""
    config_file = tmp_path / ".cga-config"
    config_file.write_text(
        """# CGA Configuration
TEMPLATE_REPOSITORY="git@github.com:acme/starter"
LOCAL_ORIGIN='http://localhost:8080'
REGION_ABBREVIATIONS=me-west1=zf
"""
    )
    return config_file


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for external commands."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(
            returncode=0,
            stdout="",
            stderr="",
        )
        yield mock


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    """FakeCommandRunner preloaded with gcloud account and region output."""
    return make_gcloud_runner()


@pytest.fixture
def bootstrap_ctx(fake_runner: FakeCommandRunner, tmp_path: Path) -> BootstrapContext:
    """BootstrapContext over the fake runner, scaffolding into tmp_path."""
    return BootstrapContext.create(fake_runner, settings=Settings(), workdir=tmp_path)

