"""Tests for cga.cli module."""

import os
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from cga.cli import app
from cga.config.manager import ConfigManager
from cga.config.settings import Settings
from cga.utils.errors import ExitCode, UnknownRegionError, UserCancelledError
from cga.workflow.runner import WorkflowResult

runner = CliRunner()


def make_config(settings: Settings | None = None) -> MagicMock:
    config = MagicMock()
    config.settings = settings or Settings()
    return config


class TestCLIVersion:
    """Tests for --version flag."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.stdout

    def test_short_version_flag(self):
        result = runner.invoke(app, ["-v"])

        assert result.exit_code == 0
        assert "gcloud" in result.stdout


class TestCLIConfig:
    """Tests for --config flag."""

    @patch("cga.cli.run_bootstrap_workflow")
    @patch("cga.cli.show_banner")
    @patch("cga.cli.ConfigManager")
    def test_config_flag_shows_config(self, mock_config_class, mock_banner, mock_workflow):
        mock_config = make_config()
        mock_config_class.return_value = mock_config

        result = runner.invoke(app, ["--config"])

        assert result.exit_code == 0
        mock_config.show.assert_called_once()
        mock_workflow.assert_not_called()


class TestCLIConfigErrors:
    """Configuration problems stop the run before any external command."""

    @patch("cga.cli.run_bootstrap_workflow")
    @patch("cga.cli.check_cli_installed", return_value=(True, "1.0"))
    @patch("cga.cli.show_banner")
    def test_malformed_region_abbreviations_exit_before_workflow(
        self, mock_banner, mock_check, mock_workflow, tmp_path
    ):
        config_file = tmp_path / ".cga-config"
        config_file.write_text("REGION_ABBREVIATIONS=me-west1\n")
        (tmp_path / ".git").mkdir()

        def manager_factory(start_dir=None):
            return ConfigManager(global_config_path=config_file, start_dir=start_dir)

        with (
            patch.dict(os.environ, {}, clear=True),
            patch("cga.cli.ConfigManager", side_effect=manager_factory),
        ):
            result = runner.invoke(app, ["--directory", str(tmp_path)])

        assert result.exit_code == ExitCode.CONFIGURATION_ERROR
        mock_check.assert_not_called()
        mock_workflow.assert_not_called()

    @patch("cga.cli.run_bootstrap_workflow")
    @patch("cga.cli.check_cli_installed", return_value=(True, "1.0"))
    @patch("cga.cli.show_banner")
    @patch("cga.cli.ConfigManager")
    def test_local_config_searched_from_directory(
        self, mock_config_class, mock_banner, mock_check, mock_workflow, tmp_path
    ):
        mock_config_class.return_value = make_config()
        mock_workflow.return_value = WorkflowResult()

        runner.invoke(app, ["--directory", str(tmp_path)])

        mock_config_class.assert_called_once_with(start_dir=tmp_path.resolve())


class TestCLIPrerequisites:
    """Tests for prerequisite checking."""

    @patch("cga.cli.run_bootstrap_workflow")
    @patch("cga.cli.check_cli_installed")
    @patch("cga.cli.show_banner")
    @patch("cga.cli.ConfigManager")
    def test_missing_tool_exits(
        self, mock_config_class, mock_banner, mock_check, mock_workflow
    ):
        mock_config_class.return_value = make_config()
        mock_check.side_effect = lambda tool: (
            (False, "gcloud CLI is not installed") if tool == "gcloud" else (True, "1.0")
        )

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.TOOL_NOT_INSTALLED
        mock_workflow.assert_not_called()

    @patch("cga.cli.run_bootstrap_workflow")
    @patch("cga.cli.check_cli_installed", return_value=(True, "1.0"))
    @patch("cga.cli.show_banner")
    @patch("cga.cli.ConfigManager")
    def test_checks_configured_package_manager(
        self, mock_config_class, mock_banner, mock_check, mock_workflow
    ):
        mock_config_class.return_value = make_config(Settings(package_manager="pnpm"))
        mock_workflow.return_value = WorkflowResult()

        runner.invoke(app, [])

        checked = [c[0][0] for c in mock_check.call_args_list]
        assert checked == ["gcloud", "git", "pnpm"]


class TestCLIWorkflow:
    """Tests for running the bootstrap workflow."""

    @patch("cga.cli.run_bootstrap_workflow")
    @patch("cga.cli.check_cli_installed", return_value=(True, "1.0"))
    @patch("cga.cli.show_banner")
    @patch("cga.cli.ConfigManager")
    def test_success(self, mock_config_class, mock_banner, mock_check, mock_workflow, tmp_path):
        mock_config_class.return_value = make_config()
        mock_workflow.return_value = WorkflowResult(completed_steps=["authenticate"])

        result = runner.invoke(app, ["--directory", str(tmp_path)])

        assert result.exit_code == 0
        ctx = mock_workflow.call_args[0][0]
        assert ctx.workdir == tmp_path.resolve()

    @patch("cga.cli.run_bootstrap_workflow")
    @patch("cga.cli.check_cli_installed", return_value=(True, "1.0"))
    @patch("cga.cli.show_banner")
    @patch("cga.cli.ConfigManager")
    def test_failed_step_sets_exit_code(
        self, mock_config_class, mock_banner, mock_check, mock_workflow
    ):
        mock_config_class.return_value = make_config()
        mock_workflow.return_value = WorkflowResult(
            failed_step="resolve_region_abbreviation",
            error=UnknownRegionError("mars-north1"),
        )

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.CONFIGURATION_ERROR

    @patch("cga.cli.run_bootstrap_workflow", side_effect=UserCancelledError("Cancelled"))
    @patch("cga.cli.check_cli_installed", return_value=(True, "1.0"))
    @patch("cga.cli.show_banner")
    @patch("cga.cli.ConfigManager")
    def test_cancel_exit_code(self, mock_config_class, mock_banner, mock_check, mock_workflow):
        mock_config_class.return_value = make_config()

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.USER_CANCELLED

    @patch("cga.cli.run_bootstrap_workflow", side_effect=KeyboardInterrupt)
    @patch("cga.cli.check_cli_installed", return_value=(True, "1.0"))
    @patch("cga.cli.show_banner")
    @patch("cga.cli.ConfigManager")
    def test_keyboard_interrupt(self, mock_config_class, mock_banner, mock_check, mock_workflow):
        mock_config_class.return_value = make_config()

        result = runner.invoke(app, [])

        assert result.exit_code == ExitCode.USER_CANCELLED

    def test_missing_directory_is_rejected(self, tmp_path):
        result = runner.invoke(app, ["--directory", str(tmp_path / "missing")])

        assert result.exit_code == 2
