"""Tests for cga.integrations.gcloud module."""

from pathlib import Path

import pytest

from cga.integrations.gcloud import GcloudClient, service_account_email
from cga.utils.errors import CommandFailedError
from tests.fakes import SAMPLE_REGION_TABLE, FakeCommandRunner, make_gcloud_runner


def test_service_account_email():
    assert service_account_email("cga-demo12") == "cga-demo12@appspot.gserviceaccount.com"


class TestGcloudClient:
    """Tests for the gcloud command wrappers."""

    def test_login_is_attached_to_terminal(self):
        runner = FakeCommandRunner()

        GcloudClient(runner).login()

        assert runner.calls == [(["gcloud", "auth", "login"], {"cwd": None, "capture": False})]

    def test_get_account_strips_output(self):
        runner = make_gcloud_runner()

        assert GcloudClient(runner).get_account() == "dev@example.com"
        assert runner.commands == [
            ["gcloud", "config", "list", "account", "--format", "value(core.account)"]
        ]

    def test_get_account_without_active_account(self):
        runner = FakeCommandRunner(responses={("gcloud", "config"): "\n"})

        with pytest.raises(CommandFailedError, match="no active account"):
            GcloudClient(runner).get_account()

    def test_create_project_sets_default(self):
        runner = FakeCommandRunner()

        GcloudClient(runner).create_project("cga-demo12")

        assert runner.commands == [["gcloud", "projects", "create", "cga-demo12", "--set-as-default"]]

    def test_list_app_regions_returns_raw_table(self):
        runner = make_gcloud_runner()

        assert GcloudClient(runner).list_app_regions() == SAMPLE_REGION_TABLE

    def test_create_app_passes_region(self):
        runner = FakeCommandRunner()

        GcloudClient(runner).create_app("europe-west3")

        assert runner.commands == [["gcloud", "app", "create", "--region=europe-west3"]]

    def test_enable_service(self):
        runner = FakeCommandRunner()

        GcloudClient(runner).enable_service("cloudbuild.googleapis.com")

        assert runner.commands == [["gcloud", "services", "enable", "cloudbuild.googleapis.com"]]

    def test_create_service_account_key(self):
        runner = FakeCommandRunner()
        key_file = Path("/work/cga-demo12/sa-private-key.json")

        GcloudClient(runner).create_service_account_key(key_file, "cga-demo12")

        assert runner.commands == [
            [
                "gcloud",
                "iam",
                "service-accounts",
                "keys",
                "create",
                str(key_file),
                "--iam-account=cga-demo12@appspot.gserviceaccount.com",
            ]
        ]

    def test_failures_propagate(self):
        runner = FakeCommandRunner(failures={("gcloud", "app", "create"): 1})

        with pytest.raises(CommandFailedError):
            GcloudClient(runner).create_app("europe-west3")
