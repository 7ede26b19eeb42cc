"""Google Cloud CLI operations for CGA.

Thin wrappers over the gcloud commands the bootstrap workflow needs.
The exact command strings are the contract with gcloud; output parsing
lives with the callers.
"""

import shlex
from pathlib import Path

from cga.integrations.commands import Runner
from cga.utils.errors import CommandFailedError

GCLOUD_BIN = "gcloud"


def service_account_email(project_id: str) -> str:
    """Return the App Engine default service account of a project."""
    return f"{project_id}@appspot.gserviceaccount.com"


class GcloudClient:
    """Runs gcloud commands through a Runner.

    Args:
        runner: Command runner used for every invocation
    """

    def __init__(self, runner: Runner) -> None:
        self._runner = runner

    def _gcloud(self, args: list[str], *, capture: bool = True) -> str:
        return self._runner.run([GCLOUD_BIN, *args], capture=capture).stdout

    def login(self) -> None:
        """Run the interactive browser login attached to the terminal."""
        self._gcloud(["auth", "login"], capture=False)

    def get_account(self) -> str:
        """Return the active account email.

        Raises:
            CommandFailedError: If gcloud reports no active account
        """
        args = ["config", "list", "account", "--format", "value(core.account)"]
        email = self._gcloud(args).strip()
        if not email:
            raise CommandFailedError(
                shlex.join([GCLOUD_BIN, *args]),
                0,
                "no active account is configured",
            )
        return email

    def create_project(self, project_id: str) -> None:
        """Create a project and make it the default for later commands."""
        self._gcloud(["projects", "create", project_id, "--set-as-default"])

    def list_app_regions(self) -> str:
        """Return the raw `gcloud app regions list` table."""
        return self._gcloud(["app", "regions", "list"])

    def create_app(self, region: str) -> None:
        """Create the App Engine application in a region."""
        self._gcloud(["app", "create", f"--region={region}"])

    def enable_service(self, service: str) -> None:
        """Enable a Google API on the default project."""
        self._gcloud(["services", "enable", service])

    def create_service_account_key(self, key_file: Path, project_id: str) -> None:
        """Write a new key for the App Engine service account to key_file."""
        self._gcloud(
            [
                "iam",
                "service-accounts",
                "keys",
                "create",
                str(key_file),
                f"--iam-account={service_account_email(project_id)}",
            ]
        )


__all__ = [
    "GCLOUD_BIN",
    "GcloudClient",
    "service_account_email",
]
