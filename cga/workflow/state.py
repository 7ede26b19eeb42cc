"""Workflow state management for CGA.

This module provides the BootstrapState dataclass that carries values
forward from one step to the next, and the BootstrapContext bundling
that state with the collaborators every step may use.
"""

from dataclasses import dataclass, field
from pathlib import Path

from cga.config.settings import Settings
from cga.integrations.commands import Runner
from cga.integrations.gcloud import GcloudClient
from cga.workflow.constants import OAUTH_REDIRECT_PATH
from cga.workflow.env_files import EnvMapping
from cga.workflow.regions import app_hostname


@dataclass
class BootstrapState:
    """Values produced by the bootstrap steps.

    Fields start empty and are filled in step order. Each field is written
    by exactly one step; later steps only read it.

    Attributes:
        account_email: Active gcloud account
        project_name: Operator-supplied project name
        project_id: PROJECT_PREFIX + project_name, set once
        regions: Region codes offered by App Engine
        region: Selected region code
        region_abbreviation: appspot.com region id of the selected region
        jwt_secret: Generated token signing secret
        client_id: OAuth client id
        client_secret: OAuth client secret
        environments: Assembled dev/prod environment sets
        project_dir: Scaffolded project directory
    """

    account_email: str = ""
    project_name: str = ""
    project_id: str = ""
    regions: list[str] = field(default_factory=list)
    region: str = ""
    region_abbreviation: str = ""
    jwt_secret: str = field(default="", repr=False)
    client_id: str = ""
    client_secret: str = field(default="", repr=False)
    environments: dict[str, EnvMapping] = field(default_factory=dict, repr=False)
    project_dir: Path | None = None

    @property
    def app_hostname(self) -> str:
        """Default App Engine hostname, e.g. cga-demo12.ey.r.appspot.com."""
        return app_hostname(self.project_id, self.region_abbreviation)

    @property
    def production_origin(self) -> str:
        return f"https://{self.app_hostname}"

    @property
    def production_redirect_url(self) -> str:
        return f"{self.production_origin}{OAUTH_REDIRECT_PATH}"


@dataclass
class BootstrapContext:
    """Everything a bootstrap step can read or call.

    Attributes:
        state: Values threaded between steps
        runner: Command runner for git and the package manager
        gcloud: gcloud wrapper sharing the same runner
        settings: Effective configuration
        workdir: Parent directory of the scaffolded project
    """

    state: BootstrapState
    runner: Runner
    gcloud: GcloudClient
    settings: Settings
    workdir: Path

    @classmethod
    def create(
        cls,
        runner: Runner,
        settings: Settings | None = None,
        workdir: Path | None = None,
    ) -> "BootstrapContext":
        """Build a fresh context around a runner."""
        return cls(
            state=BootstrapState(),
            runner=runner,
            gcloud=GcloudClient(runner),
            settings=settings or Settings(),
            workdir=workdir or Path.cwd(),
        )


__all__ = [
    "BootstrapState",
    "BootstrapContext",
]
