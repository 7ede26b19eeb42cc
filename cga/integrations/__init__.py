"""External tool integrations for CGA.

This package contains:
- commands: CommandRunner, the single seam to subprocess
- gcloud: Google Cloud CLI wrapper
- git: template scaffolding and repository initialization
- packages: dependency installation
"""

from cga.integrations.commands import CommandResult, CommandRunner, Runner
from cga.integrations.gcloud import GcloudClient, service_account_email

__all__ = [
    "CommandResult",
    "CommandRunner",
    "Runner",
    "GcloudClient",
    "service_account_email",
]
