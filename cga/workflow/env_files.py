"""Environment file generation for scaffolded projects.

The starter app reads its settings from ``.env`` during development and
from ``.env.production`` on App Engine. Both files are built from the same
values and differ only in the OAuth redirect URL and the service account
key file, which only the development server loads from disk.
"""

from pathlib import Path

from cga.utils.errors import ScaffoldError
from cga.utils.logging import log_message
from cga.workflow.constants import (
    DEV_ENV_FILE,
    JWT_EXPIRES_IN,
    OAUTH_REDIRECT_PATH,
    PROD_ENV_FILE,
    SERVICE_ACCOUNT_KEYFILE,
)

EnvMapping = dict[str, str | None]

NULL_VALUE = "null"


def build_environments(
    *,
    jwt_secret: str,
    client_id: str,
    client_secret: str,
    local_origin: str,
    production_origin: str,
) -> dict[str, EnvMapping]:
    """Assemble the dev and prod environment configuration sets.

    Args:
        jwt_secret: Token signing secret shared by both environments
        client_id: OAuth client id
        client_secret: OAuth client secret
        local_origin: Origin of the local dev server
        production_origin: https origin of the App Engine app

    Returns:
        {"dev": {...}, "prod": {...}} in file key order
    """
    dev: EnvMapping = {
        "JWT_SECRET": jwt_secret,
        "JWT_EXPIRES_IN": JWT_EXPIRES_IN,
        "OAUTH_GOOGLE_ID": client_id,
        "OAUTH_GOOGLE_SECRET": client_secret,
        "OAUTH_GOOGLE_REDIRECT_URL": f"{local_origin}{OAUTH_REDIRECT_PATH}",
        "GCP_SA_KEYFILE": SERVICE_ACCOUNT_KEYFILE,
        "MAIL_FROM": None,
    }
    prod: EnvMapping = {
        "JWT_SECRET": jwt_secret,
        "JWT_EXPIRES_IN": JWT_EXPIRES_IN,
        "OAUTH_GOOGLE_ID": client_id,
        "OAUTH_GOOGLE_SECRET": client_secret,
        "OAUTH_GOOGLE_REDIRECT_URL": f"{production_origin}{OAUTH_REDIRECT_PATH}",
        "MAIL_FROM": None,
    }
    return {"dev": dev, "prod": prod}


def serialize_env(env: EnvMapping) -> str:
    """Render a mapping as newline-terminated KEY=VALUE lines.

    None is written as the literal ``null``.
    """
    lines = [f"{key}={NULL_VALUE if value is None else value}\n" for key, value in env.items()]
    return "".join(lines)


def parse_env(text: str) -> EnvMapping:
    """Parse KEY=VALUE lines back into a mapping.

    Blank lines and ``#`` comments are skipped. Lines split at the first
    ``=``, so values may contain ``=`` (base64 padding does). The literal
    ``null`` becomes None.
    """
    env: EnvMapping = {}
    for line in text.splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        env[key.strip()] = None if value == NULL_VALUE else value
    return env


def write_env_files(directory: Path, environments: dict[str, EnvMapping]) -> list[Path]:
    """Write .env (dev) and .env.production (prod) into directory.

    Returns:
        Paths of the written files

    Raises:
        ScaffoldError: If the directory does not exist or a file cannot be written
    """
    if not directory.is_dir():
        raise ScaffoldError(f"Project directory not found: {directory}")

    written: list[Path] = []
    for name, filename in (("dev", DEV_ENV_FILE), ("prod", PROD_ENV_FILE)):
        path = directory / filename
        try:
            path.write_text(serialize_env(environments[name]))
        except OSError as e:
            raise ScaffoldError(f"Failed to write {path}: {e}") from e
        log_message(f"Wrote {path} ({len(environments[name])} keys)")
        written.append(path)
    return written


__all__ = [
    "EnvMapping",
    "NULL_VALUE",
    "build_environments",
    "serialize_env",
    "parse_env",
    "write_env_files",
]
