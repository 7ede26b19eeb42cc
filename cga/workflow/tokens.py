"""Signing secret generation for the generated env files."""

import base64
import secrets

from cga.workflow.constants import JWT_SECRET_BYTES


def generate_jwt_secret(num_bytes: int = JWT_SECRET_BYTES) -> str:
    """Return num_bytes of OS randomness, base64 encoded."""
    return base64.b64encode(secrets.token_bytes(num_bytes)).decode("ascii")


__all__ = ["generate_jwt_secret"]
