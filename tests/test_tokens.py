"""Tests for cga.workflow.tokens module."""

import base64

from cga.workflow.tokens import generate_jwt_secret


def test_secret_decodes_to_256_bytes():
    secret = generate_jwt_secret()

    assert len(base64.b64decode(secret, validate=True)) == 256


def test_secret_is_fresh_per_call():
    assert generate_jwt_secret() != generate_jwt_secret()


def test_custom_length():
    assert len(base64.b64decode(generate_jwt_secret(32))) == 32
