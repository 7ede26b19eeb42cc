"""Test fakes for command execution."""

from tests.fakes.fake_runner import SAMPLE_REGION_TABLE, FakeCommandRunner, make_gcloud_runner

__all__ = [
    "FakeCommandRunner",
    "SAMPLE_REGION_TABLE",
    "make_gcloud_runner",
]
