"""App Engine region handling.

App Engine serves every app at ``<project>.<region id>.r.appspot.com``,
where the region id is a short code that gcloud does not print. This
module parses the region table and maps region codes to those ids.
"""

from collections.abc import Mapping
from types import MappingProxyType

from cga.utils.errors import UnknownRegionError

# Region code -> appspot.com region id
REGION_ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {
        "northamerica-northeast1": "nn",
        "us-central": "uc",
        "us-west2": "wl",
        "us-west3": "wm",
        "us-west4": "wn",
        "us-east1": "ue",
        "us-east4": "uk",
        "southamerica-east1": "rj",
        "europe-west": "ew",
        "europe-west2": "nw",
        "europe-west3": "ey",
        "europe-west6": "oa",
        "europe-central2": "lm",
        "asia-northeast1": "an",
        "asia-northeast2": "dt",
        "asia-northeast3": "du",
        "asia-east1": "de",
        "asia-east2": "df",
        "asia-south1": "el",
        "asia-southeast1": "as",
        "asia-southeast2": "et",
        "australia-southeast1": "ts",
    }
)


def parse_region_table(output: str) -> list[str]:
    """Extract region codes from `gcloud app regions list` output.

    The first line is the column header and the last line is the empty
    string after the final newline; both are dropped. Each remaining line
    contributes the text before its first space. A line with no space
    contributes the whole line, not an empty string, so a table without
    trailing columns still yields usable region codes.

    Args:
        output: Raw stdout of the region listing

    Returns:
        Region codes in listing order
    """
    lines = output.split("\n")[1:-1]
    return [line.partition(" ")[0] for line in lines]


def resolve_region_abbreviation(
    region: str,
    extra: Mapping[str, str] | None = None,
) -> str:
    """Return the appspot.com region id for a region code.

    Args:
        region: App Engine region code (e.g. "europe-west3")
        extra: Configured additions, consulted before the built-in table

    Raises:
        UnknownRegionError: If neither table knows the region
    """
    if extra and region in extra:
        return extra[region]
    try:
        return REGION_ABBREVIATIONS[region]
    except KeyError:
        raise UnknownRegionError(region) from None


def app_hostname(project_id: str, abbreviation: str) -> str:
    """Return the default App Engine hostname of a project."""
    return f"{project_id}.{abbreviation}.r.appspot.com"


__all__ = [
    "REGION_ABBREVIATIONS",
    "parse_region_table",
    "resolve_region_abbreviation",
    "app_hostname",
]
