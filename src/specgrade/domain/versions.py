"""Supported OpenAPI versions and their official schema URLs."""

from __future__ import annotations

from typing import Optional

VERSION_SCHEMA_URLS: dict[str, str] = {
    "3.0.0": "https://spec.openapis.org/oas/3.0/schema/2019-04-02",
    "3.0.1": "https://spec.openapis.org/oas/3.0/schema/2019-04-02",
    "3.0.2": "https://spec.openapis.org/oas/3.0/schema/2019-04-02",
    "3.0.3": "https://spec.openapis.org/oas/3.0/schema/2021-09-28",
    "3.1.0": "https://spec.openapis.org/oas/3.1/schema/2022-10-07",
}

DEFAULT_VERSION = "3.1.0"


def is_supported_version(version: str) -> bool:
    return version in VERSION_SCHEMA_URLS


def schema_url(version: str) -> Optional[str]:
    """Return the schema URL for *version*, or ``None`` if unsupported."""
    return VERSION_SCHEMA_URLS.get(version)


def supported_versions() -> list[str]:
    return list(VERSION_SCHEMA_URLS)
