"""Tests for the supported OpenAPI version table."""

from __future__ import annotations

import pytest

from specgrade.domain.versions import (
    DEFAULT_VERSION,
    is_supported_version,
    schema_url,
    supported_versions,
)


class TestVersionTable:
    def test_supported(self):
        assert supported_versions() == ["3.0.0", "3.0.1", "3.0.2", "3.0.3", "3.1.0"]
        assert is_supported_version(DEFAULT_VERSION)

    @pytest.mark.parametrize("version", ["2.0", "3.1", "3.2.0", ""])
    def test_unsupported(self, version):
        assert not is_supported_version(version)
        assert schema_url(version) is None

    def test_schema_urls(self):
        assert schema_url("3.1.0") == "https://spec.openapis.org/oas/3.1/schema/2022-10-07"
        assert schema_url("3.0.3").endswith("2021-09-28")
