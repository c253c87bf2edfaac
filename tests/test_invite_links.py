"""Tests for invite link parsing and building."""

import pytest

from homebase_backend.core.exceptions import InvalidInviteError
from homebase_backend.modules.tenant_management import (
    build_invite_url,
    parse_invite_url,
)


class TestParseInviteUrl:
    """Tests for parse_invite_url."""

    def test_returns_property_reference(self) -> None:
        assert parse_invite_url("https://x/invite?property=abc123") == "abc123"

    def test_custom_scheme(self) -> None:
        assert parse_invite_url("homebase://invite?property=abc123") == "abc123"

    def test_other_parameters_ignored(self) -> None:
        url = "https://x/invite?utm_source=sms&property=abc123&ref=2"

        assert parse_invite_url(url) == "abc123"

    def test_surrounding_whitespace_trimmed(self) -> None:
        assert parse_invite_url("  https://x/invite?property=abc123\n") == "abc123"

    def test_value_returned_unvalidated(self) -> None:
        assert parse_invite_url("https://x/invite?property=not-a-uuid") == "not-a-uuid"

    @pytest.mark.parametrize(
        "url",
        [
            "https://x/invite",
            "https://x/invite?property=",
            "https://x/invite?property=%20",
            "https://x/invite?prop=abc123",
            "https://x/invite?Property=abc123",
        ],
    )
    def test_missing_or_empty_reference(self, url: str) -> None:
        with pytest.raises(InvalidInviteError):
            parse_invite_url(url)

    @pytest.mark.parametrize("url", ["not a url", "", "   ", "invite?property=abc"])
    def test_malformed_url(self, url: str) -> None:
        with pytest.raises(InvalidInviteError):
            parse_invite_url(url)

    def test_error_keeps_url(self) -> None:
        with pytest.raises(InvalidInviteError) as exc_info:
            parse_invite_url("https://x/invite")

        assert exc_info.value.status_code == 400
        assert exc_info.value.url == "https://x/invite"


class TestBuildInviteUrl:
    """Tests for build_invite_url."""

    def test_uses_configured_base(self) -> None:
        assert build_invite_url("abc123") == "https://homebase.test/invite?property=abc123"

    def test_explicit_base_and_path(self) -> None:
        url = build_invite_url("abc123", base_url="https://example.com/", path="join")

        assert url == "https://example.com/join?property=abc123"

    def test_parses_back(self) -> None:
        assert parse_invite_url(build_invite_url("p-42")) == "p-42"
