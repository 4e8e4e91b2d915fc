"""Tests for Set-Cookie forwarding."""

from multidict import CIMultiDict

from db_journey_links.adapters.bahn_api.cookies import (
    MultiValueCookieSource,
    SingleValueCookieSource,
    build_cookie_header,
    cookie_source_for,
)


class TestCookieSourceSelection:
    """Tests for capability-based cookie source selection."""

    def test_when_headers_support_getall_then_uses_multi_value_source(self) -> None:
        """Given a multidict, when selecting, then every Set-Cookie value is returned."""
        headers = CIMultiDict(
            [
                ("Set-Cookie", "JSESSIONID=abc; Path=/; HttpOnly"),
                ("Content-Type", "application/json"),
                ("set-cookie", "bm_sv=xyz; Expires=Wed, 01 May 2024 10:00:00 GMT"),
            ]
        )

        source = cookie_source_for(headers)

        assert isinstance(source, MultiValueCookieSource)
        assert source.forwardable_cookies() == [
            "JSESSIONID=abc; Path=/; HttpOnly",
            "bm_sv=xyz; Expires=Wed, 01 May 2024 10:00:00 GMT",
        ]

    def test_when_headers_are_plain_mapping_then_uses_single_value_source(self) -> None:
        """Given a plain dict, when selecting, then the single combined value is forwarded."""
        headers = {"set-cookie": "JSESSIONID=abc; Path=/, bm_sv=xyz; Path=/"}

        source = cookie_source_for(headers)

        assert isinstance(source, SingleValueCookieSource)
        assert source.forwardable_cookies() == ["JSESSIONID=abc; Path=/, bm_sv=xyz; Path=/"]

    def test_when_no_cookies_then_sources_return_empty_lists(self) -> None:
        """Given no Set-Cookie header, when reading, then nothing is forwarded."""
        assert cookie_source_for(CIMultiDict()).forwardable_cookies() == []
        assert cookie_source_for({}).forwardable_cookies() == []


class TestBuildCookieHeader:
    """Tests for build_cookie_header."""

    def test_when_values_have_attributes_then_keeps_name_value_pairs(self) -> None:
        """Given Set-Cookie values with attributes, when building, then only name=value pairs remain."""
        header = build_cookie_header(["JSESSIONID=abc; Path=/; HttpOnly", "bm_sv=xyz"])

        assert header == "JSESSIONID=abc; bm_sv=xyz"

    def test_when_value_has_no_pair_then_it_is_skipped(self) -> None:
        """Given a malformed value, when building, then it is dropped."""
        assert build_cookie_header(["garbage", " ; Path=/"]) == ""
