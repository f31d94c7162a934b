"""
Unit tests for URL parsing and rendering.
"""

import pytest

from goat.errors import InvalidPort, MalformedUrl, UnsupportedScheme, URLParseError
from goat.url import (
    DataUrl,
    FileUrl,
    ViewSourceUrl,
    WebUrl,
    default_port,
    parse_url,
)


class TestWebUrl:
    """Tests for http and https URLs."""

    def test_parse_example_org(self):
        """Test the basic case with a trailing slash."""
        url = parse_url("http://example.org/")

        assert isinstance(url, WebUrl)
        assert url.scheme == "http"
        assert url.host == "example.org"
        assert url.port == 80
        assert url.path == "/"

    def test_parse_without_slash(self):
        """Test that no slash is added when the input had none."""
        url = parse_url("http://example.org")

        assert url.host == "example.org"
        assert url.path == ""

    def test_parse_with_path(self):
        """Test a multi-segment path."""
        url = parse_url("http://example.org/my/path")

        assert url.host == "example.org"
        assert url.path == "/my/path"

    def test_parse_trailing_slash_preserved(self):
        """Test that a trailing slash on a path is kept."""
        assert parse_url("http://example.org/a/b/").path == "/a/b/"

    def test_parse_host_port(self):
        """Test an explicit port."""
        url = parse_url("http://127.0.0.1:1234/")

        assert url.host == "127.0.0.1"
        assert url.port == 1234
        assert url.path == "/"

    def test_parse_port_and_path(self):
        """Test an explicit port followed by a multi-segment path."""
        url = parse_url("http://localhost:8888/data/index.html")

        assert url.port == 8888
        assert url.path == "/data/index.html"

    def test_parse_https_default_port(self):
        """Test the https default port."""
        url = parse_url("https://example.org")

        assert url.scheme == "https"
        assert url.port == 443

    def test_empty_port_uses_default(self):
        """Test that a bare ':' falls back to the scheme default."""
        assert parse_url("http://example.org:/").port == 80

    def test_query_kept_in_path(self):
        """Test that query text is carried verbatim in the path."""
        assert parse_url("http://example.org/search?q=a%20b").path == "/search?q=a%20b"

    def test_colon_in_path_is_not_a_port(self):
        """Test that ':' after the first '/' belongs to the path."""
        url = parse_url("http://example.org/a:b")

        assert url.port == 80
        assert url.path == "/a:b"

    def test_request_target(self):
        """Test that an empty path is requested as '/'."""
        assert parse_url("http://example.org").request_target == "/"
        assert parse_url("http://example.org/x").request_target == "/x"

    def test_address(self):
        """Test the (host, port) pair."""
        assert parse_url("https://example.org:8443/").address == ("example.org", 8443)

    @pytest.mark.parametrize(
        "raw,rendered",
        [
            ("http://example.org", "http://example.org:80"),
            ("http://example.org/", "http://example.org:80/"),
            ("http://example.org/a/b", "http://example.org:80/a/b"),
            ("http://example.org/a/b/", "http://example.org:80/a/b/"),
            ("https://example.org:8443/x", "https://example.org:8443/x"),
        ],
    )
    def test_round_trip(self, raw, rendered):
        """Test that rendering gives the normalized form and parses back."""
        url = parse_url(raw)

        assert str(url) == rendered
        assert parse_url(str(url)) == url


class TestWebUrlErrors:
    """Tests for invalid web URLs."""

    @pytest.mark.parametrize(
        "raw",
        [
            "http://host:abc/",
            "http://host:0/",
            "http://host:70000/",
            "http://host:+80/",
            "http://host: 80/",
            "http://a:b:80/",
        ],
    )
    def test_invalid_port(self, raw):
        """Test that bad port segments raise InvalidPort."""
        with pytest.raises(InvalidPort) as exc_info:
            parse_url(raw)

        assert exc_info.value.url == raw

    def test_invalid_port_carries_segment(self):
        """Test that the error names the offending port text."""
        with pytest.raises(InvalidPort) as exc_info:
            parse_url("http://host:abc/")

        assert exc_info.value.port == "abc"

    @pytest.mark.parametrize("raw", ["http:/example.org", "http:example.org", "https://"])
    def test_malformed(self, raw):
        """Test missing '//' prefix or empty host."""
        with pytest.raises(MalformedUrl):
            parse_url(raw)

    def test_missing_host(self):
        """Test an empty authority in front of a path."""
        with pytest.raises(MalformedUrl):
            parse_url("http:///index.html")

    @pytest.mark.parametrize(
        "raw",
        [
            "http://example.org/x HTTP/1.0\r\nX-Injected: 1\r\n\r\nGET /y",
            "http://example.org/a\nb",
            "http://exa\rmple.org/",
            "https://example.org/tab\there",
            "http://example.org/nul\x00",
            "http://example.org/del\x7f",
            "http://example.org/a b",
        ],
    )
    def test_control_characters_rejected(self, raw):
        """Test that control characters and spaces never reach the request."""
        with pytest.raises(MalformedUrl) as exc_info:
            parse_url(raw)

        assert exc_info.value.url == raw

    def test_view_source_control_characters_rejected(self):
        """Test that the inner URL is checked too."""
        with pytest.raises(MalformedUrl):
            parse_url("view-source:http://example.org/\r\nX: 1")


class TestOtherSchemes:
    """Tests for data, file and view-source URLs."""

    def test_data(self):
        """Test mimetype and data split on the first comma."""
        url = parse_url("data:text/html,Hello world!")

        assert isinstance(url, DataUrl)
        assert url.mimetype == "text/html"
        assert url.data == "Hello world!"

    def test_data_keeps_later_commas(self):
        """Test that commas after the first belong to the data."""
        assert parse_url("data:text/plain,a,b,c").data == "a,b,c"

    def test_data_without_comma(self):
        """Test that a data URL needs a comma."""
        with pytest.raises(MalformedUrl):
            parse_url("data:text/plain")

    def test_file(self, tmp_path):
        """Test that the file path is used verbatim."""
        path = f"{tmp_path}/data/index.html"
        url = parse_url(f"file://{path}")

        assert isinstance(url, FileUrl)
        assert url.scheme == "file"
        assert url.path == path

    def test_file_without_slashes(self):
        """Test that file URLs need the '//' prefix."""
        with pytest.raises(MalformedUrl):
            parse_url("file:/etc/hosts")

    def test_view_source(self):
        """Test that view-source wraps a parsed web URL."""
        url = parse_url("view-source:http://localhost:8888/data/index.html")

        assert isinstance(url, ViewSourceUrl)
        assert url.scheme == "view-source"
        assert url.inner == WebUrl("http", "localhost", 8888, "/data/index.html")

    def test_view_source_inner_error_propagates(self):
        """Test that errors from the wrapped URL surface unchanged."""
        with pytest.raises(InvalidPort):
            parse_url("view-source:http://localhost:port/")

    @pytest.mark.parametrize(
        "raw",
        [
            "view-source:file:///etc/hosts",
            "view-source:data:text/plain,hi",
            "view-source:view-source:http://example.org/",
        ],
    )
    def test_view_source_requires_web_url(self, raw):
        """Test that only http/https URLs can be wrapped."""
        with pytest.raises(UnsupportedScheme):
            parse_url(raw)

    @pytest.mark.parametrize(
        "raw,rendered",
        [
            ("file:///tmp/index.html", "file:///tmp/index.html"),
            ("data:text/html,Hello", "data://text/html,Hello"),
            ("view-source:http://example.org/", "view-source:http://example.org:80/"),
        ],
    )
    def test_render(self, raw, rendered):
        """Test canonical string forms."""
        assert str(parse_url(raw)) == rendered


class TestParseErrors:
    """Tests for scheme-level failures."""

    def test_no_scheme_delimiter(self):
        """Test that a string without ':' is malformed."""
        with pytest.raises(MalformedUrl) as exc_info:
            parse_url("example.org")

        assert exc_info.value.url == "example.org"

    def test_unsupported_scheme(self):
        """Test that unknown schemes are rejected."""
        with pytest.raises(UnsupportedScheme) as exc_info:
            parse_url("gopher://example.org/")

        assert exc_info.value.scheme == "gopher"

    def test_scheme_is_case_sensitive(self):
        """Test that 'HTTP' is not 'http'."""
        with pytest.raises(UnsupportedScheme):
            parse_url("HTTP://example.org/")

    def test_errors_share_base_class(self):
        """Test that every parse error is a URLParseError."""
        for raw in ("nothing", "gopher://x", "http://x:y/"):
            with pytest.raises(URLParseError):
                parse_url(raw)


def test_default_port():
    """Test default ports per scheme."""
    assert default_port("http") == 80
    assert default_port("https") == 443

    with pytest.raises(KeyError):
        default_port("file")
