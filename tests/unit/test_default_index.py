"""Tests for the default-index origin-request edge function."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Add the edge function directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "edge_functions" / "default_index"))

from index import InvalidRequest, handler, rewrite_request, rewrite_uri


def make_event(request: dict[str, Any]) -> dict[str, Any]:
  """Build a CloudFront origin-request event around a request."""
  return {
    "Records": [
      {
        "cf": {
          "config": {"distributionId": "EDFDVBD6EXAMPLE", "eventType": "origin-request"},
          "request": request,
        }
      }
    ]
  }


class TestRewriteUri:
  """Tests for rewrite_uri."""

  @pytest.mark.parametrize(
    ("uri", "expected"),
    [
      ("/", "/index.html"),
      ("/about/", "/about/index.html"),
      ("/blog/", "/blog/index.html"),
      ("/posts/2023/hello/", "/posts/2023/hello/index.html"),
    ],
  )
  def test_trailing_slash_appends_index(self, uri: str, expected: str) -> None:
    """Directory paths get index.html appended."""
    assert rewrite_uri(uri) == expected

  @pytest.mark.parametrize(
    ("uri", "expected"),
    [
      ("/about", "/about/index.html"),
      ("/a.b/c", "/a.b/c/index.html"),
      ("/posts/2023/hello", "/posts/2023/hello/index.html"),
    ],
  )
  def test_extensionless_path_appends_slash_index(self, uri: str, expected: str) -> None:
    """Paths without an extension in the last segment are treated as directories."""
    assert rewrite_uri(uri) == expected

  @pytest.mark.parametrize(
    "uri",
    ["/style.css", "/favicon.ico", "/a.b/c.d", "/images/photo.large.jpg", "/index.html"],
  )
  def test_file_paths_pass_through(self, uri: str) -> None:
    """Paths naming a file are unchanged."""
    assert rewrite_uri(uri) == uri

  @pytest.mark.parametrize("uri", ["/", "/about", "/about/", "/a.b/c", "/style.css"])
  def test_rewrite_is_idempotent(self, uri: str) -> None:
    """Rewriting an already rewritten URI changes nothing."""
    once = rewrite_uri(uri)
    assert rewrite_uri(once) == once

  def test_query_string_is_not_part_of_final_segment(self) -> None:
    """A dot in the query string does not count as an extension."""
    assert rewrite_uri("/about?v=1.2") == "/about/index.html?v=1.2"
    assert rewrite_uri("/docs/?page=2") == "/docs/index.html?page=2"
    assert rewrite_uri("/app.js?v=3") == "/app.js?v=3"

  @pytest.mark.parametrize("uri", ["", "about", "index.html", None])
  def test_rejects_relative_or_empty_uri(self, uri: Any) -> None:
    """URIs that are not absolute paths are rejected."""
    with pytest.raises(InvalidRequest):
      rewrite_uri(uri)

  def test_invalid_request_is_value_error(self) -> None:
    """InvalidRequest can be caught as a ValueError."""
    assert issubclass(InvalidRequest, ValueError)


class TestRewriteRequest:
  """Tests for rewrite_request."""

  def test_only_uri_changes(self) -> None:
    """Headers, method and other fields are carried over untouched."""
    request = {
      "uri": "/about",
      "method": "GET",
      "querystring": "",
      "headers": {"host": [{"key": "Host", "value": "example.com"}]},
    }

    rewritten = rewrite_request(request)

    assert rewritten["uri"] == "/about/index.html"
    assert rewritten["method"] == "GET"
    assert rewritten["headers"] == request["headers"]
    assert rewritten["querystring"] == ""

  def test_input_is_not_mutated(self) -> None:
    """The incoming request mapping is left as it was."""
    request = {"uri": "/blog/", "method": "GET"}

    rewrite_request(request)

    assert request == {"uri": "/blog/", "method": "GET"}

  def test_missing_uri_rejected(self) -> None:
    """A request without a uri field is invalid."""
    with pytest.raises(InvalidRequest):
      rewrite_request({"method": "GET"})


class TestHandler:
  """Tests for the Lambda@Edge handler."""

  def test_returns_rewritten_request(self) -> None:
    """Handler returns the request CloudFront should forward to the origin."""
    event = make_event({"uri": "/", "method": "GET", "headers": {}})

    result = handler(event, None)

    assert result == {"uri": "/index.html", "method": "GET", "headers": {}}

  def test_passes_files_through(self) -> None:
    """Files are forwarded as requested."""
    event = make_event({"uri": "/css/main.css", "method": "GET", "headers": {}})

    assert handler(event, None)["uri"] == "/css/main.css"

  def test_invocations_are_independent(self) -> None:
    """No state leaks from one invocation to the next."""
    first = handler(make_event({"uri": "/about"}), None)
    second = handler(make_event({"uri": "/style.css"}), None)

    assert first["uri"] == "/about/index.html"
    assert second["uri"] == "/style.css"

  @pytest.mark.parametrize(
    "event",
    [{}, {"Records": []}, {"Records": [{"cf": {}}]}, {"Records": [{}]}],
  )
  def test_malformed_event_rejected(self, event: dict[str, Any]) -> None:
    """Events without a CloudFront request are invalid."""
    with pytest.raises(InvalidRequest):
      handler(event, None)

  def test_relative_uri_rejected(self) -> None:
    """Relative URIs in the event are invalid."""
    with pytest.raises(InvalidRequest):
      handler(make_event({"uri": "about"}), None)

  @pytest.mark.parametrize("request_", ["GET /about", ["/about"], None])
  def test_non_mapping_request_rejected(self, request_: Any) -> None:
    """A request that is not an object is invalid, not an AttributeError."""
    with pytest.raises(InvalidRequest, match="not a mapping"):
      handler(make_event(request_), None)
