"""Lambda@Edge origin-request handler that resolves directory paths to index.html.

S3 origins accessed through an Origin Access Identity have no notion of a
directory index, so `/about/` would otherwise 403. This rewrites:

  /          -> /index.html
  /about/    -> /about/index.html
  /about     -> /about/index.html
  /style.css -> /style.css (unchanged)
"""

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger()
logger.setLevel(logging.INFO)

INDEX_DOCUMENT = "index.html"


class InvalidRequest(ValueError):
  """Request URI is empty or not an absolute path."""


def rewrite_uri(uri: str) -> str:
  """Return the URI with directory-style paths pointing at their index document.

  Any `?query` suffix is kept out of the extension check and re-attached.
  """
  if not isinstance(uri, str) or not uri.startswith("/"):
    raise InvalidRequest(f"URI must start with '/': {uri!r}")

  path, sep, query = uri.partition("?")

  if path.endswith("/"):
    path = f"{path}{INDEX_DOCUMENT}"
  elif "." not in path.rsplit("/", 1)[-1]:
    path = f"{path}/{INDEX_DOCUMENT}"

  return f"{path}{sep}{query}"


def rewrite_request(request: Mapping[str, Any]) -> dict[str, Any]:
  """Return a copy of the CloudFront request with only `uri` rewritten."""
  if "uri" not in request:
    raise InvalidRequest("Request has no 'uri' field")

  uri = request["uri"]
  rewritten = rewrite_uri(uri)
  if rewritten != uri:
    logger.debug("Rewrote %s -> %s", uri, rewritten)
  else:
    logger.debug("Passing through %s", uri)

  return {**request, "uri": rewritten}


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
  """Origin-request entry point."""
  try:
    request = event["Records"][0]["cf"]["request"]
  except (KeyError, IndexError, TypeError) as e:
    logger.warning("Malformed origin-request event: %s", e)
    raise InvalidRequest("Event does not contain a CloudFront request") from e

  if not isinstance(request, Mapping):
    logger.warning("Origin-request event carries a non-mapping request: %r", request)
    raise InvalidRequest("CloudFront request is not a mapping")

  try:
    return rewrite_request(request)
  except InvalidRequest:
    logger.warning("Rejected request URI: %r", request.get("uri"))
    raise
