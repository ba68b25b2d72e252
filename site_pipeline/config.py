"""Build tool settings, overridable from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_HUGO_VERSION = "0.114.1"
DEFAULT_HUGO_SHA256 = "018daab2560b4c78b47427f2075ac32b5eaf618a782a6be33693ce508150cd3c"


@dataclass(frozen=True)
class BuildToolConfig:
  """Hugo release to install and the SHA-256 of its Linux-64bit archive."""

  version: str = DEFAULT_HUGO_VERSION
  sha256: str = DEFAULT_HUGO_SHA256

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None) -> "BuildToolConfig":
    """Read HUGO_VERSION and HUGO_SHA256, falling back to the pinned release."""
    env = os.environ if environ is None else environ
    return cls(
      version=env.get("HUGO_VERSION") or DEFAULT_HUGO_VERSION,
      sha256=env.get("HUGO_SHA256") or DEFAULT_HUGO_SHA256,
    )
