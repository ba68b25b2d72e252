"""Fetch the site source from git."""

import logging
import subprocess
from pathlib import Path

from .errors import FetchFailure
from .stages import FETCH, Artifact

logger = logging.getLogger(__name__)


class GitSource:
  """Shallow clone of a branch tip, with theme submodules."""

  def __init__(
    self,
    repository_url: str,
    workdir: Path | str,
    *,
    branch: str = "main",
    git: str = "git",
  ) -> None:
    self.repository_url = repository_url
    self.workdir = Path(workdir)
    self.branch = branch
    self.git = git

  def _run(self, *args: str, cwd: Path | None = None) -> None:
    try:
      result = subprocess.run(
        [self.git, *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
      )
    except OSError as e:
      raise FetchFailure(FETCH, f"Could not run git: {e}") from e

    if result.returncode != 0:
      message = result.stderr.strip() or f"git {args[0]} exited {result.returncode}"
      raise FetchFailure(FETCH, message)

  def fetch(self) -> Artifact:
    """Clone the branch into `workdir/source` and return its file tree."""
    target = self.workdir / "source"
    if target.exists():
      raise FetchFailure(FETCH, f"Checkout directory already exists: {target}")

    logger.info("Cloning %s (%s)", self.repository_url, self.branch)
    self._run(
      "clone",
      "--depth",
      "1",
      "--branch",
      self.branch,
      "--single-branch",
      self.repository_url,
      str(target),
    )
    self._run("submodule", "update", "--init", "--recursive", cwd=target)

    return Artifact.from_directory(target)
