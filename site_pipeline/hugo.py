"""Build the static site with Hugo."""

import hashlib
import logging
import re
import subprocess
import tarfile
from pathlib import Path

from .config import BuildToolConfig
from .errors import BuildFailure
from .stages import BUILD, Artifact

logger = logging.getLogger(__name__)

RELEASE_URL = (
  "https://github.com/gohugoio/hugo/releases/download/"
  "v{version}/hugo_{version}_Linux-64bit.tar.gz"
)

# `hugo version` prints e.g. "hugo v0.114.1-9ba8.. linux/amd64 BuildDate=..."
VERSION_PATTERN = re.compile(r"\bv(\d+\.\d+\.\d+)")


def release_url(version: str) -> str:
  """Download URL of the Linux-64bit release archive for `version`."""
  return RELEASE_URL.format(version=version)


def sha256_of(path: Path) -> str:
  digest = hashlib.sha256()
  with open(path, "rb") as f:
    for chunk in iter(lambda: f.read(65536), b""):
      digest.update(chunk)
  return digest.hexdigest()


class HugoBuilder:
  """Run `hugo` over a source tree and collect the generated `public/` tree."""

  def __init__(
    self,
    workdir: Path | str,
    *,
    tool: BuildToolConfig | None = None,
    binary: str = "hugo",
    archive: Path | str | None = None,
  ) -> None:
    self.workdir = Path(workdir)
    self.tool = tool or BuildToolConfig.from_env()
    self.binary = binary
    # Release archive to verify and unpack before the first build
    self.archive = Path(archive) if archive else None
    self._installed = False

  def verify_archive(self, archive: Path | str) -> None:
    """Check a downloaded release archive against the pinned SHA-256."""
    actual = sha256_of(Path(archive))
    if actual != self.tool.sha256.lower():
      raise BuildFailure(
        BUILD,
        f"Checksum mismatch for hugo {self.tool.version}: "
        f"expected {self.tool.sha256}, got {actual}",
      )

  def install(self, archive: Path | str) -> Path:
    """Verify a release archive and unpack its `hugo` binary into the workdir.

    Subsequent builds use the unpacked binary.
    """
    self.verify_archive(archive)

    target = self.workdir / f"hugo_{self.tool.version}" / "hugo"
    target.parent.mkdir(parents=True, exist_ok=True)
    try:
      with tarfile.open(archive) as tar:
        member = tar.extractfile("hugo")
        if member is None:
          raise BuildFailure(BUILD, f"No hugo binary in {archive}")
        target.write_bytes(member.read())
    except (tarfile.TarError, KeyError) as e:
      raise BuildFailure(BUILD, f"Could not unpack {archive}: {e}") from e

    target.chmod(0o755)
    self.binary = str(target)
    self._installed = True
    return target

  def _run(self, *args: str) -> subprocess.CompletedProcess:
    try:
      result = subprocess.run(
        [self.binary, *args],
        capture_output=True,
        text=True,
        check=False,
      )
    except OSError as e:
      raise BuildFailure(BUILD, f"Could not run {self.binary}: {e}") from e

    if result.returncode != 0:
      message = result.stderr.strip() or f"hugo exited {result.returncode}"
      raise BuildFailure(BUILD, message)
    return result

  def check_version(self) -> str:
    """Fail unless the binary reports the pinned version."""
    output = self._run("version").stdout
    match = VERSION_PATTERN.search(output)
    installed = match.group(1) if match else None
    if installed != self.tool.version:
      raise BuildFailure(
        BUILD,
        f"{self.binary} is hugo {installed or 'unknown'}, expected {self.tool.version}",
      )
    return installed

  def build(self, source: Artifact) -> Artifact:
    if source.root is None:
      raise BuildFailure(BUILD, "Source artifact has no directory")

    if self.archive and not self._installed:
      self.install(self.archive)
    self.check_version()

    destination = self.workdir / "public"
    logger.info("Building %s with hugo %s", source.root, self.tool.version)
    self._run("--source", str(source.root), "--destination", str(destination))

    if not destination.is_dir():
      raise BuildFailure(BUILD, f"hugo produced no output at {destination}")

    return Artifact.from_directory(destination)
