"""Pipeline stage descriptors, per-execution stage records and artifacts."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .errors import PipelineError, StageFailure, StageStateError


FETCH = "fetch"
BUILD = "build"
DEPLOY = "deploy"
INVALIDATE = "invalidate"
STAGE_NAMES = (FETCH, BUILD, DEPLOY, INVALIDATE)


class StageStatus(str, Enum):
  """Lifecycle of a stage within one pipeline execution."""

  PENDING = "pending"
  RUNNING = "running"
  SUCCEEDED = "succeeded"
  FAILED = "failed"


@dataclass(frozen=True)
class Artifact:
  """Ordered file tree handed from one stage to the next.

  `files` holds POSIX paths relative to `root`, sorted.
  """

  root: Path | None = None
  files: tuple[str, ...] = ()

  @classmethod
  def from_directory(cls, root: Path | str) -> "Artifact":
    """Snapshot every regular file below `root`."""
    root = Path(root)
    files = sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())
    return cls(root=root, files=tuple(files))

  @property
  def is_empty(self) -> bool:
    return not self.files

  def paths(self) -> list[Path]:
    """Absolute paths of every file in the tree."""
    if self.root is None:
      return []
    return [self.root / name for name in self.files]


# An action receives its predecessor's artifact (or None) and returns its own.
StageAction = Callable[[Artifact | None], Artifact | None]


@dataclass(frozen=True)
class StageDefinition:
  """A named unit of work, fixed when the pipeline is assembled."""

  name: str
  action: StageAction
  failure: type[StageFailure] = StageFailure
  consumes_input: bool = True


_TRANSITIONS = {
  StageStatus.PENDING: {StageStatus.RUNNING, StageStatus.FAILED},
  StageStatus.RUNNING: {StageStatus.SUCCEEDED, StageStatus.FAILED},
  StageStatus.SUCCEEDED: set(),
  StageStatus.FAILED: set(),
}


@dataclass
class StageRun:
  """State of one stage during a single pipeline execution."""

  definition: StageDefinition
  status: StageStatus = StageStatus.PENDING
  output: Artifact | None = None
  error: StageFailure | None = None
  skipped: bool = False

  @property
  def name(self) -> str:
    return self.definition.name

  def _transition(self, new: StageStatus) -> None:
    if new not in _TRANSITIONS[self.status]:
      raise StageStateError(
        f"Stage '{self.name}' cannot move from {self.status.value} to {new.value}"
      )
    self.status = new

  def start(self) -> None:
    self._transition(StageStatus.RUNNING)

  def succeed(self, output: Artifact | None) -> None:
    self._transition(StageStatus.SUCCEEDED)
    self.output = output

  def fail(self, error: StageFailure) -> None:
    self._transition(StageStatus.FAILED)
    self.error = error
    self.output = None

  def skip(self) -> None:
    """Fail without running because the predecessor did not succeed."""
    self._transition(StageStatus.FAILED)
    self.skipped = True


@dataclass
class PipelineExecution:
  """Outcome of one run over the pipeline's stages."""

  stages: list[StageRun] = field(default_factory=list)
  executed: list[str] = field(default_factory=list)

  @property
  def status(self) -> StageStatus:
    if self.stages and all(s.status is StageStatus.SUCCEEDED for s in self.stages):
      return StageStatus.SUCCEEDED
    if any(s.status is StageStatus.FAILED for s in self.stages):
      return StageStatus.FAILED
    if any(s.status is StageStatus.RUNNING for s in self.stages):
      return StageStatus.RUNNING
    return StageStatus.PENDING

  @property
  def succeeded(self) -> bool:
    return self.status is StageStatus.SUCCEEDED

  @property
  def failed_stage(self) -> str | None:
    """Name of the first stage whose action failed."""
    error = self.error
    return error.stage if error else None

  @property
  def error(self) -> StageFailure | None:
    for stage in self.stages:
      if stage.error is not None:
        return stage.error
    return None

  def stage(self, name: str) -> StageRun:
    for stage in self.stages:
      if stage.name == name:
        return stage
    raise KeyError(name)

  def artifact(self, name: str) -> Artifact | None:
    """Output of a stage; only valid once the whole execution has succeeded."""
    if not self.succeeded:
      raise PipelineError(
        f"Pipeline {self.status.value}; output of '{name}' is not valid"
      )
    return self.stage(name).output
