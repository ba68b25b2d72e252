"""Exceptions raised by the build-deploy-invalidate pipeline."""


class PipelineError(Exception):
  """Base class for pipeline errors."""


class PipelineDefinitionError(PipelineError):
  """Pipeline was assembled with missing or duplicate stages."""


class StageStateError(PipelineError):
  """A stage was moved through an illegal status transition."""


class StageFailure(PipelineError):
  """A stage's collaborator reported a failure.

  Carries the name of the stage that failed and the collaborator's message,
  which is treated as opaque.
  """

  def __init__(self, stage: str, message: str) -> None:
    super().__init__(f"{stage}: {message}")
    self.stage = stage
    self.message = message


class FetchFailure(StageFailure):
  """Source could not be fetched (unreachable remote or missing branch)."""


class BuildFailure(StageFailure):
  """Static site build exited non-zero or its toolchain was unusable."""


class DeployFailure(StageFailure):
  """Publish target was unreachable or rejected a write."""


class InvalidateFailure(StageFailure):
  """Edge cache rejected the invalidation request."""
