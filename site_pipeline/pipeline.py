"""Strictly sequential fetch -> build -> deploy -> invalidate pipeline."""

import logging
from collections.abc import Sequence
from typing import Protocol

from .errors import (
  BuildFailure,
  DeployFailure,
  FetchFailure,
  InvalidateFailure,
  PipelineDefinitionError,
  StageFailure,
)
from .stages import (
  BUILD,
  DEPLOY,
  FETCH,
  INVALIDATE,
  Artifact,
  PipelineExecution,
  StageDefinition,
  StageRun,
  StageStatus,
)

logger = logging.getLogger(__name__)


class Source(Protocol):
  def fetch(self) -> Artifact: ...


class Builder(Protocol):
  def build(self, source: Artifact) -> Artifact: ...


class Publisher(Protocol):
  def publish(self, site: Artifact) -> Artifact | None: ...


class Invalidator(Protocol):
  def invalidate(self) -> str: ...


class Pipeline:
  """Ordered list of stages run one at a time, halting on the first failure.

  Each stage sees only its immediate predecessor's output, and only when the
  stage declares that it consumes input. A stage never starts unless the
  stage before it succeeded; otherwise it and every later stage are marked
  failed without running.
  """

  def __init__(self, stages: Sequence[StageDefinition]) -> None:
    if not stages:
      raise PipelineDefinitionError("Pipeline needs at least one stage")

    seen: set[str] = set()
    for stage in stages:
      if stage.name in seen:
        raise PipelineDefinitionError(f"Duplicate stage name: {stage.name}")
      seen.add(stage.name)

    self.stages = tuple(stages)

  @property
  def stage_names(self) -> list[str]:
    return [s.name for s in self.stages]

  def run(self) -> PipelineExecution:
    """Execute every stage in order and return the recorded outcome."""
    # Fresh records every run; stage state is never carried between executions.
    execution = PipelineExecution(stages=[StageRun(d) for d in self.stages])

    previous: StageRun | None = None
    for stage in execution.stages:
      if previous is not None and previous.status is not StageStatus.SUCCEEDED:
        logger.info("Skipping stage %s: %s did not succeed", stage.name, previous.name)
        stage.skip()
        previous = stage
        continue

      handoff = previous.output if previous and stage.definition.consumes_input else None

      stage.start()
      execution.executed.append(stage.name)
      logger.info("Running stage %s", stage.name)

      try:
        output = stage.definition.action(handoff)
      except StageFailure as e:
        # Failures are always attributed to the stage that was running.
        failure = e
        if e.stage != stage.name or not isinstance(e, stage.definition.failure):
          failure = stage.definition.failure(stage.name, e.message)
        stage.fail(failure)
      except Exception as e:
        # Collaborator errors are opaque; classify them under this stage.
        stage.fail(stage.definition.failure(stage.name, str(e)))
      else:
        stage.succeed(output)

      if stage.status is StageStatus.FAILED:
        logger.error("Stage %s failed: %s", stage.name, stage.error)
      else:
        logger.info("Stage %s succeeded", stage.name)
      previous = stage

    logger.info("Pipeline finished: %s", execution.status.value)
    return execution


def build_site_pipeline(
  source: Source,
  builder: Builder,
  publisher: Publisher,
  invalidator: Invalidator,
) -> Pipeline:
  """Assemble the four-stage static site pipeline."""

  def run_build(artifact: Artifact | None) -> Artifact:
    if artifact is None:
      raise BuildFailure(BUILD, "No source artifact to build")
    return builder.build(artifact)

  def run_deploy(artifact: Artifact | None) -> Artifact | None:
    if artifact is None:
      raise DeployFailure(DEPLOY, "No site artifact to publish")
    return publisher.publish(artifact)

  def run_invalidate(_: Artifact | None) -> None:
    invalidator.invalidate()

  return Pipeline(
    [
      StageDefinition(FETCH, lambda _: source.fetch(), FetchFailure, consumes_input=False),
      StageDefinition(BUILD, run_build, BuildFailure),
      StageDefinition(DEPLOY, run_deploy, DeployFailure),
      # Depends on deploy having succeeded, not on anything it produced.
      StageDefinition(INVALIDATE, run_invalidate, InvalidateFailure, consumes_input=False),
    ]
  )
