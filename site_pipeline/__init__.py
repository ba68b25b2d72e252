"""Build-deploy-invalidate pipeline for the Hugo site."""

from .aws import INVALIDATION_PATHS, CloudFrontInvalidator, S3Publisher
from .config import BuildToolConfig
from .errors import (
  BuildFailure,
  DeployFailure,
  FetchFailure,
  InvalidateFailure,
  PipelineDefinitionError,
  PipelineError,
  StageFailure,
  StageStateError,
)
from .hugo import HugoBuilder, release_url
from .pipeline import Pipeline, build_site_pipeline
from .source import GitSource
from .stages import (
  STAGE_NAMES,
  Artifact,
  PipelineExecution,
  StageDefinition,
  StageRun,
  StageStatus,
)

__all__ = [
  "INVALIDATION_PATHS",
  "STAGE_NAMES",
  "Artifact",
  "BuildFailure",
  "BuildToolConfig",
  "CloudFrontInvalidator",
  "DeployFailure",
  "FetchFailure",
  "GitSource",
  "HugoBuilder",
  "InvalidateFailure",
  "Pipeline",
  "PipelineDefinitionError",
  "PipelineError",
  "PipelineExecution",
  "S3Publisher",
  "StageDefinition",
  "StageFailure",
  "StageRun",
  "StageStateError",
  "StageStatus",
  "build_site_pipeline",
  "release_url",
]
