"""CodeBuild project that invalidates the CloudFront cache after a deploy."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_codebuild as codebuild
from constructs import Construct

from site_pipeline import INVALIDATION_PATHS


def invalidation_build_spec() -> codebuild.BuildSpec:
  paths = " ".join(f'"{path}"' for path in INVALIDATION_PATHS)
  return codebuild.BuildSpec.from_object(
    {
      "version": "0.2",
      "phases": {
        "build": {
          "commands": [
            "aws cloudfront create-invalidation"
            f" --distribution-id ${{CLOUDFRONT_ID}} --paths {paths}",
          ],
        },
      },
    }
  )


class InvalidationProject(Construct):
  """Evicts every cached object (`/*`) from the distribution."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    distribution: cloudfront.IDistribution,
  ) -> None:
    super().__init__(scope, id)

    self.project = codebuild.PipelineProject(
      self,
      "Project",
      build_spec=invalidation_build_spec(),
      environment_variables={
        "CLOUDFRONT_ID": codebuild.BuildEnvironmentVariable(
          value=distribution.distribution_id
        ),
      },
    )

    distribution.grant_create_invalidation(self.project)
