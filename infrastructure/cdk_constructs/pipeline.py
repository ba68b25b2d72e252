"""CodePipeline running fetch -> build -> deploy -> invalidate for the site."""

from aws_cdk import aws_codebuild as codebuild
from aws_cdk import aws_codecommit as codecommit
from aws_cdk import aws_codepipeline as codepipeline
from aws_cdk import aws_codepipeline_actions as actions
from aws_cdk import aws_s3 as s3
from constructs import Construct

from site_pipeline import BuildToolConfig, release_url
from site_pipeline.stages import BUILD, DEPLOY, FETCH, INVALIDATE

from .invalidation import InvalidationProject

# CodePipeline stage name for each pipeline stage
STAGE_NAMES = {
  FETCH: "CodeCommit",
  BUILD: "Build",
  DEPLOY: "Deploy",
  INVALIDATE: "CFInvalidate",
}


def hugo_build_spec(clone_url: str, branch: str) -> codebuild.BuildSpec:
  """Install the pinned Hugo release, pull theme submodules and build `public/`.

  HUGO_VERSION and HUGO_SHA256 are resolved by CodeBuild at run time.
  """
  return codebuild.BuildSpec.from_object(
    {
      "version": "0.2",
      "phases": {
        "install": {
          "commands": [
            f"curl -Ls {release_url('${HUGO_VERSION}')} -o /tmp/hugo.tar.gz",
            'echo "${HUGO_SHA256}  /tmp/hugo.tar.gz" | sha256sum -c -',
            "mkdir /tmp/hugo_${HUGO_VERSION}",
            "tar xf /tmp/hugo.tar.gz -C /tmp/hugo_${HUGO_VERSION}",
            "mv /tmp/hugo_${HUGO_VERSION}/hugo /usr/bin/hugo",
            "rm -rf /tmp/hugo*",
            # The source artifact is a plain zip; submodules need a real checkout
            'git config --global credential.helper "!aws codecommit credential-helper $@"',
            "git config --global credential.UseHttpPath true",
            "git init",
            f"git remote add origin {clone_url}",
            "git fetch",
            f"git checkout -f -t origin/{branch}",
            "git submodule init",
            "git submodule update --recursive",
          ],
        },
        "build": {
          "commands": ["hugo"],
        },
      },
      "artifacts": {
        "files": ["**/*"],
        "base-directory": "public",
        "name": "$(AWS_REGION)-$(date +%Y-%m-%d)",
      },
    }
  )


class SitePipeline(Construct):
  """Four sequential stages; each starts only after the previous one succeeds."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    repository: codecommit.IRepository,
    bucket: s3.IBucket,
    invalidation: InvalidationProject,
    build_tool: BuildToolConfig,
    branch: str = "main",
    pipeline_name: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.build_project = codebuild.PipelineProject(
      self,
      "BuildProject",
      build_spec=hugo_build_spec(repository.repository_clone_url_http, branch),
      environment_variables={
        "HUGO_VERSION": codebuild.BuildEnvironmentVariable(value=build_tool.version),
        "HUGO_SHA256": codebuild.BuildEnvironmentVariable(value=build_tool.sha256),
      },
    )
    repository.grant_pull(self.build_project)

    source_output = codepipeline.Artifact()
    build_output = codepipeline.Artifact()

    source_action = actions.CodeCommitSourceAction(
      action_name="CodeCommit",
      repository=repository,
      branch=branch,
      output=source_output,
    )
    build_action = actions.CodeBuildAction(
      action_name="CodeBuild",
      project=self.build_project,
      input=source_output,
      outputs=[build_output],
    )
    deploy_action = actions.S3DeployAction(
      action_name="S3Deploy",
      bucket=bucket,
      input=build_output,
    )
    # CodeBuild insists on an input artifact; the invalidation never reads it
    invalidate_action = actions.CodeBuildAction(
      action_name="InvalidateBuild",
      project=invalidation.project,
      input=build_output,
    )

    self.pipeline = codepipeline.Pipeline(
      self,
      "Pipeline",
      pipeline_name=pipeline_name,
      stages=[
        codepipeline.StageProps(stage_name=STAGE_NAMES[FETCH], actions=[source_action]),
        codepipeline.StageProps(stage_name=STAGE_NAMES[BUILD], actions=[build_action]),
        codepipeline.StageProps(stage_name=STAGE_NAMES[DEPLOY], actions=[deploy_action]),
        codepipeline.StageProps(
          stage_name=STAGE_NAMES[INVALIDATE], actions=[invalidate_action]
        ),
      ],
    )
