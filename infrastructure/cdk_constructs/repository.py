"""CodeCommit repository holding the Hugo sources."""

from aws_cdk import aws_codecommit as codecommit
from constructs import Construct


class SourceRepository(Construct):
  """Git repository the pipeline builds from."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    repository_name: str,
    domain_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.repository = codecommit.Repository(
      self,
      "Repository",
      repository_name=repository_name,
      description=f"{domain_name} website",
    )
