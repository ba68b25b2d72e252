"""Lambda@Edge function serving index.html for directory paths."""

from pathlib import Path

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

EDGE_FUNCTIONS_DIR = Path(__file__).parent.parent.parent / "edge_functions"


class DefaultIndexFunction(Construct):
  """Origin-request handler rewriting `/dir/` and `/dir` to `/dir/index.html`.

  Outside us-east-1 the function is placed in a support stack there, since
  Lambda@Edge only accepts functions from that region.
  """

  def __init__(self, scope: Construct, id: str) -> None:
    super().__init__(scope, id)

    self.function = cloudfront.experimental.EdgeFunction(
      self,
      "DefaultIndexFunction",
      runtime=lambda_.Runtime.PYTHON_3_12,
      handler="index.handler",
      code=lambda_.Code.from_asset(str(EDGE_FUNCTIONS_DIR / "default_index")),
      description="Rewrite directory requests to their index.html",
    )

  @property
  def current_version(self) -> lambda_.IVersion:
    return self.function.current_version
