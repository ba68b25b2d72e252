"""CDK stack holding the Lambda@Edge functions (must live in us-east-1)."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from infrastructure.cdk_constructs import DefaultIndexFunction


class EdgeFunctionStack(cdk.Stack):
  """Edge functions shared by every site distribution."""

  def __init__(self, scope: Construct, id: str, **kwargs: Any) -> None:
    super().__init__(scope, id, **kwargs)

    self.default_index = DefaultIndexFunction(self, "DefaultIndex")

    cdk.Tags.of(self).add("Project", "hugo-sites")
