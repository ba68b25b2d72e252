#!/usr/bin/env python3
"""CDK application entry point for the Hugo site infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from infrastructure.config import EDGE_REGION, Config
from infrastructure.stacks import CertificateStack, EdgeFunctionStack, StaticSiteStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def main() -> None:
  """Create certificate and edge stacks in us-east-1, then one stack per site."""
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "sites.yaml"
  config = Config.from_yaml(Path(config_path))

  # Cross-region references need a concrete account on every stack
  account_id = app.node.try_get_context("account") or config.account or get_account_id()
  edge_env = cdk.Environment(account=account_id, region=EDGE_REGION)

  certificate_stack = CertificateStack(
    app,
    "HugoSitesCertificateStack",
    site_configs=config.sites,
    env=edge_env,
    description="CloudFront certificates for the Hugo sites",
  )

  edge_stack = EdgeFunctionStack(
    app,
    "HugoSitesLambdaEdgeStack",
    env=edge_env,
    description="Lambda@Edge functions for the Hugo sites",
  )

  for site in config.sites:
    StaticSiteStack(
      app,
      f"{site.stack_prefix}Stack",
      site_config=site,
      certificate=certificate_stack.certificates[site.domain],
      default_index_version=edge_stack.default_index.current_version,
      env=cdk.Environment(account=account_id, region=site.region),
      cross_region_references=True,
      description=f"Hugo website and pipeline for {site.domain}",
    )

  app.synth()


if __name__ == "__main__":
  main()
