"""Configuration loader for the Hugo site deployments."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from aws_cdk import RemovalPolicy

from site_pipeline.config import BuildToolConfig

# CloudFront only accepts certificates and Lambda@Edge functions from us-east-1
EDGE_REGION = "us-east-1"

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
  "snapshot": RemovalPolicy.SNAPSHOT,
}


def parse_removal_policy(value: object) -> RemovalPolicy:
  """Convert a removal_policy string from YAML to the CDK enum."""
  if not isinstance(value, str) or value.lower() not in REMOVAL_POLICIES:
    raise ValueError(
      f"Invalid removal_policy {value!r}; expected one of {sorted(REMOVAL_POLICIES)}"
    )
  return REMOVAL_POLICIES[value.lower()]


@dataclass
class SiteConfig:
  """Configuration for a single Hugo site."""

  domain: str
  hosted_zone_id: str
  region: str = "eu-west-3"
  branch: str = "main"
  repository_name: str | None = None
  pipeline_name: str = "HugoCodePipeline"
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN
  build_tool: BuildToolConfig = field(default_factory=BuildToolConfig.from_env)

  def __post_init__(self) -> None:
    if self.repository_name is None:
      self.repository_name = f"{self.domain}-hugo"

  @property
  def stack_prefix(self) -> str:
    """CamelCase prefix for stack names (ilker.io -> IlkerIo)."""
    return "".join(part.capitalize() for part in self.domain.replace("-", ".").split("."))


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)
  account: str | None = None

  @classmethod
  def from_yaml(cls, path: Path | str = "sites.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    sites: list[SiteConfig] = []

    for site_data in data.get("sites", []):
      # Merge defaults with site-specific config
      merged = {**defaults, **site_data}

      removal_policy = parse_removal_policy(merged.pop("removal_policy", "retain"))

      # HUGO_VERSION / HUGO_SHA256 in the environment win over the YAML pin
      build_tool = BuildToolConfig.from_env(
        {
          "HUGO_VERSION": os.environ.get("HUGO_VERSION")
          or str(merged.get("hugo_version", "")),
          "HUGO_SHA256": os.environ.get("HUGO_SHA256")
          or str(merged.get("hugo_sha256", "")),
        }
      )

      sites.append(
        SiteConfig(
          domain=merged["domain"],
          hosted_zone_id=merged["hosted_zone_id"],
          region=merged.get("region", "eu-west-3"),
          branch=merged.get("branch", "main"),
          repository_name=merged.get("repository_name"),
          pipeline_name=merged.get("pipeline_name", "HugoCodePipeline"),
          removal_policy=removal_policy,
          build_tool=build_tool,
        )
      )

    account = data.get("account")
    return cls(sites=sites, account=str(account) if account is not None else None)
