"""CDK stack for a single Hugo website."""

from typing import Any

import aws_cdk as cdk
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

from infrastructure.cdk_constructs import StaticSiteConstruct
from infrastructure.config import SiteConfig


class StaticSiteStack(cdk.Stack):
  """Stack for a single Hugo website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    certificate: acm.ICertificate,
    default_index_version: lambda_.IVersion,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.site = StaticSiteConstruct(
      self,
      "Site",
      domain_name=site_config.domain,
      hosted_zone_id=site_config.hosted_zone_id,
      certificate=certificate,
      default_index_version=default_index_version,
      build_tool=site_config.build_tool,
      branch=site_config.branch,
      repository_name=site_config.repository_name,
      pipeline_name=site_config.pipeline_name,
      removal_policy=site_config.removal_policy,
    )

    cdk.Tags.of(self).add("Project", "hugo-sites")
    cdk.Tags.of(self).add("Domain", site_config.domain)
