"""CDK stack holding the CloudFront certificates (must live in us-east-1)."""

from typing import Any

import aws_cdk as cdk
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct

from infrastructure.cdk_constructs import DnsValidatedCertificate
from infrastructure.config import SiteConfig


class CertificateStack(cdk.Stack):
  """One DNS-validated certificate per site domain."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_configs: list[SiteConfig],
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.certificates: dict[str, acm.ICertificate] = {}
    for site in site_configs:
      zone = route53.HostedZone.from_hosted_zone_attributes(
        self,
        f"{site.domain}-HostedZone",
        hosted_zone_id=site.hosted_zone_id,
        zone_name=site.domain,
      )
      cert = DnsValidatedCertificate(
        self,
        f"{site.domain}-Cert",
        domain_name=site.domain,
        hosted_zone=zone,
      )
      self.certificates[site.domain] = cert.certificate

    cdk.Tags.of(self).add("Project", "hugo-sites")
