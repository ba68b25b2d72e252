"""Route 53 DNS constructs."""

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class DnsRecords(Construct):
  """Existing Route 53 hosted zone and the alias records for the site."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone_id: str,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name
    self.hosted_zone = route53.HostedZone.from_hosted_zone_attributes(
      self,
      "HostedZone",
      hosted_zone_id=hosted_zone_id,
      zone_name=domain_name,
    )

  def create_cloudfront_records(self, distribution: cloudfront.IDistribution) -> None:
    """Create A and AAAA records pointing to CloudFront distribution."""
    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    route53.ARecord(
      self,
      "ARecord",
      zone=self.hosted_zone,
      record_name=self.domain_name,
      target=target,
    )

    route53.AaaaRecord(
      self,
      "AAAARecord",
      zone=self.hosted_zone,
      record_name=self.domain_name,
      target=target,
    )
