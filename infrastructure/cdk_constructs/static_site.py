"""Main composite construct for the Hugo site and its pipeline."""

from aws_cdk import CfnOutput, RemovalPolicy
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

from site_pipeline import BuildToolConfig

from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .invalidation import InvalidationProject
from .pipeline import SitePipeline
from .repository import SourceRepository
from .storage import StorageBucket


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates:
  - Private S3 bucket for the generated site
  - CloudFront distribution with HTTPS and the default-index edge function
  - Route 53 alias records in an existing hosted zone
  - CodeCommit repository for the Hugo sources
  - CodePipeline: fetch, Hugo build, S3 deploy, CloudFront invalidation

  The certificate and edge function version come from us-east-1 stacks.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    hosted_zone_id: str,
    certificate: acm.ICertificate,
    default_index_version: lambda_.IVersion,
    build_tool: BuildToolConfig | None = None,
    branch: str = "main",
    repository_name: str | None = None,
    pipeline_name: str | None = None,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = StorageBucket(self, "Storage", removal_policy=removal_policy)

    self.dns = DnsRecords(
      self,
      "Dns",
      domain_name=domain_name,
      hosted_zone_id=hosted_zone_id,
    )

    self.distribution = CloudFrontDistribution(
      self,
      "Distribution",
      bucket=self.bucket.bucket,
      certificate=certificate,
      domain_name=domain_name,
      default_index_version=default_index_version,
    )

    self.dns.create_cloudfront_records(self.distribution.distribution)

    self.repository = SourceRepository(
      self,
      "Repository",
      repository_name=repository_name or f"{domain_name}-hugo",
      domain_name=domain_name,
    )

    self.invalidation = InvalidationProject(
      self,
      "Invalidation",
      distribution=self.distribution.distribution,
    )

    self.pipeline = SitePipeline(
      self,
      "Pipeline",
      repository=self.repository.repository,
      bucket=self.bucket.bucket,
      invalidation=self.invalidation,
      build_tool=build_tool or BuildToolConfig.from_env(),
      branch=branch,
      pipeline_name=pipeline_name,
    )

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "RepositoryCloneUrl",
      value=self.repository.repository.repository_clone_url_http,
      description="CodeCommit clone URL (HTTPS)",
    )
