"""CloudFront distribution for the Hugo site."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_s3 as s3
from constructs import Construct


class CloudFrontDistribution(Construct):
  """CloudFront distribution in front of a private S3 bucket."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_name: str,
    default_index_version: lambda_.IVersion,
  ) -> None:
    super().__init__(scope, id)

    # Bucket stays private; the origin grants the OAI read access
    self.access_identity = cloudfront.OriginAccessIdentity(self, "OAI")

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_origin_access_identity(
          bucket,
          origin_access_identity=self.access_identity,
        ),
        edge_lambdas=[
          cloudfront.EdgeLambda(
            function_version=default_index_version,
            event_type=cloudfront.LambdaEdgeEventType.ORIGIN_REQUEST,
          )
        ],
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD,
        cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD,
      ),
      domain_names=[domain_name],
      certificate=certificate,
      default_root_object="index.html",
      minimum_protocol_version=cloudfront.SecurityPolicyProtocol.TLS_V1_2_2021,
    )
