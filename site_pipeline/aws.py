"""Publish to S3 and invalidate CloudFront."""

import logging
import mimetypes
import time
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from .errors import DeployFailure, InvalidateFailure
from .stages import DEPLOY, INVALIDATE, Artifact

logger = logging.getLogger(__name__)

INVALIDATION_PATHS = ("/*",)


class S3Publisher:
  """Upload a generated site tree to the website bucket."""

  def __init__(self, bucket: str, s3_client: Any) -> None:
    self.bucket = bucket
    self.s3 = s3_client

  def publish(self, site: Artifact) -> Artifact:
    """Upload every file; returns an empty artifact since deploy has no output."""
    for name, path in zip(site.files, site.paths(), strict=True):
      content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"
      try:
        self.s3.upload_file(
          str(path),
          self.bucket,
          name,
          ExtraArgs={"ContentType": content_type},
        )
      except (ClientError, BotoCoreError) as e:
        raise DeployFailure(DEPLOY, f"Upload of {name} failed: {e}") from e

    logger.info("Published %d files to s3://%s", len(site.files), self.bucket)
    return Artifact()


class CloudFrontInvalidator:
  """Mark every cached object in a distribution as stale."""

  def __init__(
    self,
    distribution_id: str,
    cloudfront_client: Any,
    paths: tuple[str, ...] = INVALIDATION_PATHS,
  ) -> None:
    self.distribution_id = distribution_id
    self.cloudfront = cloudfront_client
    self.paths = paths

  def invalidate(self) -> str:
    try:
      response = self.cloudfront.create_invalidation(
        DistributionId=self.distribution_id,
        InvalidationBatch={
          "Paths": {
            "Quantity": len(self.paths),
            "Items": list(self.paths),
          },
          "CallerReference": str(time.time()),
        },
      )
    except (ClientError, BotoCoreError) as e:
      raise InvalidateFailure(INVALIDATE, str(e)) from e

    invalidation_id = response["Invalidation"]["Id"]
    logger.info("Created invalidation %s on %s", invalidation_id, self.distribution_id)
    return invalidation_id
