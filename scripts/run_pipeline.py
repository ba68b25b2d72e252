#!/usr/bin/env python3
"""Run the fetch -> build -> deploy -> invalidate pipeline from this machine.

Mirrors the CodePipeline stages for when a site has to be rebuilt without
pushing to CodeCommit (or to debug a failing build locally).
"""

import argparse
import logging
import sys
import tempfile
from pathlib import Path

import boto3

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from site_pipeline import (  # noqa: E402
  BuildToolConfig,
  CloudFrontInvalidator,
  GitSource,
  HugoBuilder,
  PipelineExecution,
  S3Publisher,
  StageStatus,
  build_site_pipeline,
)


def run(
  repository_url: str,
  bucket: str,
  distribution_id: str,
  *,
  branch: str = "main",
  region: str | None = None,
  workdir: Path | None = None,
  hugo_archive: Path | None = None,
) -> PipelineExecution:
  """Run the four stages once and return the recorded outcome."""
  session = boto3.Session(region_name=region)

  with tempfile.TemporaryDirectory(prefix="hugo-pipeline-") as tmp:
    root = workdir or Path(tmp)
    pipeline = build_site_pipeline(
      source=GitSource(repository_url, root, branch=branch),
      builder=HugoBuilder(root, tool=BuildToolConfig.from_env(), archive=hugo_archive),
      publisher=S3Publisher(bucket, session.client("s3")),
      invalidator=CloudFrontInvalidator(distribution_id, session.client("cloudfront")),
    )
    return pipeline.run()


def print_summary(execution: PipelineExecution) -> None:
  for stage in execution.stages:
    if stage.status is StageStatus.SUCCEEDED:
      print(f"✓ {stage.name}")
    elif stage.skipped:
      print(f"- {stage.name} (not run)")
    else:
      print(f"✗ {stage.name}: {stage.error.message if stage.error else 'failed'}")

  print()
  if execution.succeeded:
    print("Pipeline succeeded")
  else:
    print(f"Pipeline failed at stage '{execution.failed_stage}'")


def main() -> None:
  """Parse arguments and run the pipeline."""
  parser = argparse.ArgumentParser(description="Build and publish a Hugo site")
  parser.add_argument("repository_url", help="Git URL of the Hugo sources")
  parser.add_argument("bucket", help="S3 bucket serving the site")
  parser.add_argument("distribution_id", help="CloudFront distribution ID")
  parser.add_argument(
    "--branch",
    default="main",
    help="Branch to build (default: main)",
  )
  parser.add_argument(
    "--region",
    default=None,
    help="AWS region for the S3 client (default: from AWS config)",
  )
  parser.add_argument(
    "--workdir",
    type=Path,
    default=None,
    help="Directory to clone and build in (default: temporary directory)",
  )
  parser.add_argument(
    "--hugo-archive",
    type=Path,
    default=None,
    help="Hugo release tarball to verify against HUGO_SHA256 and build with",
  )
  parser.add_argument("-v", "--verbose", action="store_true", help="Log each stage")
  args = parser.parse_args()

  logging.basicConfig(
    level=logging.INFO if args.verbose else logging.WARNING,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
  )

  execution = run(
    args.repository_url,
    args.bucket,
    args.distribution_id,
    branch=args.branch,
    region=args.region,
    workdir=args.workdir,
    hugo_archive=args.hugo_archive,
  )
  print_summary(execution)

  if not execution.succeeded:
    sys.exit(1)


if __name__ == "__main__":
  main()
