"""Tests for the certificate, edge function and site stacks."""

import pytest
from aws_cdk import App, Environment
from aws_cdk.assertions import Match, Template

from infrastructure.config import EDGE_REGION, SiteConfig
from infrastructure.stacks import CertificateStack, EdgeFunctionStack, StaticSiteStack

EDGE_ENV = Environment(account="123456789012", region=EDGE_REGION)


@pytest.fixture
def sites() -> list[SiteConfig]:
  return [
    SiteConfig(domain="example.com", hosted_zone_id="Z1111111111"),
    SiteConfig(domain="example.org", hosted_zone_id="Z2222222222"),
  ]


class TestCertificateStack:
  """Test CertificateStack."""

  def test_one_certificate_per_site(self, sites: list[SiteConfig]) -> None:
    """Verify each domain gets its own DNS-validated certificate."""
    app = App()
    stack = CertificateStack(app, "Certs", site_configs=sites, env=EDGE_ENV)
    template = Template.from_stack(stack)

    template.resource_count_is("AWS::CertificateManager::Certificate", 2)
    template.has_resource_properties(
      "AWS::CertificateManager::Certificate",
      {
        "DomainName": "example.com",
        "ValidationMethod": "DNS",
        "DomainValidationOptions": [
          {"DomainName": "example.com", "HostedZoneId": "Z1111111111"},
        ],
      },
    )
    assert set(stack.certificates) == {"example.com", "example.org"}


class TestEdgeFunctionStack:
  """Test EdgeFunctionStack."""

  def test_creates_versioned_python_function(self) -> None:
    """Verify the default-index handler and a published version."""
    app = App()
    stack = EdgeFunctionStack(app, "Edge", env=EDGE_ENV)
    template = Template.from_stack(stack)

    template.has_resource_properties(
      "AWS::Lambda::Function",
      {"Runtime": "python3.12", "Handler": "index.handler"},
    )
    template.resource_count_is("AWS::Lambda::Version", 1)
    template.has_resource_properties(
      "AWS::IAM::Role",
      {
        "AssumeRolePolicyDocument": Match.object_like(
          {
            "Statement": Match.array_with(
              [
                Match.object_like(
                  {"Principal": {"Service": "edgelambda.amazonaws.com"}}
                )
              ]
            )
          }
        )
      },
    )


class TestStaticSiteStack:
  """Test StaticSiteStack wiring."""

  def test_site_stack_tags_and_pipeline(self, sites: list[SiteConfig]) -> None:
    """Verify the site stack builds the site from its config."""
    app = App()
    certs = CertificateStack(app, "Certs", site_configs=sites, env=EDGE_ENV)
    edge = EdgeFunctionStack(app, "Edge", env=EDGE_ENV)
    site = sites[0]
    stack = StaticSiteStack(
      app,
      "ExampleComStack",
      site_config=site,
      certificate=certs.certificates[site.domain],
      default_index_version=edge.default_index.current_version,
      env=EDGE_ENV,
    )
    template = Template.from_stack(stack)

    template.has_resource_properties(
      "AWS::CodePipeline::Pipeline",
      {
        "Name": "HugoCodePipeline",
        "Tags": Match.array_with([{"Key": "Domain", "Value": "example.com"}]),
      },
    )
    template.has_resource_properties(
      "AWS::CodeCommit::Repository", {"RepositoryName": "example.com-hugo"}
    )
