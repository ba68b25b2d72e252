"""CDK constructs for the Hugo site infrastructure."""

from .certificate import DnsValidatedCertificate
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .edge_function import DefaultIndexFunction
from .invalidation import InvalidationProject
from .pipeline import SitePipeline
from .repository import SourceRepository
from .static_site import StaticSiteConstruct
from .storage import StorageBucket

__all__ = [
  "CloudFrontDistribution",
  "DefaultIndexFunction",
  "DnsRecords",
  "DnsValidatedCertificate",
  "InvalidationProject",
  "SitePipeline",
  "SourceRepository",
  "StaticSiteConstruct",
  "StorageBucket",
]
