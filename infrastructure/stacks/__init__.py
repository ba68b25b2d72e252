"""CDK stacks for the Hugo site infrastructure."""

from .certificate_stack import CertificateStack
from .edge_stack import EdgeFunctionStack
from .site_stack import StaticSiteStack

__all__ = ["CertificateStack", "EdgeFunctionStack", "StaticSiteStack"]
