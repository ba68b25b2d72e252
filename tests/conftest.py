"""Pytest fixtures for the CDK construct and pipeline tests."""

import sys
from pathlib import Path

import aws_cdk as cdk
import pytest

# Make the project root importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture(autouse=True)
def _clear_hugo_env(monkeypatch: pytest.MonkeyPatch) -> None:
  """Keep a developer's HUGO_* variables out of the tests."""
  monkeypatch.delenv("HUGO_VERSION", raising=False)
  monkeypatch.delenv("HUGO_SHA256", raising=False)
