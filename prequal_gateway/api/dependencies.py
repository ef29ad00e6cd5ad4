"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from prequal_gateway.domain.catalog import ProductCatalog, default_catalog
from prequal_gateway.domain.policy import DEFAULT_POLICY, EligibilityPolicy


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_catalog() -> ProductCatalog:
    """Provide the loan product catalog"""
    return default_catalog


def get_policy() -> EligibilityPolicy:
    """Provide the eligibility policy"""
    return DEFAULT_POLICY
