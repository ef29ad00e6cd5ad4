"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from prequal_gateway.api.main import create_app
from prequal_gateway.domain.catalog import default_catalog
from prequal_gateway.domain.models import ApplicantProfile, EmploymentCategory, ProductDefinition


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def personal_loan() -> ProductDefinition:
    """Personal loan: min income 20,000, min score 650, max 25 lakh"""
    return default_catalog.get("personal")


@pytest.fixture
def education_loan() -> ProductDefinition:
    """Education loan: min income 15,000, min score 600, max 20 lakh"""
    return default_catalog.get("education")


@pytest.fixture
def strong_applicant() -> ApplicantProfile:
    """Government employee with an excellent score and light debt"""
    return ApplicantProfile(
        credit_score=780,
        monthly_income=100_000,
        existing_monthly_debt=5_000,
        employment_category=EmploymentCategory.GOVERNMENT,
        age=30,
    )


@pytest.fixture
def make_applicant():
    """Build an applicant, overriding any field of a mid-range private employee"""

    def _make(**overrides) -> ApplicantProfile:
        fields = dict(
            credit_score=720,
            monthly_income=50_000,
            existing_monthly_debt=10_000,
            employment_category=EmploymentCategory.PRIVATE,
            age=40,
        )
        fields.update(overrides)
        return ApplicantProfile(**fields)

    return _make
