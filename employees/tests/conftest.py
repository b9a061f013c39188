"""
Pytest fixtures for Employee API tests.
"""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient, APIRequestFactory

from employees.models import Employee


@pytest.fixture
def api_client():
    """Return an API client for testing."""
    return APIClient()


@pytest.fixture
def request_factory():
    """Return a DRF request factory."""
    return APIRequestFactory()


@pytest.fixture
def employee(db):
    """Create a test employee."""
    return Employee.objects.create(
        id="abc123",
        name="John Doe",
        dob=datetime(1990, 1, 1, tzinfo=timezone.utc),
        job_title="Software Engineer",
        salary=75000,
    )


@pytest.fixture
def make_employees(db):
    """Create `count` employees with increasing creation times."""

    def make(count):
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        return [
            Employee.objects.create(
                id=f"emp{index:04d}",
                name=f"Employee {index}",
                dob=datetime(1990, 1, 1, tzinfo=timezone.utc),
                job_title="Engineer",
                salary=50000 + index,
                created_at=start + timedelta(minutes=index),
            )
            for index in range(1, count + 1)
        ]

    return make
