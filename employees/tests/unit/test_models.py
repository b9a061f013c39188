"""
Unit tests for Employee models and utilities.
"""

import string
from datetime import datetime, timezone

import pytest

from employees.models import Employee
from employees.utils import generate_id, years_since


class TestGenerateId:
    """Tests for generate_id utility."""

    def test_generate_id_length(self):
        """ID should be 32 characters."""
        assert len(generate_id()) == 32

    def test_generate_id_hex(self):
        """ID should be lowercase hex, no hyphens."""
        assert set(generate_id()) <= set(string.hexdigits.lower())

    def test_generate_id_unique(self):
        ids = [generate_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestYearsSince:
    """Tests for the calendar-year age calculation."""

    def test_after_birthday(self):
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)
        assert years_since(datetime(1990, 1, 1, tzinfo=timezone.utc), now=now) == 34

    def test_before_birthday_counts_full_year(self):
        """Month and day are ignored: the birthday has not happened yet."""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert years_since(datetime(1990, 12, 31, tzinfo=timezone.utc), now=now) == 34

    def test_missing_date(self):
        assert years_since(None) is None


@pytest.mark.django_db
class TestEmployeeModel:
    """Tests for Employee model."""

    def test_create_employee(self):
        """Should create an employee with a generated ID and defaults."""
        employee = Employee.objects.create(
            name="Jane Roe",
            dob=datetime(1985, 5, 5, tzinfo=timezone.utc),
        )
        assert len(employee.id) == 32
        assert employee.job_title == ""
        assert employee.salary == 0
        assert employee.created_at is not None
        assert employee.hire_date is not None
        assert employee.updated_at is None
        assert employee.deleted_at is None

    def test_employee_str(self, employee):
        assert "abc123" in str(employee)
        assert "John Doe" in str(employee)

    def test_age(self, employee):
        assert employee.age == datetime.now(timezone.utc).year - 1990

    def test_touch(self, employee):
        employee.touch()
        assert employee.updated_at is not None

    def test_default_ordering(self, make_employees):
        """Employees should come back in creation order."""
        make_employees(3)
        assert list(Employee.objects.values_list("id", flat=True)) == ["emp0001", "emp0002", "emp0003"]
