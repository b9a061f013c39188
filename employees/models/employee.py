"""
Employee model for the Employee API.
"""

from django.db import models
from django.utils import timezone

from employees.utils import generate_id, years_since


class Employee(models.Model):
    """
    An employee record.

    `deleted_at` is kept for schema compatibility; deletes are hard deletes.
    """

    id = models.CharField(max_length=32, primary_key=True, default=generate_id, editable=False)
    name = models.CharField(max_length=128)
    dob = models.DateTimeField()
    hire_date = models.DateTimeField(default=timezone.now)
    job_title = models.CharField(max_length=128, blank=True, default="")
    salary = models.FloatField(default=0)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(null=True, blank=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        app_label = "employees"
        db_table = "employees"
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"{self.id}: {self.name}"

    @property
    def age(self):
        """Age by calendar year only (see `years_since`)."""
        return years_since(self.dob)

    def touch(self):
        """Mark this employee as updated now."""
        self.updated_at = timezone.now()
