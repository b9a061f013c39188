"""
Django Admin configuration for the Employee API.
"""

from django.contrib import admin

from employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "job_title", "hire_date", "created_at"]
    search_fields = ["id", "name", "job_title"]
    list_filter = ["job_title"]
