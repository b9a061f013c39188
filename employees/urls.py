"""
URL configuration for the employees app.

Route names double as link endpoint names (see `employees.links`).
"""

from django.urls import path

from .views import EmployeeAllView, EmployeeDetailView, EmployeeListView

urlpatterns = [
    path("employees/", EmployeeListView.as_view(), name="employee-list"),
    path("employees/all/", EmployeeAllView.as_view(), name="employee-all"),
    path(
        "employees/<str:employee_id>/",
        EmployeeDetailView.as_view(),
        name="employee-detail",
    ),
]
