"""
URL configuration for the Employee API project.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/", include("employees.urls")),
]

handler404 = "employees.exceptions.page_not_found"
handler500 = "employees.exceptions.server_error"
