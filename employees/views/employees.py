"""
Employee views for the Employee API.
"""

import logging

from rest_framework.permissions import AllowAny
from rest_framework.settings import api_settings
from rest_framework.views import APIView

from employees.exceptions import NotFoundError
from employees.models import Employee
from employees.responses import ApiResponse
from employees.serializers import (
    EmployeeDetailSerializer,
    EmployeeRequestSerializer,
    EmployeeSerializer,
    envelope_response,
)

logger = logging.getLogger(__name__)

EMPLOYEE_NOT_FOUND = "Employee with the given ID does not exist"


class EmployeeListView(APIView):
    """
    GET /api/v1/employees/?page=1&page_size=10
    List employees, one page at a time.

    POST /api/v1/employees/
    Create an employee.
    """

    permission_classes = [AllowAny]
    pagination_class = api_settings.DEFAULT_PAGINATION_CLASS
    endpoint_name = "employee-list"

    def get(self, request):
        paginator = self.pagination_class()
        employees = paginator.paginate_queryset(Employee.objects.all(), request, view=self)
        serializer = EmployeeSerializer(employees, many=True)
        return paginator.get_paginated_response(serializer.data)

    def post(self, request):
        serializer = EmployeeRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        employee = serializer.save()

        logger.info("Employee %s created", employee.id)
        data = EmployeeDetailSerializer(employee, context={"request": request}).data
        return envelope_response(ApiResponse.created(data))


class EmployeeAllView(APIView):
    """
    GET /api/v1/employees/all/
    List every employee, unpaged. Answers 404 when there are none.
    """

    permission_classes = [AllowAny]

    def get(self, request):
        employees = Employee.objects.all()
        if not employees.exists():
            return envelope_response(ApiResponse.not_found())

        serializer = EmployeeSerializer(employees, many=True)
        return envelope_response(ApiResponse.ok(serializer.data))


class EmployeeDetailView(APIView):
    """
    GET /api/v1/employees/{employee_id}/
    View an employee.

    PUT /api/v1/employees/{employee_id}/
    Replace an employee's details.

    DELETE /api/v1/employees/{employee_id}/
    Delete an employee. Answers with the deleted record.
    """

    permission_classes = [AllowAny]

    def get_employee(self, employee_id):
        try:
            return Employee.objects.get(id=employee_id)
        except Employee.DoesNotExist as exc:
            raise NotFoundError(EMPLOYEE_NOT_FOUND) from exc

    def get(self, request, employee_id):
        employee = self.get_employee(employee_id)

        data = EmployeeDetailSerializer(employee, context={"request": request}).data
        return envelope_response(ApiResponse.ok(data))

    def put(self, request, employee_id):
        employee = self.get_employee(employee_id)

        serializer = EmployeeRequestSerializer(employee, data=request.data)
        serializer.is_valid(raise_exception=True)
        employee.touch()
        employee = serializer.save()

        logger.info("Employee %s updated", employee.id)
        data = EmployeeDetailSerializer(employee, context={"request": request}).data
        return envelope_response(ApiResponse.ok(data))

    def delete(self, request, employee_id):
        employee = self.get_employee(employee_id)

        # Serialize first: delete() clears the primary key.
        data = EmployeeDetailSerializer(employee, context={"request": request}).data
        employee.delete()

        logger.info("Employee %s deleted", employee_id)
        return envelope_response(ApiResponse.ok(data))
