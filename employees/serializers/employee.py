"""
Employee serializers for the Employee API.

Request and response shapes are separate serializers: they share some
fields but not a base class.
"""

from rest_framework import serializers

from employees.links import LinkService
from employees.models import Employee
from employees.serializers.envelope import LinkSerializer


class EmployeeRequestSerializer(serializers.ModelSerializer):
    """Serializer for creating or replacing an employee."""

    jobTitle = serializers.CharField(
        source="job_title",
        max_length=128,
        required=False,
        allow_blank=True,
    )

    class Meta:
        model = Employee
        fields = [
            "name",
            "dob",
            "jobTitle",
            "salary",
        ]


class EmployeeSerializer(serializers.ModelSerializer):
    """Employee as returned in collections."""

    jobTitle = serializers.CharField(source="job_title", read_only=True)
    hireDate = serializers.DateTimeField(source="hire_date", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    age = serializers.IntegerField(read_only=True)

    class Meta:
        model = Employee
        fields = [
            "id",
            "name",
            "dob",
            "jobTitle",
            "salary",
            "hireDate",
            "createdAt",
            "age",
        ]
        read_only_fields = fields


class EmployeeDetailSerializer(EmployeeSerializer):
    """A single employee, with its self / update / delete links."""

    links = serializers.SerializerMethodField()

    class Meta(EmployeeSerializer.Meta):
        fields = EmployeeSerializer.Meta.fields + ["links"]
        read_only_fields = fields

    def get_links(self, obj):
        service = LinkService(self.context.get("request"))
        return LinkSerializer(service.employee_links(obj.id), many=True).data
