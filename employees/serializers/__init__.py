from .employee import EmployeeDetailSerializer, EmployeeRequestSerializer, EmployeeSerializer
from .envelope import (
    ApiResponseSerializer,
    FieldErrorSerializer,
    LinkSerializer,
    PageSerializer,
    envelope_response,
)

__all__ = [
    "ApiResponseSerializer",
    "FieldErrorSerializer",
    "LinkSerializer",
    "PageSerializer",
    "envelope_response",
    "EmployeeRequestSerializer",
    "EmployeeSerializer",
    "EmployeeDetailSerializer",
]
