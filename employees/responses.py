"""
Uniform response envelope for the Employee API.

Every endpoint answers with `{message, code, data, errors}`. The named
constructors fix the code for each outcome; `data` is None whenever there is
no payload.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from rest_framework import status

T = TypeVar("T")


@dataclass(frozen=True)
class FieldError:
    field: str
    error_message: str


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    message: str
    code: int
    data: Optional[T] = None
    errors: Optional[tuple] = None

    @classmethod
    def ok(cls, data, message="Success"):
        return cls(message=message, code=status.HTTP_200_OK, data=data)

    @classmethod
    def created(cls, data, message="Created"):
        return cls(message=message, code=status.HTTP_201_CREATED, data=data)

    @classmethod
    def accepted(cls, data, message="Accepted"):
        return cls(message=message, code=status.HTTP_202_ACCEPTED, data=data)

    @classmethod
    def not_found(cls, message="Not Found"):
        return cls(message=message, code=status.HTTP_404_NOT_FOUND)

    @classmethod
    def bad_request(cls, message="Request error. Please verify your data and resend", errors=None):
        return cls(
            message=message,
            code=status.HTTP_400_BAD_REQUEST,
            errors=tuple(errors) if errors else None,
        )

    @classmethod
    def unauthorized(cls, message="UnAuthorized"):
        return cls(message=message, code=status.HTTP_401_UNAUTHORIZED)

    @classmethod
    def internal_error(cls, message="Oh no! Something went wrong"):
        return cls(message=message, code=status.HTTP_500_INTERNAL_SERVER_ERROR)
