"""
Exception handling for the Employee API.

Views raise meaningful exceptions (or DRF's own) and this module turns them
into envelope responses. Nothing leaves the API in any other shape.
"""

import logging
from collections.abc import Mapping, Sequence

from django.http import JsonResponse
from rest_framework import exceptions as drf_exceptions
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from employees.responses import ApiResponse, FieldError
from employees.serializers.envelope import ApiResponseSerializer, envelope_response

logger = logging.getLogger(__name__)

NON_FIELD_ERRORS = "non_field_errors"
FORWARDED_HEADERS = ("WWW-Authenticate", "Retry-After", "Allow")


class DomainError(Exception):
    """
    Base class for predictable, user-facing errors.
    """


class NotFoundError(DomainError):
    pass


def flatten_error_details(details):
    """
    Flatten DRF error detail into FieldError values.

    Nested serializers give dotted paths (`address.city`); list items give
    their index (`tags.0`). Errors with no field use `non_field_errors`.
    """
    out = []

    def walk(path, value):
        if isinstance(value, Mapping):
            for key, item in value.items():
                walk(f"{path}.{key}" if path else str(key), item)
            return

        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            # A list of scalar messages is a leaf.
            if all(isinstance(item, str) or not isinstance(item, (Mapping, Sequence)) for item in value):
                for item in value:
                    out.append(FieldError(field=path or NON_FIELD_ERRORS, error_message=str(item)))
                return

            for index, item in enumerate(value):
                walk(f"{path}.{index}" if path else str(index), item)
            return

        out.append(FieldError(field=path or NON_FIELD_ERRORS, error_message=str(value)))

    walk("", details)
    return out


def _api_exception_envelope(exc, response):
    if isinstance(exc, drf_exceptions.ValidationError):
        return ApiResponse.bad_request(errors=flatten_error_details(response.data))
    if isinstance(exc, drf_exceptions.NotFound):
        return ApiResponse.not_found()
    if isinstance(exc, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)):
        return ApiResponse.unauthorized()
    if isinstance(exc, drf_exceptions.ParseError):
        return ApiResponse.bad_request(message=str(exc.detail))

    # 403, 405, 406, 415, 429...: keep the status, report DRF's message.
    detail = getattr(exc, "detail", None)
    message = str(detail) if isinstance(detail, str) else "Request failed."
    return ApiResponse(message=message, code=response.status_code)


def _domain_envelope(exc):
    if isinstance(exc, NotFoundError):
        return ApiResponse.not_found(message=str(exc) or "Not Found")
    return ApiResponse.bad_request(message=str(exc))


def envelope_exception_handler(exc, context):
    """
    DRF exception handler producing `{message, code, data, errors}` bodies.

    Unhandled exceptions are logged and answered with the internal-error
    envelope; their message never reaches the client.
    """
    response = drf_exception_handler(exc, context)
    if response is not None:
        return envelope_response(
            _api_exception_envelope(exc, response),
            headers={key: response[key] for key in FORWARDED_HEADERS if response.has_header(key)},
        )

    if isinstance(exc, DomainError):
        return envelope_response(_domain_envelope(exc))

    view = context.get("view") if context else None
    logger.exception(
        "Unhandled exception in API view: %s",
        view.__class__.__name__ if view else "unknown",
        exc_info=exc,
    )
    set_rollback()
    return envelope_response(ApiResponse.internal_error())


def _json_envelope(api_response):
    return JsonResponse(ApiResponseSerializer(api_response).data, status=api_response.code)


def page_not_found(request, exception=None):
    """Django handler404: unknown URLs still answer with the envelope."""
    return _json_envelope(ApiResponse.not_found())


def server_error(request):
    """Django handler500."""
    return _json_envelope(ApiResponse.internal_error())
