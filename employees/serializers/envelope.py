"""
Envelope serializers for the Employee API.

These turn `ApiResponse`, `Page`, `Link` and `FieldError` values into the
wire shape and back.
"""

from rest_framework import serializers
from rest_framework.response import Response

from employees.links import Link
from employees.pagination import Page
from employees.responses import ApiResponse, FieldError


class LinkSerializer(serializers.Serializer):
    href = serializers.CharField()
    rel = serializers.CharField()
    method = serializers.CharField()

    def create(self, validated_data):
        return Link(**validated_data)


class FieldErrorSerializer(serializers.Serializer):
    field = serializers.CharField()
    errorMessage = serializers.CharField(source="error_message")

    def create(self, validated_data):
        return FieldError(**validated_data)


class PageSerializer(serializers.Serializer):
    """A page of already-serialized items plus paging metadata and links."""

    items = serializers.ListField(child=serializers.JSONField())
    page = serializers.IntegerField()
    pageSize = serializers.IntegerField(source="page_size")
    totalCount = serializers.IntegerField(source="total_count", min_value=0)
    totalPages = serializers.IntegerField(source="total_pages", read_only=True)
    hasPrevious = serializers.BooleanField(source="has_previous", read_only=True)
    hasNext = serializers.BooleanField(source="has_next", read_only=True)
    links = LinkSerializer(many=True, required=False)

    def create(self, validated_data):
        links = [Link(**link) for link in validated_data.pop("links", [])]
        page = Page(
            items=tuple(validated_data["items"]),
            page=validated_data["page"],
            page_size=validated_data["page_size"],
            total_count=validated_data["total_count"],
        )
        return page.with_links(links)


class PayloadField(serializers.Field):
    """The envelope's `data`: a Page, an entity, a list, or nothing."""

    def to_representation(self, value):
        if isinstance(value, Page):
            return PageSerializer(value).data
        return value

    def to_internal_value(self, data):
        return data


class ApiResponseSerializer(serializers.Serializer):
    message = serializers.CharField(allow_blank=True)
    code = serializers.IntegerField()
    data = PayloadField(allow_null=True, required=False)
    errors = FieldErrorSerializer(many=True, allow_null=True, required=False)

    def create(self, validated_data):
        errors = validated_data.get("errors")
        if errors is not None:
            errors = tuple(FieldError(**error) for error in errors)
        return ApiResponse(
            message=validated_data["message"],
            code=validated_data["code"],
            data=validated_data.get("data"),
            errors=errors,
        )


def envelope_response(api_response, headers=None):
    """Render an ApiResponse as the whole response body, with `code` as the HTTP status."""
    return Response(
        ApiResponseSerializer(api_response).data,
        status=api_response.code,
        headers=headers,
    )
