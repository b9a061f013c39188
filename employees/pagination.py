"""
Pagination for the Employee API.

`paginate` is the pure page-window engine; `LinkedPageNumberPagination` plugs
it into DRF so list views answer with an enveloped, hyperlinked page.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

from rest_framework import serializers
from rest_framework.pagination import BasePagination

from employees.links import LinkService
from employees.responses import ApiResponse

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def sanitize_page(value):
    """Coerce a requested page number into a valid 1-based index."""
    if value is None or value <= 0:
        return DEFAULT_PAGE
    return value


def sanitize_page_size(value):
    """Coerce a requested page size into a valid window size."""
    if value is None or value <= 0:
        return DEFAULT_PAGE_SIZE
    return value


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One materialized window over an ordered collection.

    Pages are immutable. Links are attached with `with_links`, which returns
    a new Page.
    """

    items: tuple
    page: int
    page_size: int
    total_count: int
    links: tuple = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "page", sanitize_page(self.page))
        object.__setattr__(self, "page_size", sanitize_page_size(self.page_size))
        object.__setattr__(self, "total_count", max(self.total_count, 0))

    @property
    def total_pages(self):
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self):
        return self.page > 1

    @property
    def has_next(self):
        return self.page < self.total_pages

    def with_items(self, items):
        return replace(self, items=tuple(items))

    def with_links(self, links):
        return replace(self, links=tuple(links))


def count_records(source):
    """Total number of records in a source (QuerySet or plain sequence)."""
    if isinstance(source, (list, tuple)):
        return len(source)
    return source.count()


def paginate(source, page, page_size):
    """
    Build the Page for `page`/`page_size` over `source`.

    `source` must support `count()` (or `len()` for sequences) and slicing.
    An offset past the end gives an empty window, not an error.
    """
    page = sanitize_page(page)
    page_size = sanitize_page_size(page_size)

    total_count = count_records(source)
    offset = (page - 1) * page_size
    # Never hand the backend an offset past the end.
    items = tuple(source[offset : offset + page_size]) if offset < total_count else ()

    return Page(items=items, page=page, page_size=page_size, total_count=total_count)


class PageQuerySerializer(serializers.Serializer):
    """Paging query parameters. Non-positive values are coerced later."""

    page = serializers.IntegerField(required=False, default=DEFAULT_PAGE)
    page_size = serializers.IntegerField(
        required=False,
        default=DEFAULT_PAGE_SIZE,
        max_value=MAX_PAGE_SIZE,
    )


class LinkedPageNumberPagination(BasePagination):
    """
    Page-number pagination returning `{message, code, data: Page, errors}`.

    - Query params: `page` (default 1) and `page_size` (default 10)
    - Non-positive values fall back to the defaults
    - `page_size` above 100 is rejected
    - Navigation links (self / previous-page / next-page) are attached to
      non-empty pages
    """

    page_query_param = "page"
    page_size_query_param = "page_size"

    def paginate_queryset(self, queryset, request, view=None):
        query = PageQuerySerializer(
            data={
                key: request.query_params[key]
                for key in (self.page_query_param, self.page_size_query_param)
                if request.query_params.get(key, "") != ""
            }
        )
        query.is_valid(raise_exception=True)

        self.request = request
        self.endpoint_name = getattr(view, "endpoint_name", None)
        self.page = paginate(
            queryset,
            query.validated_data["page"],
            query.validated_data["page_size"],
        )
        return list(self.page.items)

    def get_paginated_response(self, data):
        # Local import: the envelope serializers import Page from this module.
        from employees.serializers.envelope import envelope_response

        page = self.page.with_items(data)
        if self.endpoint_name:
            page = page.with_links(LinkService(self.request).page_links(page, self.endpoint_name))
        return envelope_response(ApiResponse.ok(page))
