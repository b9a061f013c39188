"""
Hypermedia links for the Employee API.
"""

import logging
from dataclasses import dataclass
from urllib.parse import urlencode

from django.conf import settings
from django.urls import NoReverseMatch, reverse

logger = logging.getLogger(__name__)

EMPLOYEE_DETAIL_ENDPOINT = "employee-detail"


@dataclass(frozen=True)
class Link:
    """A navigable pointer to a related operation."""

    href: str
    rel: str
    method: str


class LinkResolutionError(Exception):
    """The named endpoint could not be turned into a URI."""

    def __init__(self, endpoint_name, parameters=None):
        self.endpoint_name = endpoint_name
        self.parameters = parameters or {}
        super().__init__(f"Cannot resolve endpoint '{endpoint_name}' with {self.parameters}")


class LinkService:
    """
    Builds links from endpoint (URL pattern) names.

    The default resolver reverses the Django URL pattern and makes the path
    absolute against the current request, or `settings.API_BASE_URL` when
    there is no request. Pass `resolver(endpoint_name, parameters)` to use a
    different routing source.
    """

    def __init__(self, request=None, resolver=None):
        self.request = request
        self.resolver = resolver or self.resolve

    def resolve(self, endpoint_name, parameters):
        try:
            path = reverse(endpoint_name, kwargs=parameters or None)
        except NoReverseMatch as exc:
            raise LinkResolutionError(endpoint_name, parameters) from exc

        if self.request is not None:
            return self.request.build_absolute_uri(path)
        return settings.API_BASE_URL.rstrip("/") + path

    def generate_link(self, endpoint_name, parameters, rel, method, query=None):
        """
        Return a Link for `endpoint_name`.

        `parameters` fill the URL pattern; `query` is appended as a query
        string. Raises LinkResolutionError for unknown endpoints.
        """
        href = self.resolver(endpoint_name, parameters)
        if query:
            href = f"{href}?{urlencode(query)}"
        return Link(href=href, rel=rel, method=method)

    def try_generate_link(self, endpoint_name, parameters, rel, method, query=None):
        """Like `generate_link`, but logs and returns None on failure."""
        try:
            return self.generate_link(endpoint_name, parameters, rel, method, query=query)
        except LinkResolutionError as exc:
            logger.warning("Skipping '%s' link: %s", rel, exc)
            return None

    def page_links(self, page, endpoint_name, parameters=None):
        """
        Navigation links for a page of a collection.

        Empty pages get no links. Otherwise: self, then previous-page when
        there is a previous page, then next-page when there is a next page.
        """
        if not page.items:
            return []

        candidates = [self._page_link(endpoint_name, parameters, page.page, page.page_size, "self")]
        if page.has_previous:
            candidates.append(
                self._page_link(endpoint_name, parameters, page.page - 1, page.page_size, "previous-page")
            )
        if page.has_next:
            candidates.append(
                self._page_link(endpoint_name, parameters, page.page + 1, page.page_size, "next-page")
            )
        return [link for link in candidates if link is not None]

    def _page_link(self, endpoint_name, parameters, page_number, page_size, rel):
        return self.try_generate_link(
            endpoint_name,
            parameters,
            rel,
            "GET",
            query={"page": page_number, "page_size": page_size},
        )

    def employee_links(self, employee_id):
        """self / update-employee / delete-employee links for one employee."""
        parameters = {"employee_id": employee_id}
        candidates = [
            self.try_generate_link(EMPLOYEE_DETAIL_ENDPOINT, parameters, "self", "GET"),
            self.try_generate_link(EMPLOYEE_DETAIL_ENDPOINT, parameters, "update-employee", "PUT"),
            self.try_generate_link(EMPLOYEE_DETAIL_ENDPOINT, parameters, "delete-employee", "DELETE"),
        ]
        return [link for link in candidates if link is not None]
