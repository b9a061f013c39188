"""
Unit tests for hypermedia link generation.
"""

import logging

import pytest

from employees.links import Link, LinkResolutionError, LinkService
from employees.pagination import paginate

ROUTES = {
    "employee-list": "http://api.test/employees/",
    "employee-detail": "http://api.test/employees/{employee_id}/",
}


def fake_resolver(endpoint_name, parameters):
    """Resolve from a fixed route table."""
    if endpoint_name not in ROUTES:
        raise LinkResolutionError(endpoint_name, parameters)
    return ROUTES[endpoint_name].format(**(parameters or {}))


def page_link(page_number, rel, page_size=10):
    return Link(
        href=f"http://api.test/employees/?page={page_number}&page_size={page_size}",
        rel=rel,
        method="GET",
    )


class TestGenerateLink:
    """Tests for LinkService.generate_link."""

    def test_builds_link(self):
        service = LinkService(resolver=fake_resolver)
        link = service.generate_link("employee-detail", {"employee_id": "abc123"}, "self", "GET")
        assert link == Link(href="http://api.test/employees/abc123/", rel="self", method="GET")

    def test_appends_query(self):
        service = LinkService(resolver=fake_resolver)
        link = service.generate_link("employee-list", None, "self", "GET", query={"page": 2, "page_size": 5})
        assert link.href == "http://api.test/employees/?page=2&page_size=5"

    def test_unknown_endpoint_raises(self):
        """Unknown endpoints should raise a recoverable error."""
        service = LinkService(resolver=fake_resolver)
        with pytest.raises(LinkResolutionError) as exc_info:
            service.generate_link("nope", {}, "self", "GET")
        assert exc_info.value.endpoint_name == "nope"

    def test_try_generate_link_logs_and_skips(self, caplog):
        """try_generate_link should return None and log a warning."""
        service = LinkService(resolver=fake_resolver)
        with caplog.at_level(logging.WARNING, logger="employees.links"):
            assert service.try_generate_link("nope", {}, "self", "GET") is None
        assert "nope" in caplog.text


class TestPageLinks:
    """Tests for the paged-collection link rule."""

    def setup_method(self):
        self.service = LinkService(resolver=fake_resolver)
        self.source = list(range(50))

    def test_first_page(self):
        """First page: self and next, no previous."""
        page = paginate(self.source, 1, 10)
        assert self.service.page_links(page, "employee-list") == [
            page_link(1, "self"),
            page_link(2, "next-page"),
        ]

    def test_last_page(self):
        """Last page: self and previous, no next."""
        page = paginate(self.source, 5, 10)
        assert self.service.page_links(page, "employee-list") == [
            page_link(5, "self"),
            page_link(4, "previous-page"),
        ]

    def test_middle_page(self):
        """Middle page: self, previous, next in that order."""
        page = paginate(self.source, 3, 10)
        assert self.service.page_links(page, "employee-list") == [
            page_link(3, "self"),
            page_link(2, "previous-page"),
            page_link(4, "next-page"),
        ]

    def test_single_page(self):
        page = paginate(list(range(4)), 1, 10)
        assert self.service.page_links(page, "employee-list") == [page_link(1, "self")]

    def test_empty_page_has_no_links(self):
        """An empty result set gets no links at all."""
        page = paginate([], 1, 10)
        assert self.service.page_links(page, "employee-list") == []

    def test_page_past_end_has_no_links(self):
        page = paginate(self.source, 9, 10)
        assert self.service.page_links(page, "employee-list") == []

    def test_links_carry_page_size(self):
        page = paginate(self.source, 2, 20)
        links = self.service.page_links(page, "employee-list")
        assert [link.href for link in links] == [
            "http://api.test/employees/?page=2&page_size=20",
            "http://api.test/employees/?page=1&page_size=20",
            "http://api.test/employees/?page=3&page_size=20",
        ]

    def test_unknown_endpoint_omits_links(self):
        """A broken route drops the links instead of failing."""
        page = paginate(self.source, 2, 10)
        assert self.service.page_links(page, "missing-route") == []


class TestEmployeeLinks:
    """Tests for the single-employee link rule."""

    def test_three_links_in_order(self):
        service = LinkService(resolver=fake_resolver)
        assert service.employee_links("abc123") == [
            Link(href="http://api.test/employees/abc123/", rel="self", method="GET"),
            Link(href="http://api.test/employees/abc123/", rel="update-employee", method="PUT"),
            Link(href="http://api.test/employees/abc123/", rel="delete-employee", method="DELETE"),
        ]


class TestDjangoResolver:
    """Tests for the default resolver backed by the URLconf."""

    def test_absolute_uri_from_request(self, request_factory):
        request = request_factory.get("/api/v1/employees/")
        service = LinkService(request)
        link = service.generate_link("employee-detail", {"employee_id": "abc123"}, "self", "GET")
        assert link.href == "http://testserver/api/v1/employees/abc123/"

    def test_base_url_without_request(self, settings):
        settings.API_BASE_URL = "https://api.example.com/"
        link = LinkService().generate_link("employee-list", None, "self", "GET", query={"page": 1, "page_size": 10})
        assert link.href == "https://api.example.com/api/v1/employees/?page=1&page_size=10"

    def test_unknown_route_name(self, request_factory):
        service = LinkService(request_factory.get("/"))
        with pytest.raises(LinkResolutionError):
            service.generate_link("employee-nowhere", {}, "self", "GET")

    def test_missing_route_parameter(self, request_factory):
        """A known route with missing parameters cannot be resolved either."""
        service = LinkService(request_factory.get("/"))
        with pytest.raises(LinkResolutionError):
            service.generate_link("employee-detail", {}, "self", "GET")

    def test_employee_links_absolute(self, request_factory):
        service = LinkService(request_factory.get("/api/v1/employees/abc123/"))
        links = service.employee_links("abc123")
        assert [(link.rel, link.method) for link in links] == [
            ("self", "GET"),
            ("update-employee", "PUT"),
            ("delete-employee", "DELETE"),
        ]
        assert {link.href for link in links} == {"http://testserver/api/v1/employees/abc123/"}
