"""Tests for PageRequest, UserSearchForm and PageResult."""

import pytest
from pydantic import ValidationError

from platform_core.application.dtos.pagination import PageResult
from platform_core.domain.enums import SortDirection
from platform_core.schemas.pagination import DEFAULT_PAGE_SIZE, PageRequest
from platform_core.schemas.user import UserSearchForm


class TestPageRequest:
    def test_defaults(self) -> None:
        request = PageRequest()
        assert request.page == 0
        assert request.size == DEFAULT_PAGE_SIZE
        assert request.sort is None
        assert request.direction == SortDirection.ASC

    @pytest.mark.parametrize("kwargs", [{"page": -1}, {"size": 0}])
    def test_invalid_values_rejected(self, kwargs) -> None:
        with pytest.raises(ValidationError):
            PageRequest(**kwargs)

    def test_direction_from_string(self) -> None:
        assert PageRequest(direction="desc").direction == SortDirection.DESC


class TestUserSearchForm:
    def test_blank_strings_become_none(self) -> None:
        form = UserSearchForm(username="  ", first_name="", last_name=" Doe ")
        assert form.username is None
        assert form.first_name is None
        assert form.last_name == "Doe"

    def test_active_filter_kept_when_false(self) -> None:
        assert UserSearchForm(active=False).active is False


class TestPageResult:
    def test_navigation(self) -> None:
        page = PageResult(items=["a", "b"], page=1, size=2, total=5)
        assert page.total_pages == 3
        assert page.has_next is True
        assert page.has_previous is True

    def test_last_page(self) -> None:
        page = PageResult(items=["e"], page=2, size=2, total=5)
        assert page.has_next is False

    def test_empty(self) -> None:
        page = PageResult(items=[], page=0, size=20, total=0)
        assert page.total_pages == 0
        assert page.has_next is False
        assert page.has_previous is False
