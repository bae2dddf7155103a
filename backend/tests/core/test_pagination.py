"""Pagination - tests for clamping and defaulting of raw page/limit input."""

import pytest

from formservice.core.pagination import DEFAULT_LIMIT, MAX_OFFSET, Page, max_page


def test_defaults_when_absent():
    page = Page.parse(None, None)
    assert page == Page(1, DEFAULT_LIMIT)
    assert page.offset == 0


def test_offset_from_page_and_limit():
    page = Page.parse("2", "50")
    assert page.offset == 50
    assert page.limit == 50


@pytest.mark.parametrize("raw", ["abc", "2.5", "", object()])
def test_non_numeric_page_falls_back_to_default(raw):
    assert Page.parse(raw, "10").number == 1


@pytest.mark.parametrize("raw,expected", [("0", 1), ("-3", 1), ("7", 7)])
def test_page_floor_is_one(raw, expected):
    assert Page.parse(raw, None).number == expected


@pytest.mark.parametrize("raw,expected", [("0", 1), ("-10", 1), ("x", 50)])
def test_limit_floor_and_default(raw, expected):
    assert Page.parse(None, raw).limit == expected


def test_limit_capped_at_max():
    assert Page.parse(1, 10_000, max_limit=200).limit == 200


def test_custom_default_limit():
    assert Page.parse(None, None, default_limit=25).limit == 25


def test_total_pages_rounds_up():
    assert Page(1, 50).total_pages(120) == 3
    assert Page(1, 50).total_pages(100) == 2
    assert Page(1, 50).total_pages(0) == 0


@pytest.mark.parametrize("limit", [1, 50, 500])
def test_huge_page_is_clamped_so_offset_fits_bigint(limit):
    page = Page.parse("99999999999999999999", limit)
    assert page.offset <= MAX_OFFSET
    assert page.number == max_page(limit)


def test_reasonable_page_is_not_clamped():
    assert Page.parse("1000000", "50").number == 1_000_000
