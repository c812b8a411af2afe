from __future__ import annotations

import pytest

from config.selectors import SELECTORS
from services.pacing import NoDelayPacer
from services.pagination import PageState, PaginationDriver

from fakes import FakeNavigator, FakeResultsSite, person


def _driver(site, **kwargs):
    return PaginationDriver(site, site, NoDelayPacer(), **kwargs)


def _page(prefix, count):
    return [person(f"{prefix}{i}") for i in range(count)]


def test_disabled_next_exhausts_without_clicking():
    site = FakeResultsSite([_page("a", 3)])
    driver = _driver(site)
    assert driver.await_listing()
    assert len(driver.list_page()) == 3
    assert driver.state is PageState.PAGINATING

    assert driver.advance() is False
    assert driver.exhausted
    assert site.clicks == []
    assert driver.page_number == 1


def test_page_number_button_is_preferred():
    site = FakeResultsSite([_page("a", 2), _page("b", 2)])
    driver = _driver(site)
    driver.await_listing()
    driver.list_page()

    assert driver.advance() is True
    assert site.clicks == [SELECTORS["page_button"].format(page=2)]
    assert SELECTORS["page_button"].format(page=2) in site.hovers
    assert driver.page_number == 2
    assert driver.state is PageState.LISTING
    assert [c.full_name for c in driver.list_page()] == ["B0", "B1"]


def test_next_button_used_when_page_button_missing():
    site = FakeResultsSite([_page("a", 2), _page("b", 2)], page_buttons=False)
    driver = _driver(site)
    driver.await_listing()
    driver.list_page()

    assert driver.advance() is True
    assert site.clicks == [SELECTORS["next_button"]]
    assert driver.page_number == 2


def test_no_controls_means_exhausted():
    site = FakeResultsSite([_page("a", 2), _page("b", 2)], page_buttons=False, next_button=False)
    driver = _driver(site)
    driver.await_listing()
    driver.list_page()
    assert driver.advance() is False
    assert driver.exhausted


def test_missing_pagination_container_means_exhausted():
    site = FakeResultsSite([_page("a", 2), _page("b", 2)])
    site.present.discard(SELECTORS["pagination"])
    driver = _driver(site)
    driver.await_listing()
    driver.list_page()
    assert driver.advance() is False
    assert site.clicks == []


def test_click_without_visible_change_is_not_trusted():
    site = FakeResultsSite([_page("a", 2), _page("b", 2)], stale=True)
    driver = _driver(site, listing_change_timeout_ms=1000, poll_interval_ms=250)
    driver.await_listing()
    driver.list_page()

    assert driver.advance() is False
    assert driver.exhausted
    assert driver.page_number == 1
    assert len(site.clicks) == 1


def test_address_change_alone_confirms_advance():
    site = FakeResultsSite([_page("a", 2), _page("b", 2)])
    driver = _driver(site)
    driver.await_listing()
    driver.list_page()

    def show_without_new_id(nav, page=2):
        nav.current = page
        nav.address = nav.address + f"&page={page}"

    site.on_click[SELECTORS["page_button"].format(page=2)] = show_without_new_id
    assert driver.advance() is True
    assert driver.page_number == 2


def test_empty_page_exhausts():
    site = FakeResultsSite([[]])
    driver = _driver(site)
    driver.await_listing()
    assert driver.list_page() == []
    assert driver.exhausted


def test_listing_is_bounded_by_page_size():
    site = FakeResultsSite([_page("a", 14)])
    driver = _driver(site, page_size=10)
    driver.await_listing()
    assert len(driver.list_page()) == 10


def test_falls_back_to_result_card_locator():
    site = FakeResultsSite([_page("a", 2)], list_selector=SELECTORS["result_card"])
    driver = _driver(site)
    assert driver.await_listing() is True
    driver.list_page()
    assert site.locators_used == [SELECTORS["result_card"]]


def test_list_never_rendering_exhausts():
    nav = FakeNavigator()
    driver = PaginationDriver(nav, nav, NoDelayPacer())
    assert driver.await_listing() is False
    assert driver.exhausted


def test_operations_out_of_state_raise():
    site = FakeResultsSite([_page("a", 1)])
    driver = _driver(site)
    with pytest.raises(RuntimeError):
        driver.advance()
    driver.list_page()
    with pytest.raises(RuntimeError):
        driver.list_page()


def test_click_failure_is_contained():
    site = FakeResultsSite([_page("a", 2), _page("b", 2)])
    driver = _driver(site)
    driver.await_listing()
    driver.list_page()

    def broken(nav):
        raise RuntimeError("element detached")

    site.on_click[SELECTORS["page_button"].format(page=2)] = broken
    assert driver.advance() is False
    assert driver.exhausted
