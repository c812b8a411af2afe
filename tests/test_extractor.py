from __future__ import annotations

from config.selectors import SELECTORS
from models import NOT_AVAILABLE
from sources.linkedin_extractor import LinkedInExtractor, parse_email, parse_list_items

from fakes import FakeNavigator


RESULTS_HTML = """
<ul role="list">
  <li>
    <div data-chameleon-result-urn="urn:li:member:1">
      <a href="https://www.linkedin.com/in/jane-doe?miniProfileUrn=urn%3Ali%3A1">
        <span dir="ltr"><span aria-hidden="true">Jane Doe</span><span class="visually-hidden">View Jane Doe's profile</span></span>
      </a>
      <div class="entity-result__primary-subtitle">Engineer at Acme</div>
    </div>
  </li>
  <li>
    <div data-chameleon-result-urn="urn:li:member:2">
      <a href="/in/john-roe/"><span dir="ltr"><span aria-hidden="true">John Roe</span></span></a>
    </div>
  </li>
  <li><div class="upsell">Try Premium</div></li>
</ul>
"""


def test_parses_name_profile_and_employer():
    items = parse_list_items(RESULTS_HTML, SELECTORS["list_item"], base_url="https://www.linkedin.com/search/results/people/")
    assert [i.full_name for i in items] == ["Jane Doe", "John Roe"]
    assert items[0].profile_url == "https://www.linkedin.com/in/jane-doe?miniProfileUrn=urn%3Ali%3A1"
    assert items[0].current_employer == "Engineer at Acme"
    # Relative links resolve against the page address; missing employer is a sentinel
    assert items[1].profile_url == "https://www.linkedin.com/in/john-roe/"
    assert items[1].current_employer == NOT_AVAILABLE


def test_limit_and_fallback_locator():
    items = parse_list_items(RESULTS_HTML, SELECTORS["result_card"], limit=1)
    assert len(items) == 1
    assert items[0].full_name == "Jane Doe"


def test_no_results_is_empty():
    assert parse_list_items("<html><body></body></html>", SELECTORS["list_item"]) == []
    assert parse_list_items("", SELECTORS["list_item"]) == []


def test_first_mailto_wins():
    html = '<section><a href="mailto:jane%40example.com?subject=hi">mail</a><a href="mailto:other@example.com">x</a></section>'
    assert parse_email(html) == "jane@example.com"


def test_no_mailto_is_none():
    assert parse_email('<section><a href="https://example.com">site</a></section>') is None
    assert parse_email('<a href="mailto:">empty</a>') is None


def test_extractor_reads_navigator_snapshot():
    nav = FakeNavigator(address="https://www.linkedin.com/search/results/people/")
    nav.html = RESULTS_HTML
    extractor = LinkedInExtractor(nav, limit=10)
    assert len(extractor.extract_list_items(SELECTORS["list_item"])) == 2
    nav.html = '<a href="mailto:john@example.com">john@example.com</a>'
    assert extractor.extract_email() == "john@example.com"
