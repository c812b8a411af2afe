from __future__ import annotations


# Central locator table for the connections search surface. Edit here when the
# markup shifts; adapters in sources/ and the pagination driver read from it.
SELECTORS: dict[str, str] = {
    # Session
    "global_nav": "#global-nav",
    # Profile -> connections search
    "connections_link": 'a[href*="/search/results/people/?connectionOf="]',
    # Result list
    "list_item": 'ul[role="list"] > li',
    "result_card": "div[data-chameleon-result-urn]",
    "name_container": 'span[dir="ltr"]',
    "name_text": 'span[aria-hidden="true"]',
    "employer": ".t-14.t-normal, .entity-result__primary-subtitle",
    # Pagination
    "pagination": "div.artdeco-pagination",
    "page_button": 'li[data-test-pagination-page-btn="{page}"] > button',
    "next_button": 'button.artdeco-pagination__button--next[aria-label="Next"]',
    # Contact overlay
    "mailto": 'a[href^="mailto:"]',
    # Debug dumps
    "main_content": ".scaffold-layout__content--main",
}

# Attribute carrying a stable id for each result card
RESULT_ID_ATTRIBUTE = "data-chameleon-result-urn"
