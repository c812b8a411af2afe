from __future__ import annotations

import json
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse


class InvalidProfileUrl(ValueError):
    """Starting profile address missing or outside the supported prefix."""


def canonical_profile_url(url: str) -> str:
    """Strip the query string and fragment; the remainder is the dedup key."""
    text = (url or "").strip()
    return text.split("?", 1)[0].split("#", 1)[0]


def contact_info_url(canonical_id: str, suffix: str = "overlay/contact-info/") -> str:
    base = canonical_id if canonical_id.endswith("/") else canonical_id + "/"
    return f"{base}{suffix}"


def validate_profile_url(url: Optional[str], prefix: str) -> str:
    if not url or not url.strip():
        raise InvalidProfileUrl("A starting LinkedIn profile URL is required.")
    text = url.strip()
    if not text.startswith(prefix) or len(text) <= len(prefix):
        raise InvalidProfileUrl(
            f"Please provide a valid LinkedIn profile URL starting with {prefix} "
            f"(e.g. {prefix}davidbeer1/), got: {text}"
        )
    return text


def first_degree_filter_url(url: str) -> Optional[str]:
    """Return the search URL restricted to 1st-degree results, or None if already restricted.

    The ``network`` parameter is a JSON array of degree codes (F, S, O).
    Unparseable values are left alone.
    """
    parsed = urlparse(url)
    params = parse_qs(parsed.query, keep_blank_values=True)
    raw = params.get("network")
    if not raw:
        return None
    try:
        network = json.loads(raw[0])
    except ValueError:
        return None
    if not isinstance(network, list):
        return None
    if "S" not in network and len(network) <= 1:
        return None
    params["network"] = ['["F"]']
    query = urlencode(params, doseq=True)
    return urlunparse(parsed._replace(query=query))
