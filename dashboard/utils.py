"""
Utility functions for the dashboard.
Money, dates, chart axes, pagination and search query helpers.
"""

from datetime import date
from decimal import Decimal, ROUND_DOWN
from math import ceil
from typing import Dict, List, Mapping, Optional, Union
from urllib.parse import urlencode

ELLIPSIS = "..."


def to_cents(amount: Union[Decimal, int, str]) -> int:
    """Dollars to integer cents, truncating sub-cent fractions."""
    return int((Decimal(str(amount)) * 100).to_integral_value(rounding=ROUND_DOWN))


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / 100).quantize(Decimal("0.01"))


def format_currency(cents: Optional[int]) -> str:
    dollars = from_cents(cents or 0)
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def format_date(value: Union[date, str]) -> str:
    """Render a date the way the tables show it, e.g. ``Dec 6, 2022``."""
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def generate_y_axis(revenue: List[Dict[str, int]]) -> Dict[str, Union[List[str], int]]:
    """Labels for the revenue chart, in $1K steps from the top label down to $0K."""
    highest_record = max((row["revenue"] for row in revenue), default=0)
    top_label = ceil(highest_record / 1000) * 1000

    y_axis_labels = [f"${i // 1000}K" for i in range(top_label, -1, -1000)]
    return {"y_axis_labels": y_axis_labels, "top_label": top_label}


def generate_pagination(current_page: int, total_pages: int) -> List[Union[int, str]]:
    # All pages fit without ellipses
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total_pages,
    ]


def parse_page(value: Optional[str]) -> int:
    """1-based page number from a query string value; anything unusable is page 1."""
    try:
        page = int(value)
    except (TypeError, ValueError):
        return 1
    return page if page > 0 else 1


def build_search_query(params: Mapping[str, str], term: str) -> str:
    """
    Query string for a new search term.

    Keeps unrelated parameters, drops ``query`` when the term is empty and
    always sends the user back to page 1.
    """
    updated = {key: value for key, value in params.items() if key not in ("query", "page")}
    if term:
        updated["query"] = term
    updated["page"] = "1"
    return urlencode(updated)


def page_url_query(params: Mapping[str, str], page: Union[int, str]) -> str:
    updated = dict(params.items())
    updated["page"] = str(page)
    return urlencode(updated)
