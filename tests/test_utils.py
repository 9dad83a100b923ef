from datetime import date
from decimal import Decimal
from urllib.parse import parse_qs

import pytest

from dashboard.utils import (
    build_search_query,
    format_currency,
    format_date,
    from_cents,
    generate_pagination,
    generate_y_axis,
    page_url_query,
    parse_page,
    to_cents,
)


class TestMoney:
    @pytest.mark.parametrize("amount, cents", [
        ("157.95", 15795),
        (Decimal("0.01"), 1),
        ("10.999", 1099),
        (3, 300),
    ])
    def test_to_cents_truncates(self, amount, cents):
        assert to_cents(amount) == cents

    def test_from_cents(self):
        assert from_cents(15795) == Decimal("157.95")

    def test_format_currency(self):
        assert format_currency(123456) == "$1,234.56"
        assert format_currency(0) == "$0.00"
        assert format_currency(None) == "$0.00"

    def test_format_date(self):
        assert format_date(date(2022, 12, 6)) == "Dec 6, 2022"
        assert format_date("2023-06-17") == "Jun 17, 2023"


class TestChartAxis:
    def test_labels_round_up_to_thousands(self):
        result = generate_y_axis([{"month": "Jan", "revenue": 2000}, {"month": "Dec", "revenue": 4800}])
        assert result["top_label"] == 5000
        assert result["y_axis_labels"] == ["$5K", "$4K", "$3K", "$2K", "$1K", "$0K"]

    def test_no_revenue(self):
        assert generate_y_axis([]) == {"y_axis_labels": ["$0K"], "top_label": 0}


class TestPagination:
    @pytest.mark.parametrize("current, total, expected", [
        (1, 0, []),
        (2, 7, [1, 2, 3, 4, 5, 6, 7]),
        (2, 10, [1, 2, 3, "...", 9, 10]),
        (9, 10, [1, 2, "...", 8, 9, 10]),
        (5, 10, [1, "...", 4, 5, 6, "...", 10]),
    ])
    def test_generate_pagination(self, current, total, expected):
        assert generate_pagination(current, total) == expected

    @pytest.mark.parametrize("value, page", [("3", 3), (None, 1), ("x", 1), ("0", 1), ("-2", 1)])
    def test_parse_page(self, value, page):
        assert parse_page(value) == page


class TestSearchQuery:
    def test_new_term_resets_page(self):
        query = build_search_query({"query": "old", "page": "4", "sort": "date"}, "rabbit")
        assert parse_qs(query) == {"query": ["rabbit"], "page": ["1"], "sort": ["date"]}

    def test_empty_term_drops_query(self):
        assert parse_qs(build_search_query({"query": "old", "page": "2"}, "")) == {"page": ["1"]}

    def test_page_url_keeps_query(self):
        assert parse_qs(page_url_query({"query": "paid"}, 3)) == {"query": ["paid"], "page": ["3"]}
