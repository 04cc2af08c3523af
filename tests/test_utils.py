# =============================================================================
# tests/test_utils.py - Shared Helper Tests
# =============================================================================
# Run with: pytest tests/test_utils.py -v
# =============================================================================

import pytest

from lib.supabase_client import store_error_message
from lib.utils import city_from_location, escape_like, format_lakhs, humanize_slug


class TestEscapeLike:

    def test_plain_text_unchanged(self):
        assert escape_like("Phoenix Hall") == "Phoenix Hall"

    def test_wildcards_escaped(self):
        assert escape_like("100%_off") == "100\\%\\_off"

    def test_backslash_escaped_first(self):
        assert escape_like("a\\b") == "a\\\\b"


class TestCityFromLocation:

    @pytest.mark.parametrize("location,city", [
        ("12 MG Road, Koregaon Park, Pune", "Pune"),
        ("Mumbai", "Mumbai"),
        ("Juhu,  Mumbai  ", "Mumbai"),
        ("", ""),
    ])
    def test_last_segment(self, location, city):
        assert city_from_location(location) == city


class TestDisplay:

    def test_humanize_slug(self):
        assert humanize_slug("food_beverage") == "food beverage"

    def test_format_lakhs(self):
        assert format_lakhs(1250000) == "₹12.5L"
        assert format_lakhs(0) == "₹0.0L"


class TestStoreErrorMessage:

    def test_message_attribute_preferred(self):
        class APIError(Exception):
            message = "duplicate key value violates unique constraint"

        assert store_error_message(APIError("raw")) == "duplicate key value violates unique constraint"

    def test_string_form(self):
        assert store_error_message(RuntimeError("connection reset")) == "connection reset"

    def test_empty_exception(self):
        assert store_error_message(TimeoutError()) == "TimeoutError"
