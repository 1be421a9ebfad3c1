"""Tests for product query construction"""
from app.services.filters import build_filter_query, price_below_query, rating_above_query


class TestBuildFilterQuery:
    """Combination of optional filters"""

    def test_no_filters_matches_everything(self):
        assert build_filter_query() == {}

    def test_price_is_inclusive_ceiling(self):
        assert build_filter_query(price=15.0) == {"price": {"$lte": 15.0}}

    def test_rating_is_exclusive_floor(self):
        assert build_filter_query(rating=3.0) == {"rating": {"$gt": 3.0}}

    def test_featured_only_true_string_means_true(self):
        assert build_filter_query(featured="true") == {"featured": True}
        assert build_filter_query(featured="false") == {"featured": False}
        assert build_filter_query(featured="yes") == {"featured": False}

    def test_empty_featured_is_absent(self):
        assert build_filter_query(featured="") == {}

    def test_filters_combine(self):
        assert build_filter_query(price=15.0, rating=3.0, featured="true") == {
            "price": {"$lte": 15.0},
            "rating": {"$gt": 3.0},
            "featured": True,
        }

    def test_zero_values_are_applied(self):
        """Parsed zero is a real filter value"""
        assert build_filter_query(price=0.0, rating=0.0) == {
            "price": {"$lte": 0.0},
            "rating": {"$gt": 0.0},
        }


class TestSingleFieldQueries:

    def test_price_below_is_strict(self):
        assert price_below_query(20.0) == {"price": {"$lt": 20.0}}

    def test_rating_above_is_strict(self):
        assert rating_above_query(2.5) == {"rating": {"$gt": 2.5}}
