"""
Unit tests for the query filter builder.
"""

from app.utils.filters import FilterField, build_filter, build_search_filter, contains
from tests.fakes import matches


JOB_FIELDS = (FilterField("category"), FilterField("location"), FilterField("language", exact=True))


class TestBuildFilter:

    def test_unknown_keys_are_ignored(self):
        query = build_filter({"page": "2", "limit": "5", "colour": "red"}, JOB_FIELDS)
        assert query == {}

    def test_empty_values_impose_nothing(self):
        assert build_filter({"category": "", "language": None}, JOB_FIELDS) == {}

    def test_substring_and_exact_fields(self):
        query = build_filter({"category": "Farm", "language": "en"}, JOB_FIELDS)
        assert query == {
            "category": {"$regex": "Farm", "$options": "i"},
            "language": "en",
        }

    def test_regex_metacharacters_match_literally(self):
        query = build_filter({"location": "a.b"}, JOB_FIELDS)
        assert matches({"location": "xa.by"}, query)
        assert not matches({"location": "axb"}, query)

    def test_predicates_are_and_ed(self):
        query = build_filter({"category": "farm", "location": "pune"}, JOB_FIELDS)
        assert matches({"category": "Farming", "location": "Pune East"}, query)
        assert not matches({"category": "Farming", "location": "Delhi"}, query)


class TestSearchFilter:

    def test_or_across_fields(self):
        query = build_search_filter("farm", ("title", "description", "category"))
        assert query == {"$or": [
            {"title": contains("farm")},
            {"description": contains("farm")},
            {"category": contains("farm")},
        ]}
        assert matches({"title": "x", "description": "Organic FARMING", "category": "y"}, query)

    def test_language_is_and_ed_with_search(self):
        query = build_search_filter("farm", ("title",), language="en")
        assert matches({"title": "Farm aid", "language": "en"}, query)
        assert not matches({"title": "Farm aid", "language": "hi"}, query)
