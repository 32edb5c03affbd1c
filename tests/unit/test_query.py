"""
Query string encoding of list options.
"""
from decimal import Decimal

import pytest

from crowdin_api.models.crowdin.common import ListOptions, OrderedListOptions
from crowdin_api.models.crowdin.fields import FieldEntity, FieldsListOptions, FieldType
from crowdin_api.models.crowdin.projects import ProjectsListOptions
from crowdin_api.models.crowdin.teams import TeamsListOptions
from crowdin_api.sources.client.crowdin.query import encode_query, query_pairs, with_query


class TestEncodeQuery:
    """Encoding options into a canonical query string."""

    def test_none_encodes_to_empty_string(self):
        assert encode_query(None) == ""

    def test_all_absent_fields_encode_to_empty_string(self):
        assert encode_query(ListOptions()) == ""
        assert encode_query(ProjectsListOptions()) == ""
        assert encode_query({}) == ""

    def test_pagination(self):
        assert encode_query(ListOptions(limit=25, offset=10)) == "limit=25&offset=10"

    def test_keys_are_sorted(self):
        options = ProjectsListOptions(user_id=7, order_by="name", limit=5)
        assert encode_query(options) == "limit=5&orderBy=name&userId=7"

    def test_encoding_is_repeatable(self):
        options = TeamsListOptions(search="core", project_ids=[3, 1, 2], order_by="name desc", offset=50)
        first = encode_query(options)
        second = encode_query(options)
        assert first == second
        assert first == "offset=50&orderBy=name+desc&projectIds=3%2C1%2C2&search=core"

    def test_order_by_uses_wire_name(self):
        options = OrderedListOptions(order_by="createdAt desc,name")
        assert encode_query(options) == "orderBy=createdAt+desc%2Cname"

    def test_list_values_are_comma_joined_then_escaped(self):
        options = TeamsListOptions(project_ids=[1, 2, 3], language_ids=["uk", "de"])
        assert encode_query(options) == "languageIds=uk%2Cde&projectIds=1%2C2%2C3"

    def test_empty_list_is_omitted(self):
        assert encode_query(TeamsListOptions(project_ids=[])) == ""

    def test_enum_values_encode_as_their_value(self):
        options = FieldsListOptions(entity=FieldEntity.PROJECT, type=FieldType.TEXT)
        assert encode_query(options) == "entity=project&type=text"

    def test_mapping_options(self):
        assert encode_query({"stringIds": [4, 5], "empty": "", "zero": 0}) == "stringIds=4%2C5"

    @pytest.mark.parametrize("zero", [0, 0.0, -0.0, Decimal("0.00")])
    def test_numeric_zero_is_omitted(self, zero):
        assert encode_query({"minScore": zero, "limit": 5}) == "limit=5"

    def test_non_zero_float(self):
        assert encode_query({"minScore": 0.5}) == "minScore=0.5"

    def test_booleans(self):
        assert encode_query({"force": True}) == "force=true"
        assert encode_query({"force": False}) == ""

    def test_unsupported_options_type(self):
        with pytest.raises(TypeError):
            encode_query(["limit", 10])


class TestRestrictedFilters:
    """Integer filters that only accept a fixed set of values."""

    @pytest.mark.parametrize("value", [100, -1, 2])
    def test_out_of_range_value_is_dropped(self, value):
        assert encode_query(ProjectsListOptions(type=value)) == ""
        assert encode_query(ProjectsListOptions(has_manager_access=value)) == ""

    def test_zero_is_sent_when_allowed(self):
        assert encode_query(ProjectsListOptions(type=0)) == "type=0"

    def test_allowed_values_are_sent(self):
        options = ProjectsListOptions(type=1, has_manager_access=0, limit=10)
        assert query_pairs(options) == [("hasManagerAccess", "0"), ("limit", "10"), ("type", "1")]

    def test_dropped_filter_keeps_other_fields(self):
        options = ProjectsListOptions(type=100, offset=20)
        assert encode_query(options) == "offset=20"


class TestWithQuery:

    def test_no_options_leaves_path_alone(self):
        assert with_query("/api/v2/projects", None) == "/api/v2/projects"
        assert with_query("/api/v2/projects", ListOptions()) == "/api/v2/projects"

    def test_appends_query(self):
        assert with_query("/api/v2/projects", ListOptions(limit=1)) == "/api/v2/projects?limit=1"

    def test_extends_existing_query(self):
        assert with_query("/api/v2/x?a=1", {"b": 2}) == "/api/v2/x?a=1&b=2"
