"""
Unit tests for SQL core utilities: vocabulary, identifiers, placeholders, rendering.
"""

import pytest

from querier.sql.core.identifier import render_field_list, strip_table_prefix
from querier.sql.core.parameters import (
    build_placeholders,
    count_placeholders,
    merge_params,
)
from querier.sql.core.query import Query
from querier.sql.core.render import (
    render_aggregations,
    render_joins,
    render_predicate,
    render_where,
)
from querier.sql.core.vocabulary import (
    COUNT,
    JoinType,
    Operator,
    OrderByType,
    StatementKind,
    coerce_token,
)
from querier.sql.exceptions import QueryBuildError, UnknownTokenError


@pytest.mark.unit
class TestVocabulary:
    """Tests for the closed token vocabulary."""

    def test_statement_keywords(self):
        """Statement kinds carry their leading keyword."""
        assert StatementKind.INSERT.value == "INSERT INTO"
        assert StatementKind.SELECT.value == "SELECT"
        assert StatementKind.UPDATE.value == "UPDATE"
        assert StatementKind.DELETE.value == "DELETE"

    def test_operator_tokens(self):
        """Operators map to SQL tokens."""
        assert [op.value for op in Operator] == [
            "<>", "=", "<=", "<", ">=", ">", "NOT IN", "IN", "LIKE",
        ]

    def test_count_field(self):
        assert COUNT == "COUNT(*)"

    def test_coerce_member_passthrough(self):
        """Enum members are returned unchanged."""
        assert coerce_token(Operator, Operator.LIKE) is Operator.LIKE

    def test_coerce_token_string(self):
        """Token strings resolve case- and whitespace-insensitively."""
        assert coerce_token(Operator, "not  in") is Operator.NOT_IN
        assert coerce_token(JoinType, "left") is JoinType.LEFT
        assert coerce_token(OrderByType, "DESC") is OrderByType.DESC

    def test_coerce_unknown_token(self):
        """Tokens outside the vocabulary raise UnknownTokenError."""
        with pytest.raises(UnknownTokenError) as exc_info:
            coerce_token(Operator, "BETWEEN")

        assert exc_info.value.category == "Operator"
        assert exc_info.value.token == "BETWEEN"
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, QueryBuildError)

    def test_coerce_rejects_other_enum(self):
        """A member of another vocabulary enum is not accepted."""
        with pytest.raises(UnknownTokenError):
            coerce_token(JoinType, OrderByType.ASC)

    def test_error_to_dict(self):
        """Errors convert to structured dicts for logging."""
        data = UnknownTokenError("JoinType", "OUTER").to_dict()

        assert data["error_type"] == "UnknownTokenError"
        assert data["category"] == "JoinType"
        assert data["token"] == "'OUTER'"
        assert "OUTER" in data["message"]


@pytest.mark.unit
class TestStripTablePrefix:
    """Tests for strip_table_prefix."""

    def test_strips_own_table(self):
        assert strip_table_prefix("users.name", "users") == "name"

    def test_keeps_other_table(self):
        """Fields qualified with another table are untouched."""
        assert strip_table_prefix("products.name", "users") == "products.name"

    def test_unqualified(self):
        assert strip_table_prefix("name", "users") == "name"

    def test_strips_only_once(self):
        """Only the single leading qualifier is removed."""
        assert strip_table_prefix("users.users.name", "users") == "users.name"

    def test_prefix_must_be_leading(self):
        """A qualifier in the middle of the name is not stripped."""
        assert strip_table_prefix("x_users.name", "users") == "x_users.name"


@pytest.mark.unit
class TestRenderFieldList:
    """Tests for render_field_list."""

    def test_empty_is_star(self):
        assert render_field_list(None) == "*"
        assert render_field_list([]) == "*"

    def test_order_preserved(self):
        assert render_field_list(["b", "a", COUNT]) == "b, a, COUNT(*)"

    def test_qualifier_stripped_with_table(self):
        assert render_field_list(["users.name", "status"], table="users") == "name, status"


@pytest.mark.unit
class TestParameters:
    """Tests for placeholder helpers."""

    def test_build_placeholders(self):
        assert build_placeholders(3) == "?,?,?"
        assert build_placeholders(1) == "?"
        assert build_placeholders(0) == ""

    def test_build_placeholders_separator(self):
        assert build_placeholders(3, separator=", ") == "?, ?, ?"

    def test_count_placeholders(self):
        assert count_placeholders("a = ? AND b IN (?,?)") == 3

    def test_merge_params_returns_new_list(self):
        """Merged params keep group order and do not alias inputs."""
        first = [1]
        merged = merge_params(first, ["x"], [])

        assert merged == [1, "x"]
        merged.append(2)
        assert first == [1]


@pytest.mark.unit
class TestRender:
    """Tests for clause rendering helpers."""

    def test_predicate_single_value(self):
        assert render_predicate("users.id", Operator.EQUAL, 1) == "users.id = ?"

    def test_predicate_many_values(self):
        assert render_predicate("users.id", Operator.NOT_IN, 2) == "users.id NOT IN (?,?)"

    def test_predicate_no_values(self):
        assert render_predicate("users.id", Operator.IN, 0) == "users.id IN"

    def test_where_empty(self):
        assert render_where([]) == ""

    def test_where_and_joined(self):
        assert render_where(["a = ?", "b = ?"]) == " WHERE a = ? AND b = ?"

    def test_aggregations(self):
        assert render_aggregations([]) == ""
        assert render_aggregations(["LIMIT ?", "ORDER BY id ASC"]) == " LIMIT ? ORDER BY id ASC"

    def test_joins_concatenated(self):
        assert render_joins([" INNER JOIN a", " LEFT JOIN b"]) == " INNER JOIN a LEFT JOIN b"


@pytest.mark.unit
class TestQuery:
    """Tests for the Query accumulator."""

    def test_starts_empty(self):
        query = Query("users")

        assert query.table == "users"
        assert query.where == [] and query.params == []
        assert query.joins == [] and query.sets == [] and query.set_params == []
        assert query.aggregations == [] and query.aggregation_params == []

    def test_table_read_only(self):
        """The target table cannot be reassigned."""
        query = Query("users")
        with pytest.raises(AttributeError):
            query.table = "products"

    def test_apply_in_order(self):
        """Options run in the order given."""
        calls = []
        query = Query("users").apply([lambda q: calls.append(1), lambda q: calls.append(2)])

        assert calls == [1, 2]
        assert isinstance(query, Query)
