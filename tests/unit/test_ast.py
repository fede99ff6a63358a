"""Tests for query nodes and builders."""

from __future__ import annotations

import pytest

from odatasql.ast.builder import (
    QueryOptionsBuilder,
    and_,
    any_,
    eq,
    func,
    it,
    lit,
    not_,
    or_,
    prop,
)
from odatasql.ast.nodes import (
    IT,
    BinaryOperator,
    BinaryOperatorKind,
    Constant,
    FunctionCall,
    OrderByClause,
    OrderByDirection,
    PropertyAccess,
    Quantifier,
    QuantifierKind,
    RangeVariableReference,
    UnaryOperatorKind,
)


class TestConstant:
    def test_string_constant(self) -> None:
        c = Constant.string("it's")
        assert c.literal_text == "'it''s'"
        assert c.value == "it's"
        assert c.is_enum is False

    def test_number_constant(self) -> None:
        assert Constant.number(42).literal_text == "42"
        assert Constant.number(42).type_name == "Edm.Int32"
        assert Constant.number(1.5).type_name == "Edm.Double"

    def test_null_constant(self) -> None:
        assert Constant.null().value is None

    def test_boolean_constant(self) -> None:
        assert Constant.boolean(False).literal_text == "false"

    def test_enum_constant(self) -> None:
        c = Constant.enum("NS.Color", "Red")
        assert c.literal_text == "NS.Color'Red'"
        assert c.type_name == "NS.Color"
        assert c.is_enum is True

    def test_frozen_dataclass(self) -> None:
        c = Constant.number(1)
        with pytest.raises(AttributeError):
            c.literal_text = "2"  # type: ignore[misc]

    def test_value_is_required(self) -> None:
        with pytest.raises(TypeError):
            Constant(literal_text="5")  # type: ignore[call-arg]


class TestFunctionCall:
    def test_arguments_are_a_tuple(self) -> None:
        call = func("concat", prop("First"), prop("Last"))
        assert call.arguments == (prop("First"), prop("Last"))

    def test_hashable(self) -> None:
        call = func("contains", prop("Name"), lit("x"))
        assert hash(call) == hash(func("contains", prop("Name"), lit("x")))
        assert len({call, FunctionCall(name="now")}) == 2


class TestOrderByClause:
    def test_chain_keeps_declaration_order(self) -> None:
        clause = OrderByClause.chain(
            (prop("a"), OrderByDirection.ASCENDING),
            (prop("b"), OrderByDirection.DESCENDING),
            (prop("c"), OrderByDirection.ASCENDING),
        )
        names = [item.expression.name for item in clause]  # type: ignore[union-attr]
        assert names == ["a", "b", "c"]
        assert clause.then_by is not None
        assert clause.then_by.direction == OrderByDirection.DESCENDING

    def test_single_item_chain(self) -> None:
        clause = OrderByClause.chain((prop("a"), OrderByDirection.DESCENDING))
        assert clause.then_by is None
        assert len(list(clause)) == 1

    def test_empty_chain_rejected(self) -> None:
        with pytest.raises(ValueError):
            OrderByClause.chain()


class TestBuilderHelpers:
    def test_prop_defaults_to_root(self) -> None:
        p = prop("Name")
        assert p == PropertyAccess(name="Name", source=RangeVariableReference(name=IT))

    def test_lit_dispatches_on_type(self) -> None:
        assert lit(None) == Constant.null()
        assert lit(True) == Constant.boolean(True)
        assert lit(3) == Constant.number(3)
        assert lit("x") == Constant.string("x")

    def test_and_is_left_associative(self) -> None:
        a, b, c = prop("a"), prop("b"), prop("c")
        result = and_(a, b, c)
        assert isinstance(result, BinaryOperator)
        assert result.operator == BinaryOperatorKind.AND
        assert result.right == c
        assert result.left == BinaryOperator(BinaryOperatorKind.AND, a, b)

    def test_single_operand_fold(self) -> None:
        assert or_(prop("a")) == prop("a")

    def test_empty_fold_rejected(self) -> None:
        with pytest.raises(ValueError):
            and_()

    def test_not(self) -> None:
        assert not_(prop("a")).operator == UnaryOperatorKind.NOT

    def test_parameterless_any(self) -> None:
        q = any_(prop("Tags"))
        assert isinstance(q, Quantifier)
        assert q.kind == QuantifierKind.ANY
        assert q.range_variable is None
        assert isinstance(q.body, Constant)


class TestQueryOptionsBuilder:
    def test_empty(self) -> None:
        options = QueryOptionsBuilder().build()
        assert options.filter is None
        assert options.order_by is None
        assert options.select is None
        assert options.top is None
        assert options.search is None
        assert options.has_positive_top is False

    def test_full_options(self) -> None:
        options = (
            QueryOptionsBuilder()
            .select("Name", "Price")
            .where(eq(prop("Name"), lit("x")))
            .where(eq(prop("Price"), lit(5)))
            .order_by(prop("Price"), desc=True)
            .order_by(prop("Name"))
            .top(10)
            .build()
        )
        assert options.select == "Name,Price"
        assert isinstance(options.filter, BinaryOperator)
        assert options.filter.operator == BinaryOperatorKind.AND
        assert options.order_by is not None
        assert [i.direction for i in options.order_by] == [
            OrderByDirection.DESCENDING,
            OrderByDirection.ASCENDING,
        ]
        assert options.has_positive_top is True

    def test_zero_top_is_not_positive(self) -> None:
        assert QueryOptionsBuilder().top(0).build().has_positive_top is False

    def test_root_reference(self) -> None:
        assert it().name == IT
