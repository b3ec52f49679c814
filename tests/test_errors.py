"""Error handling tests."""

import pytest

from pycel2form import translate
from pycel2form._errors import (
    BindingError,
    ExpressionSyntaxError,
    InvalidIndexError,
    MaxDepthExceededError,
    UnresolvedReferenceError,
    UnsupportedExpressionError,
)


class TestUnsupportedShapes:
    @pytest.mark.parametrize(
        "expression",
        [
            "m.Attendance.size()",
            "size(m.Attendance)",
            "m.Count + 1",
            "m.Active == true",
            "!m.Active",
            "m.A ? m.B : m.C",
            "other.Name",
            '"text".Name',
            "[1, 2][0]",
        ],
    )
    def test_path_shapes(self, expression):
        with pytest.raises(UnsupportedExpressionError):
            translate(None, expression)

    @pytest.mark.parametrize(
        "expression",
        [
            "m.Rows[i + 1]",
            "m.Rows[-i]",
            "m.Rows[m.Order[0]]",
            "m.Rows[next(i)]",
            "m.Rows[i.get()]",
            "m.Rows[[1][0]]",
        ],
    )
    def test_index_argument_shapes(self, expression):
        with pytest.raises(UnsupportedExpressionError):
            translate(None, expression, variables={"i": 1})

    def test_conversion_takes_one_argument(self):
        with pytest.raises(UnsupportedExpressionError):
            translate(None, "m.Rows[int(1, 2)]")

    def test_internal_details_name_the_shape(self):
        with pytest.raises(UnsupportedExpressionError) as exc_info:
            translate(None, "m.Attendance.size()")
        assert "member_dot_arg" in exc_info.value.internal()
        assert "size" in exc_info.value.internal()

    def test_root_mismatch_message(self):
        with pytest.raises(UnsupportedExpressionError, match="rooted at the parameter"):
            translate(None, "x.Name")


class TestInvalidIndex:
    @pytest.mark.parametrize("expression", ['m.Rows["key"]', "m.Rows[true]", "m.Rows[1.5]", "m.Rows[null]"])
    def test_non_integer_constants(self, expression):
        with pytest.raises(InvalidIndexError):
            translate(None, expression)

    def test_non_integer_variable(self):
        with pytest.raises(InvalidIndexError):
            translate(None, "m.Rows[i]", variables={"i": "2"})

    def test_failed_conversion_wraps_cause(self):
        with pytest.raises(InvalidIndexError) as exc_info:
            translate(None, "m.Rows[int(s)]", variables={"s": "abc"})
        assert isinstance(exc_info.value.wrapped, ValueError)

    def test_uint_rejects_negative(self):
        with pytest.raises(InvalidIndexError):
            translate(None, "m.Rows[uint(i)]", variables={"i": -1})


class TestUnresolvedReferences:
    def test_unknown_variable(self):
        with pytest.raises(UnresolvedReferenceError, match="unresolved reference"):
            translate(None, "m.Rows[j]", variables={"i": 1})

    def test_unknown_property(self):
        with pytest.raises(UnresolvedReferenceError) as exc_info:
            translate(None, "m.Rows[i.Missing]", variables={"i": object()})
        assert "Missing" in exc_info.value.internal()

    def test_unknown_mapping_field(self):
        with pytest.raises(UnresolvedReferenceError):
            translate(None, "m.Rows[row.index]", variables={"row": {}})


class TestSyntaxErrors:
    def test_unparseable_expression(self):
        with pytest.raises(ExpressionSyntaxError) as exc_info:
            translate(None, "m.Attendance[@]")
        assert exc_info.value.wrapped is not None


class TestDepthLimit:
    def test_max_depth_exceeded(self):
        with pytest.raises(MaxDepthExceededError):
            translate(None, "m.A.B.C", max_depth=5)

    def test_default_depth_allows_long_chains(self):
        expression = "m." + ".".join(f"F{i}" for i in range(30))
        assert translate(None, expression).count(".") == 29

    def test_default_limit_stops_long_member_chain(self):
        expression = "m." + ".".join(f"F{i}" for i in range(150))
        with pytest.raises(MaxDepthExceededError):
            translate(None, expression)

    def test_default_limit_stops_nested_parentheses(self):
        with pytest.raises(MaxDepthExceededError):
            translate(None, "(" * 30 + "m" + ")" * 30)

    def test_index_argument_shares_depth_budget(self):
        chain = ".".join(f"F{i}" for i in range(20))
        assert translate(None, "m[((0))]", max_depth=60) == "[0]"
        with pytest.raises(MaxDepthExceededError):
            translate(None, f"m[((0))].{chain}", max_depth=60)


class TestDualMessaging:
    def test_user_message_is_sanitized(self):
        try:
            translate(None, "secret.Name")
        except BindingError as e:
            assert "secret" not in str(e)
            assert "secret" in e.internal()
