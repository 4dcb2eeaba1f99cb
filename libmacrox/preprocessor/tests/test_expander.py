from collections.abc import Callable
from typing import TypeAlias

import pytest

from libmacrox.exceptions import ErrorKind
from libmacrox.preprocessor.config import get_max_reachable_expansion_depth
from libmacrox.preprocessor.errors import (
    ArgumentCountMismatchError,
    RecursionLimitExceededError,
    UnterminatedInvocationError,
)
from libmacrox.preprocessor.macros import MacrosRegistry
from libmacrox.preprocessor.macros.definitions import tokenize_macro_body

Expand: TypeAlias = Callable[..., str]


def test_expand_object_like_macro(expand: Expand) -> None:
    assert expand("PIE") == "3.14"
    assert expand("x = PIE;") == "x = 3.14;"


def test_expand_text_without_macros(expand: Expand) -> None:
    assert expand("a + b * (c, d)") == "a + b * (c, d)"


def test_expand_duplicates_side_effect_argument(expand: Expand) -> None:
    assert expand("SQR(++x)") == "((++x) * (++x))"


def test_expand_motivating_example(expand: Expand) -> None:
    assert expand("PIE * SQR(++radius)") == "3.14 * ((++radius) * (++radius))"


def test_expand_argument_is_substituted_for_each_occurrence(expand: Expand, macros: MacrosRegistry) -> None:
    macros.define("TRIPLE", ["p"], tokenize_macro_body("p + p + p"))
    assert expand("TRIPLE(i++)") == "i++ + i++ + i++"


def test_expand_argument_is_not_parenthesized(expand: Expand, macros: MacrosRegistry) -> None:
    macros.define("DOUBLE", ["x"], tokenize_macro_body("x * 2"))
    assert expand("DOUBLE(1 + 1)") == "1 + 1 * 2"


def test_expand_multiple_parameters(expand: Expand, macros: MacrosRegistry) -> None:
    macros.define("ADD", ["a", "b"], tokenize_macro_body("(a) + (b)"))
    assert expand("return ADD(3, 4);") == "return (3) + (4);"


def test_expand_rescans_substitution(expand: Expand) -> None:
    assert expand("AREA", AREA="PIE * R", R="2") == "3.14 * 2"


def test_expand_rescans_arguments_after_substitution(expand: Expand) -> None:
    assert expand("SQR(PIE)") == "((3.14) * (3.14))"


def test_expand_nested_invocations_in_arguments(expand: Expand, macros: MacrosRegistry) -> None:
    macros.define("INC", ["x"], tokenize_macro_body("(x) + 1"))
    macros.define("ADD", ["a", "b"], tokenize_macro_body("(a) + (b)"))
    assert expand("ADD(INC(1), INC(2))") == "((1) + 1) + ((2) + 1)"


def test_expand_nested_parentheses_argument(expand: Expand, macros: MacrosRegistry) -> None:
    macros.define("F", ["p"], tokenize_macro_body("(p)"))
    assert expand("F((1,2))") == "((1,2))"


def test_expand_function_like_name_without_arguments(expand: Expand) -> None:
    assert expand("SQR + 1") == "SQR + 1"
    assert expand("int SQR;") == "int SQR;"


def test_expand_self_reference(expand: Expand) -> None:
    assert expand("A", A="A + 1") == "A + 1"


def test_expand_self_reference_within_function_like_macro(expand: Expand, macros: MacrosRegistry) -> None:
    macros.define("F", ["x"], tokenize_macro_body("F(x) + 1"))
    assert expand("F(2)") == "F(2) + 1"


def test_expand_self_reference_guard_is_scoped_to_expansion(expand: Expand) -> None:
    assert expand("A A", A="A + 1") == "A + 1 A + 1"


def test_expand_indirect_mutual_recursion(expand: Expand) -> None:
    # Macros being expanded are tracked along whole chain, so indirect cycle is stopped too
    assert expand("A", A="B + 1", B="A * 2") == "A * 2 + 1"
    assert expand("B") == "B + 1 * 2"


def test_expand_argument_invoking_same_macro(expand: Expand) -> None:
    # Arguments are substituted raw and rescanned while macro is being expanded,
    # so same macro within its own argument is left as-is
    assert expand("SQR(SQR(2))") == "((SQR(2)) * (SQR(2)))"
    assert expand("SQR(PIE)") == "((3.14) * (3.14))"


def test_expand_function_like_name_produced_by_expansion(expand: Expand) -> None:
    # Only substitution alone is rescanned, arguments after invocation are not consumed
    assert expand("G(3)", G="SQR") == "SQR(3)"


def test_expand_empty_body(expand: Expand, macros: MacrosRegistry) -> None:
    macros.define("NOTHING", [], ())
    assert expand("a EMPTY b", EMPTY="") == "a b"
    assert expand("x NOTHING()y") == "x y"


def test_expand_keeps_line_structure(expand: Expand) -> None:
    text = "int r = PIE;\nreturn SQR(r);\n"
    assert expand(text) == "int r = 3.14;\nreturn ((r) * (r));\n"


def test_expand_argument_count_mismatch(expand: Expand) -> None:
    with pytest.raises(ArgumentCountMismatchError) as e:
        expand("SQR(1,2)")
    assert (e.value.expected, e.value.actual) == (1, 2)


def test_expand_argument_count_mismatch_within_expansion(expand: Expand) -> None:
    with pytest.raises(ArgumentCountMismatchError) as e:
        expand("WRAP", WRAP="SQR(1, 2)")
    assert e.value.macro_name == "SQR"
    assert e.value.location.source == "definition"


def test_expand_unterminated_invocation(expand: Expand) -> None:
    with pytest.raises(UnterminatedInvocationError) as e:
        expand("ok SQR(1")
    assert e.value.macro_name == "SQR"
    assert e.value.location.col_number == 3


def test_expand_recursion_limit(expand: Expand) -> None:
    chain = {"A1": "A2", "A2": "A3", "A3": "x"}
    assert expand("A1", max_expansion_depth=3, **chain) == "x"

    with pytest.raises(RecursionLimitExceededError) as e:
        expand("A1", max_expansion_depth=2)
    assert e.value.kind == ErrorKind.RECURSION_LIMIT_EXCEEDED
    assert e.value.macro_name == "A3"
    assert e.value.limit == 2


def test_expand_recursion_limit_at_deepest_reachable_depth(expand: Expand) -> None:
    depth = get_max_reachable_expansion_depth()
    chain = {f"M{i}": f"M{i + 1}" for i in range(depth + 1)}

    with pytest.raises(RecursionLimitExceededError) as e:
        expand("M0", max_expansion_depth=depth, **chain)
    assert e.value.macro_name == f"M{depth}"
    assert e.value.limit == depth
