"""Restricted evaluator for custom quantity formulas.

Formulas are parsed with :mod:`ast` and walked against a whitelist: numeric
literals, arithmetic operators, parentheses, a handful of rounding helpers and
variable lookups in a fixed table. Anything else is rejected; nothing is ever
handed to ``eval``.

Accepted spellings::

    ceil(net_length / post_spacing) + 1
    ROUNDUP([Quantity] / [cap.length_feet])
    post_count * rail_count
"""

from __future__ import annotations

import ast
import math
import operator
import re
from collections.abc import Callable, Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from fencebom.exceptions import FormulaError

_BRACKET_VAR = re.compile(r"\[\s*([A-Za-z_][A-Za-z0-9_.]*)\s*\]")

_BINARY_OPS: dict[type[ast.operator], Callable[[float, float], float]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow,
}

_UNARY_OPS: dict[type[ast.unaryop], Callable[[float], float]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}


def _round_half_up(value: float, digits: float = 0) -> float:
    """Spreadsheet ROUND: halves go away from zero, not to even."""
    if not math.isfinite(value):
        return value
    exponent = Decimal(1).scaleb(-int(digits))
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))


_FUNCTIONS: dict[str, Callable[..., float]] = {
    "ceil": math.ceil,
    "floor": math.floor,
    "round": _round_half_up,
    "min": min,
    "max": max,
    "abs": abs,
    "roundup": math.ceil,
    "rounddown": math.floor,
}


class FormulaEvaluator:
    """Evaluates one formula against a fixed variable table.

    Variable names are matched case-sensitively first, then
    case-insensitively, so ``[Quantity]`` and ``quantity`` both work when the
    table defines either.
    """

    def __init__(self, variables: Mapping[str, float]) -> None:
        self._variables = dict(variables)
        self._folded = {name.lower(): value for name, value in variables.items()}

    def evaluate(self, formula: str, role: str | None = None) -> float:
        expression = _BRACKET_VAR.sub(r"\1", formula).strip()
        if not expression:
            msg = "Formula is empty"
            raise FormulaError(msg, role=role, formula=formula)

        try:
            tree = ast.parse(expression, mode="eval")
        except SyntaxError as exc:
            msg = f"Formula has invalid syntax: {exc.msg}"
            raise FormulaError(msg, role=role, formula=formula) from exc

        try:
            result = self._eval(tree.body, formula, role)
        except ZeroDivisionError as exc:
            msg = "Formula divides by zero"
            raise FormulaError(msg, role=role, formula=formula) from exc
        except OverflowError as exc:
            msg = "Formula overflowed"
            raise FormulaError(msg, role=role, formula=formula) from exc
        except (TypeError, ValueError, InvalidOperation) as exc:
            msg = f"Formula could not be evaluated: {exc}"
            raise FormulaError(msg, role=role, formula=formula) from exc

        if isinstance(result, bool) or not isinstance(result, (int, float)):
            msg = "Formula did not produce a number"
            raise FormulaError(msg, role=role, formula=formula)
        if not math.isfinite(result):
            msg = f"Formula produced a non-finite value ({result})"
            raise FormulaError(msg, role=role, formula=formula)
        return float(result)

    def _eval(self, node: ast.AST, formula: str, role: str | None) -> float:
        if isinstance(node, ast.Constant):
            if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
                msg = f"Unsupported literal {node.value!r}"
                raise FormulaError(msg, role=role, formula=formula)
            return float(node.value)

        if isinstance(node, ast.BinOp):
            op = _BINARY_OPS.get(type(node.op))
            if op is None:
                msg = f"Unsupported operator {type(node.op).__name__}"
                raise FormulaError(msg, role=role, formula=formula)
            return op(
                self._eval(node.left, formula, role),
                self._eval(node.right, formula, role),
            )

        if isinstance(node, ast.UnaryOp):
            unary = _UNARY_OPS.get(type(node.op))
            if unary is None:
                msg = f"Unsupported operator {type(node.op).__name__}"
                raise FormulaError(msg, role=role, formula=formula)
            return unary(self._eval(node.operand, formula, role))

        if isinstance(node, ast.Call):
            return self._call(node, formula, role)

        if isinstance(node, (ast.Name, ast.Attribute)):
            return self._lookup(_dotted_name(node, formula, role), formula, role)

        msg = f"Unsupported expression {type(node).__name__}"
        raise FormulaError(msg, role=role, formula=formula)

    def _call(self, node: ast.Call, formula: str, role: str | None) -> float:
        if not isinstance(node.func, ast.Name) or node.keywords:
            msg = "Only plain function calls are allowed"
            raise FormulaError(msg, role=role, formula=formula)
        name = node.func.id.lower()
        function = _FUNCTIONS.get(name)
        if function is None:
            msg = f"Unknown function '{node.func.id}'"
            raise FormulaError(msg, role=role, formula=formula)

        args = [self._eval(arg, formula, role) for arg in node.args]
        if name in {"min", "max"}:
            if not args:
                msg = f"{node.func.id} needs at least one argument"
                raise FormulaError(msg, role=role, formula=formula)
        elif name == "round":
            if len(args) not in (1, 2):
                msg = "round takes one or two arguments"
                raise FormulaError(msg, role=role, formula=formula)
        elif len(args) != 1:
            msg = f"{node.func.id} takes exactly one argument"
            raise FormulaError(msg, role=role, formula=formula)
        return function(*args)

    def _lookup(self, name: str, formula: str, role: str | None) -> float:
        if name in self._variables:
            return self._variables[name]
        folded = name.lower()
        if folded in self._folded:
            return self._folded[folded]
        msg = f"Unresolved variable '{name}'"
        raise FormulaError(msg, role=role, formula=formula)


def _dotted_name(node: ast.AST, formula: str, role: str | None) -> str:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return f"{_dotted_name(node.value, formula, role)}.{node.attr}"
    msg = "Only variable names may be dotted"
    raise FormulaError(msg, role=role, formula=formula)


def evaluate_formula(
    formula: str, variables: Mapping[str, float], role: str | None = None
) -> float:
    """Evaluate ``formula`` against ``variables``; raise FormulaError on failure."""
    return FormulaEvaluator(variables).evaluate(formula, role=role)
