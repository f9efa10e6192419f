from __future__ import annotations
from typing import Iterable, Tuple
from cosmic_ray.operators.operator import Operator
import parso
from parso.python import tree as pytree

# Bodies made only of these (or docstrings) are stubs: Protocol methods, abstract hooks.
_STUB_STATEMENTS = {"...", "pass"}


def _parse_suite(indent: str, statement: str) -> pytree.PythonNode:
    # parse a one-statement template and keep only its suite
    mod = parso.parse(f"def _():\n{indent}{statement}\n")
    return mod.children[0].children[-1]


def _body_indent(suite: pytree.PythonNode) -> str:
    # children[0] is the newline after ':', the first statement follows
    return " " * suite.children[1].start_pos[1]


def _is_stub(suite: pytree.PythonNode) -> bool:
    for stmt in suite.children:
        if stmt.type == "newline":
            continue
        if stmt.type != "simple_stmt":
            return False
        for part in stmt.children:
            if part.type in ("newline", "string"):
                continue
            code = part.get_code(include_prefix=False).strip()
            if code != ";" and code not in _STUB_STATEMENTS:
                return False
    return True


def _has_yield(func: pytree.Function) -> bool:
    return any(True for _ in func.iter_yield_exprs())


class XmtFunctionReturn(Operator):
    """Extreme mutation: replace a function/method body with 'return None'.

    Generators get an empty ('pass') body instead. Stub bodies
    ('...', 'pass', docstring only) get no mutation position.
    """

    def examples(self):  # -> Iterable[Tuple[str, str]]
        yield (
            "def total(self):\n    return round_money(subtotal)\n",
            "def total(self):\n    return None\n",
        )
        yield (
            "def scanned(self):\n    yield from self._scanned\n",
            "def scanned(self):\n    pass\n",
        )

    def mutation_positions(self, node) -> Iterable[Tuple[Tuple[int, int], Tuple[int, int]]]:
        # only parso Function nodes with a block body (no lambdas, no one-liners)
        if isinstance(node, pytree.Function):
            suite = node.children[-1]
            if isinstance(suite, pytree.PythonNode) and suite.type == "suite" and not _is_stub(suite):
                yield (suite.start_pos, suite.end_pos)

    def mutate(self, node, index):
        assert isinstance(node, pytree.Function)
        suite: pytree.PythonNode = node.children[-1]  # type: ignore[assignment]
        indent = _body_indent(suite)
        statement = "pass" if _has_yield(node) else "return None"

        new_children = list(node.children)
        new_children[-1] = _parse_suite(indent, statement)
        node.children = new_children
        return node
