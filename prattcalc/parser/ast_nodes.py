"""
Expression tree node definitions for PrattCalc.

The tree is a closed set of three immutable node types. Parentheses never
appear as nodes: grouping only changes the shape of the tree the parser
builds. Nodes compare structurally, so two parses of equivalent text are
equal.

Traversal goes through accept(visitor), which walks the tree bottom-up
with an explicit work list. A left-associative chain of thousands of terms
is as deep as it is long, so no consumer of the tree may recurse per node.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Tuple, Union

from ..lexer.tokens import TokenType, ARITHMETIC_OPERATORS, SYMBOLS

Number = Union[int, float]

class ASTVisitor(ABC):
    """
    Bottom-up visitor for expression trees.

    Each visit method receives the node together with the results already
    computed for its children, left before right.
    """

    @abstractmethod
    def visit_constant(self, node: 'Constant') -> Any:
        pass

    @abstractmethod
    def visit_unary(self, node: 'Unary', operand: Any) -> Any:
        pass

    @abstractmethod
    def visit_binary(self, node: 'Binary', left: Any, right: Any) -> Any:
        pass

class Expression(ABC):
    """Base class for expression nodes."""

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern), children first."""
        results: List[Any] = []
        pending: List[Tuple['Expression', bool]] = [(self, False)]

        while pending:
            node, expanded = pending.pop()
            children = node.children()
            if children and not expanded:
                pending.append((node, True))
                pending.extend((child, False) for child in reversed(children))
                continue

            split = len(results) - len(children)
            child_results = results[split:]
            del results[split:]
            results.append(node._visit(visitor, child_results))

        return results[0]

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass

    @abstractmethod
    def _visit(self, visitor: ASTVisitor, child_results: List[Any]) -> Any:
        pass

    def __str__(self) -> str:
        return self.accept(_CompactPrinter())

def _check_operator(operator: TokenType):
    if operator not in ARITHMETIC_OPERATORS:
        raise ValueError(f"{operator} is not an arithmetic operator")

@dataclass(frozen=True)
class Constant(Expression):
    """Numeric literal."""
    value: Number

    def children(self) -> List[Expression]:
        return []

    def _visit(self, visitor, child_results):
        return visitor.visit_constant(self)

@dataclass(frozen=True)
class Unary(Expression):
    """Prefix operator applied to a single operand."""
    operator: TokenType
    operand: Expression

    def __post_init__(self):
        _check_operator(self.operator)

    def children(self) -> List[Expression]:
        return [self.operand]

    def _visit(self, visitor, child_results):
        return visitor.visit_unary(self, *child_results)

@dataclass(frozen=True)
class Binary(Expression):
    """Infix operator applied to two operands."""
    left: Expression
    operator: TokenType
    right: Expression

    def __post_init__(self):
        _check_operator(self.operator)

    def children(self) -> List[Expression]:
        return [self.left, self.right]

    def _visit(self, visitor, child_results):
        return visitor.visit_binary(self, *child_results)

class _CompactPrinter(ASTVisitor):
    """Debug form with every node parenthesized: ((1+2)+3), (-(2^2))."""

    def visit_constant(self, node):
        return str(node.value)

    def visit_unary(self, node, operand):
        return f"({SYMBOLS[node.operator]}{operand})"

    def visit_binary(self, node, left, right):
        return f"({left}{SYMBOLS[node.operator]}{right})"
