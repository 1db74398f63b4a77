"""Syntax tree for fcalc. Formally, the grammar recognized by the parser is

```
<expr>     ::= <number>                                  ; "Const": optional "-" directly followed by digits
             | <name>                                    ; "Identifier": must be a parameter in scope
             | "(" <expr> <op> <expr> ")"                ; "BinaryOp"
             | "[" <expr> "]?(" <expr> "):(" <expr> ")"  ; "Conditional": nonzero condition selects first branch
             | <name> "(" [<expr> ("," <expr>)*] ")"     ; "Call": exactly as many arguments as the function declares

<op>       ::= "+" | "-" | "*" | "/" | "%" | ">" | "<" | "=="
<name>     ::= <letter>+

<function> ::= <name> "(" [<name> ("," <name>)*] ")={" <expr> "}"
```

No whitespace is allowed anywhere. Nodes are immutable and form a strict tree.
"""

from dataclasses import dataclass
from typing import Tuple

from fcalc.core import arithmetic


class Expression:
    """Superclass of every node that can appear in an expression."""


@dataclass(frozen=True)
class Const(Expression):
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class Identifier(Expression):
    """Name of a parameter or a function. Compared (and hashed) by name, so it doubles as an environment key."""
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class BinaryOp(Expression):
    """Operator applied to two operands. pos and line locate the operator for runtime error reports."""
    OPERATORS = tuple(arithmetic.OPERATORS)

    pos: int
    line: int
    operator: str
    left: Expression
    right: Expression

    def __str__(self):
        return f"({self.left}{self.operator}{self.right})"


@dataclass(frozen=True)
class Conditional(Expression):
    condition: Expression
    when_true: Expression
    when_false: Expression

    def __str__(self):
        return f"[{self.condition}]?({self.when_true}):({self.when_false})"


@dataclass(frozen=True)
class Call(Expression):
    function: Identifier
    arguments: Tuple[Expression, ...] = ()

    def __str__(self):
        return f"{self.function}({','.join(str(arg) for arg in self.arguments)})"


@dataclass(frozen=True)
class FunctionDefinition:
    name: Identifier
    parameters: Tuple[Identifier, ...]
    body: Expression

    @property
    def arity(self):
        return len(self.parameters)

    def __str__(self):
        return f"{self.name}({','.join(str(param) for param in self.parameters)})={{{self.body}}}"
