"""Recursive-descent parser for fcalc (see fcalc/core/syntax.py for the grammar).

A single lookahead character selects each production, so there is no backtracking. Names are checked while parsing:
a bare identifier must be in the current scope, and a call must name a function whose arity is already known. Because
a function's name is registered before its body is parsed, functions may call themselves and any function defined on
an earlier line, but not one defined on a later line.
"""

from fcalc.core.arithmetic import wrap
from fcalc.core.cursor import Cursor
from fcalc.core.syntax import BinaryOp, Call, Conditional, Const, FunctionDefinition, Identifier
from fcalc.lang.error import ParseError


def _describe(char):
    return "end of line" if char == Cursor.EOL else f"'{char}'"


def _fail(cursor, msg, pos=None):
    raise ParseError(msg, cursor.text, start=cursor.pos if pos is None else pos, line=cursor.line)


def expect(cursor, char):
    """Consumes the next character, raising a ParseError unless it is char."""
    pos = cursor.pos
    found = cursor.advance()
    if found != char:
        _fail(cursor, f"expected '{char}', found {_describe(found)}", pos)


def expect_end(cursor):
    """Raises a ParseError if anything is left on the line."""
    if not cursor.at_end:
        _fail(cursor, f"expected end of line, found {_describe(cursor.peek())}")


def parse_identifier(cursor):
    """Parses one or more letters into an Identifier."""
    start = cursor.pos
    while cursor.peek().isalpha():
        cursor.advance()

    if cursor.pos == start:
        _fail(cursor, f"expected identifier, found {_describe(cursor.peek())}")
    return Identifier(cursor.text[start:cursor.pos])


def parse_number(cursor):
    """Parses an integer literal with an optional leading '-'. Literals wrap like any other integer result."""
    sign = 1
    if cursor.peek() == "-":
        cursor.advance()
        sign = -1
        if not cursor.peek().isdecimal():
            _fail(cursor, f"expected number, found {_describe(cursor.peek())}")

    value = 0
    while cursor.peek().isdecimal():
        value = wrap(value * 10 + int(cursor.advance()))
    return Const(wrap(sign * value))


def parse_expression(cursor, scope, arities):
    """Parses one expression starting at cursor. scope is the set of Identifiers that may be referenced and arities
    maps each callable function's Identifier to its parameter count.
    """
    char = cursor.peek()

    if char == "-" or char.isdecimal():
        return parse_number(cursor)

    if char == "[":
        cursor.advance()
        condition = parse_expression(cursor, scope, arities)
        expect(cursor, "]")
        expect(cursor, "?")
        expect(cursor, "(")
        when_true = parse_expression(cursor, scope, arities)
        expect(cursor, ")")
        expect(cursor, ":")
        expect(cursor, "(")
        when_false = parse_expression(cursor, scope, arities)
        expect(cursor, ")")
        return Conditional(condition, when_true, when_false)

    if char == "(":
        cursor.advance()
        left = parse_expression(cursor, scope, arities)

        op_pos = cursor.pos
        operator = cursor.advance()
        if operator == "=" and cursor.peek() == "=":
            operator += cursor.advance()
        if operator not in BinaryOp.OPERATORS:
            msg = "unexpected end of line" if operator == Cursor.EOL else f"unexpected operator '{operator}'"
            _fail(cursor, msg, op_pos)

        right = parse_expression(cursor, scope, arities)
        expect(cursor, ")")
        return BinaryOp(op_pos, cursor.line, operator, left, right)

    if char.isalpha():
        start = cursor.pos
        name = parse_identifier(cursor)

        if cursor.peek() == "(":
            if name not in arities:
                _fail(cursor, f"unknown function '{name}'", start)
            return _parse_arguments(cursor, name, scope, arities)

        if name not in scope:
            _fail(cursor, f"unknown identifier '{name}'", start)
        return name

    if char == Cursor.EOL:
        _fail(cursor, "unexpected end of line")
    _fail(cursor, f"unexpected character {_describe(char)}")


def _parse_arguments(cursor, name, scope, arities):
    """Parses the parenthesized argument list of a call to name: exactly arity expressions separated by commas."""
    arity = arities[name]
    msg = f"malformed argument list: '{name}' takes {arity} argument{'' if arity == 1 else 's'}"

    cursor.advance()  # (
    arguments = []
    for idx in range(arity):
        if idx and cursor.peek() != ",":
            _fail(cursor, f"{msg}, found {_describe(cursor.peek())}")
        elif idx:
            cursor.advance()
        arguments.append(parse_expression(cursor, scope, arities))

    if cursor.peek() != ")":
        _fail(cursor, f"{msg}, found {_describe(cursor.peek())}")
    cursor.advance()

    return Call(name, tuple(arguments))


def parse_function_definition(cursor, arities):
    """Parses `name(params)={body}` (optionally followed by a '$' terminator) up to the end of the line. The
    function's arity is added to arities before its body is parsed, which makes recursive calls legal. arities is
    modified in place even if the body later fails to parse.
    """
    name_pos = cursor.pos
    name = parse_identifier(cursor)
    if name in arities:
        _fail(cursor, f"duplicate definition of function '{name}'", name_pos)

    expect(cursor, "(")
    parameters = []
    if cursor.peek() != ")":
        parameters.append(parse_identifier(cursor))
        while cursor.peek() == ",":
            cursor.advance()
            param_pos = cursor.pos
            param = parse_identifier(cursor)
            if param in parameters:
                _fail(cursor, f"duplicate parameter '{param}'", param_pos)
            parameters.append(param)

    expect(cursor, ")")
    expect(cursor, "=")
    expect(cursor, "{")

    arities[name] = len(parameters)
    body = parse_expression(cursor, frozenset(parameters), arities)

    expect(cursor, "}")
    if cursor.peek() == "$":
        cursor.advance()
    expect_end(cursor)

    return FunctionDefinition(name, tuple(parameters), body)
