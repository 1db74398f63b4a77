"""Tree-walking evaluator for fcalc syntax trees. See fcalc/core/arithmetic.py for the integer semantics."""

from fcalc.core.arithmetic import apply
from fcalc.core.syntax import BinaryOp, Call, Conditional, Const, Identifier
from fcalc.lang.error import EvalError


def evaluate(node, environment, functions):
    """Returns the integer value of node. environment maps the Identifiers in scope to their values and functions maps
    function Identifiers to FunctionDefinitions. Raises an EvalError if a BinaryOp faults.

    Names are resolved by the parser, so a missing identifier or function raises KeyError: it can only be caused by a
    tree that did not come from the parser with the same tables.
    """
    if isinstance(node, Const):
        return node.value

    if isinstance(node, Identifier):
        return environment[node]

    if isinstance(node, BinaryOp):
        left = evaluate(node.left, environment, functions)
        right = evaluate(node.right, environment, functions)
        try:
            return apply(node.operator, left, right)
        except ArithmeticError as exc:
            raise EvalError(node.pos, node.line, exc) from exc

    if isinstance(node, Conditional):
        condition = evaluate(node.condition, environment, functions)
        return evaluate(node.when_true if condition != 0 else node.when_false, environment, functions)

    if isinstance(node, Call):
        function = functions[node.function]
        # callee sees only its own parameters, never the caller's bindings
        frame = {param: evaluate(arg, environment, functions)
                 for param, arg in zip(function.parameters, node.arguments)}
        return evaluate(function.body, frame, functions)

    raise TypeError(f"cannot evaluate {type(node).__name__}")
