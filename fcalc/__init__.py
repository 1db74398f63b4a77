"""fcalc: interpreter for a tiny language of integer expressions and recursive functions.

For reference:
- "core": cursor, syntax tree, parser and evaluator (see fcalc/core)
- "lang": program driver, error handling and interactive shell (see fcalc/lang)

Basic program flow:
    1. Parser: reads each line through a Cursor and builds a syntax tree, checking names and call arities as it goes
        - All lines but the last are function definitions, the last line is the expression to evaluate
    2. Evaluator: walks the syntax tree of the last line, substituting arguments into function bodies
"""
