"""Documentation type phrases -> type expressions.

Grammar, tried in this order on every (sub)phrase::

    "Array of " <phrase>        -> <expr>[]   (parenthesized if <expr> is a union)
    <phrase> " or " <phrase>... -> <expr> | <expr> | ...
    <name>                      -> scalar alias or the name itself

Examples::

    parse_type("Array of String")            # 'string[]'
    parse_type("Integer or String")          # 'number | string'
    parse_type("Array of Array of PhotoSize")# 'PhotoSize[][]'
    parse_type("Array of A or B")            # '(A | B)[]'
"""

from __future__ import annotations

import re

ARRAY_PREFIX = "Array of "
ALTERNATION = " or "

_MARKUP = re.compile(r"<[^>]+>")

SCALARS: dict[str, str] = {
    "String": "string",
    "Boolean": "boolean",
    "True": "true",
    "Integer": "number",
    "Float number": "number",
    "Float": "number",
}


def parse_type(phrase: str) -> str:
    phrase = phrase.strip()

    if phrase.startswith(ARRAY_PREFIX):
        item = parse_type(phrase[len(ARRAY_PREFIX):])
        if _is_union(item):
            item = f"({item})"
        return f"{item}[]"

    if ALTERNATION in phrase:
        return " | ".join(parse_type(part) for part in phrase.split(ALTERNATION))

    name = _MARKUP.sub("", phrase).strip()
    return SCALARS.get(name, name)


def _is_union(expr: str) -> bool:
    """True when *expr* has a ``|`` outside parentheses."""
    depth = 0
    for char in expr:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "|" and depth == 0:
            return True
    return False


def is_ambiguous(phrase: str) -> bool:
    """True for ``Array of X or Y``: sequence of a union, or a union with a sequence?"""
    phrase = phrase.strip()
    return phrase.startswith(ARRAY_PREFIX) and ALTERNATION in phrase
