"""
Parser for filter predicates.

A predicate is the text inside ``[?( ... )]``. It holds one to three
space-separated fields:

    @.isbn                       -> exists check
    @.price < 10                 -> comparison against a literal
    @.price <= $.expensive       -> comparison against another path
    @.author == 'Nigel Rees'     -> comparison against a quoted literal
"""

from functools import lru_cache

from attrs import frozen

from jsonlookup.exceptions import FilterSyntaxError

EXISTS = "exists"
MATCH = "=~"
COMPARISON_OPERATORS = ("<", "<=", "==", ">=", ">")
OPERATORS = (EXISTS, MATCH, *COMPARISON_OPERATORS)


@frozen
class Predicate:
    """
    Parsed filter predicate.

    The literal flags record whether an operand was written in single quotes;
    quoted operands are never resolved as paths.
    """

    left: str
    operator: str = EXISTS
    right: str = ""
    left_literal: bool = False
    right_literal: bool = False

    def __str__(self) -> str:
        left = f"'{self.left}'" if self.left_literal else self.left
        if self.operator == EXISTS:
            return left
        right = f"'{self.right}'" if self.right_literal else self.right
        return f"{left} {self.operator} {right}"


@lru_cache(maxsize=256)
def parse_predicate(text: str) -> Predicate:
    """
    Split a predicate into its left operand, operator and right operand.

    Params:
        text: Predicate text without the surrounding ?( and )

    Returns:
        Parsed Predicate; a single field becomes an exists check

    Raises:
        FilterSyntaxError: If the predicate is empty, has more than three
            fields, leaves a quote open or has an operator but no right operand
    """
    fields: list[tuple[str, bool]] = []
    buffer = ""
    in_quote = False
    quote_position = 0

    for position, char in enumerate(text):
        if in_quote:
            if char == "'":
                fields.append((buffer, True))
                buffer = ""
                in_quote = False
            else:
                buffer += char
        elif char == "'" and not buffer:
            in_quote = True
            quote_position = position
        elif char == " ":
            if buffer:
                fields.append((buffer, False))
                buffer = ""
        else:
            buffer += char

        if len(fields) > 3:
            raise FilterSyntaxError(text, "too many fields", position)

    if in_quote:
        raise FilterSyntaxError(text, "unterminated quote", quote_position)
    if buffer:
        fields.append((buffer, False))

    if not fields:
        raise FilterSyntaxError(text, "predicate is empty")
    if len(fields) > 3:
        raise FilterSyntaxError(text, "too many fields")
    if len(fields) == 2:
        raise FilterSyntaxError(text, f"operator '{fields[1][0]}' has no right operand")

    left, left_literal = fields[0]
    if len(fields) == 1:
        return Predicate(left, EXISTS, "", left_literal=left_literal)

    operator = fields[1][0]
    right, right_literal = fields[2]
    return Predicate(left, operator, right, left_literal, right_literal)
