"""
Finite-state tokenizer for lookup paths.

A path such as ``$.store.book[?(@.price > 10)].title`` is split into the
textual segment tokens ``["$", "store", "book[?(@.price > 10)]", "title"]``.
Separators produce no token, ``..`` produces a ``*`` token and bracket
content is kept verbatim. Indices of tokens that came from a complete quoted
member name are kept in ``Tokenizer.literal_indices``.
"""

from enum import Enum

from jsonlookup.exceptions import PathSyntaxError

ROOT_MARKERS = ("$", "@")
SCAN_TOKEN = "*"


class TokenizerState(Enum):
    """States of the path tokenizer."""

    NORMAL = "normal"
    IN_BRACKET = "in_bracket"
    IN_QUOTE = "in_quote"


class Tokenizer:
    """
    Tokenizer for a single path string.

    Each state has its own character handler; handlers append to the pending
    buffer, emit tokens and switch state. A tokenizer instance is single-use.
    """

    def __init__(self, path: str):
        self.path = path
        self.tokens: list[str] = []
        self.literal_indices: set[int] = set()
        self.state = TokenizerState.NORMAL

        self._buffer = ""
        self._quoted = False
        self._literal = False
        self._after_dot = False
        self._depth = 0
        self._open_position = 0

        self._handlers = {
            TokenizerState.NORMAL: self._handle_normal,
            TokenizerState.IN_BRACKET: self._handle_bracket,
            TokenizerState.IN_QUOTE: self._handle_quote,
        }

    def tokenize(self) -> list[str]:
        """
        Split the path into segment tokens.

        Returns:
            Ordered list of token strings, the root marker first

        Raises:
            PathSyntaxError: If the path does not start with a root marker or
                leaves a bracket open
        """
        if not self.path:
            raise PathSyntaxError(self.path, "path is empty", 0)
        if self.path[0] not in ROOT_MARKERS:
            raise PathSyntaxError(self.path, "path should start with '$' or '@'", 0)

        self.tokens.append(self.path[0])
        for position in range(1, len(self.path)):
            self._handlers[self.state](self.path[position], position)

        self._finish()
        return self.tokens

    def _emit(self, token: str, literal: bool = False) -> None:
        if literal:
            self.literal_indices.add(len(self.tokens))
        elif token == SCAN_TOKEN and self.tokens[-1] == SCAN_TOKEN:
            # Runs of wildcards collapse to a single scan token
            return
        self.tokens.append(token)

    def _flush(self) -> None:
        if self._buffer or self._quoted:
            self._emit(self._buffer, self._literal)
        self._buffer = ""
        self._quoted = False
        self._literal = False

    def _handle_normal(self, char: str, position: int) -> None:
        if char == ".":
            if self._buffer or self._quoted:
                self._flush()
            elif self._after_dot:
                self._emit(SCAN_TOKEN)
            self._after_dot = True
            return

        self._after_dot = False
        self._literal = False
        if char == "[":
            self.state = TokenizerState.IN_BRACKET
            self._depth = 1
            self._open_position = position
            self._buffer += char
        elif char == '"' and not self._buffer and not self._quoted:
            self.state = TokenizerState.IN_QUOTE
            self._open_position = position
        else:
            self._buffer += char

    def _handle_bracket(self, char: str, position: int) -> None:
        escaped = self._buffer.endswith("\\")
        self._buffer += char
        if escaped:
            return

        if char == "[":
            self._depth += 1
        elif char == "]":
            self._depth -= 1
            if self._depth == 0:
                self.state = TokenizerState.NORMAL
                self._flush()

    def _handle_quote(self, char: str, position: int) -> None:
        if char == '"':
            self.state = TokenizerState.NORMAL
            self._quoted = True
            self._literal = True
        else:
            self._buffer += char

    def _finish(self) -> None:
        if self.state is TokenizerState.IN_BRACKET:
            raise PathSyntaxError(self.path, "unmatched '['", self._open_position)
        if self.state is TokenizerState.IN_QUOTE:
            # Unterminated quotes pass through with their opening quote
            self._emit('"' + self._buffer)
            self._buffer = ""
            return
        self._flush()


def tokenize(path: str) -> list[str]:
    """
    Split a path string into segment tokens.

    Params:
        path: Path string starting with '$' or '@'

    Returns:
        Ordered list of token strings

    Raises:
        PathSyntaxError: If the path is malformed
    """
    return Tokenizer(path).tokenize()
