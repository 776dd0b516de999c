import re

from judge_errors import TokenExhausted, TokenParseError

# ASCII decimal digits only; unsigned tokens take no sign.
UNSIGNED_RE = re.compile(r'^[0-9]+$')
SIGNED_RE = re.compile(r'^[+-]?[0-9]+$')

UINT64_MAX = (1 << 64) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class TokenReader:
    """
    Sequential reader over the whitespace-delimited tokens of a text blob.

    Values are pulled strictly in order; every successful read advances the
    cursor by one token. There is no backtracking and no peeking.
    """

    def __init__(self, text: str | None):
        self._tokens: list[str] = (text or "").split()
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def total(self) -> int:
        return len(self._tokens)

    def remaining(self) -> int:
        return len(self._tokens) - self._pos

    def _next(self) -> str:
        if self._pos >= len(self._tokens):
            raise TokenExhausted(len(self._tokens))
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def get_uint(self) -> int:
        """Read an unsigned 64-bit integer."""
        token = self._next()
        if not UNSIGNED_RE.match(token):
            raise TokenParseError(token, "unsigned integer")
        value = int(token)
        if value > UINT64_MAX:
            raise TokenParseError(token, "unsigned integer")
        return value

    def get_int(self) -> int:
        """Read a signed 64-bit integer (optional leading + or -)."""
        token = self._next()
        if not SIGNED_RE.match(token):
            raise TokenParseError(token, "integer")
        value = int(token)
        if not (INT64_MIN <= value <= INT64_MAX):
            raise TokenParseError(token, "integer")
        return value

    def get_string(self) -> str:
        return self._next()
