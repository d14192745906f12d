"""
CamelCased — Owned, length-carrying sequence of output tokens.

The sequence owns its tokens until it is released. Release happens through
``release()``, ``camelcaser.destroy()``, leaving a ``with`` block, or moving
the tokens out with ``take()``. Any later access raises ReleasedError.
"""

from collections.abc import Sequence
from typing import Any, Iterator, Optional, Union, overload

from camelcaser.core.errors import ReleasedError

Token = Union[bytes, str]


class CamelCased(Sequence):
    """
    Read-only sequence of camelCase tokens, one per sentence.

    Compares equal to any sequence holding the same tokens in order, so
    ``camel_caser(b"Hello.World.") == [b"hello", b"world"]`` holds.

    Example:
        >>> with camel_caser(b"Hello world. Bye now.") as tokens:
        ...     list(tokens)
        [b'helloWorld', b'byeNow']
    """

    def __init__(self, tokens: list[Token], request_id: Optional[str] = None):
        self._tokens: Optional[list[Token]] = list(tokens)
        self.request_id = request_id

    @property
    def released(self) -> bool:
        """True once the tokens have been released or taken."""
        return self._tokens is None

    def _live(self) -> list[Token]:
        if self._tokens is None:
            raise ReleasedError(details={"request_id": self.request_id})
        return self._tokens

    def __len__(self) -> int:
        return len(self._live())

    @overload
    def __getitem__(self, idx: int) -> Token: ...

    @overload
    def __getitem__(self, idx: slice) -> list[Token]: ...

    def __getitem__(self, idx: Union[int, slice]) -> Union[Token, list[Token]]:
        return self._live()[idx]

    def __iter__(self) -> Iterator[Token]:
        return iter(self._live())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, CamelCased):
            return self._live() == other._live()
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._live() == list(other)
        return NotImplemented

    __hash__ = None  # mutable owner, like list

    def __repr__(self) -> str:
        if self._tokens is None:
            return "CamelCased(<released>)"
        return f"CamelCased({self._tokens!r})"

    def to_null_terminated(self) -> list[Optional[Token]]:
        """Tokens followed by a None sentinel, for consumers that scan for the end."""
        return [*self._live(), None]

    def take(self) -> list[Token]:
        """
        Move the tokens out as a plain list.

        The sequence is released afterwards; the returned list belongs to
        the caller.
        """
        tokens = self._live()
        self._tokens = None
        return tokens

    def release(self) -> None:
        """
        Release every token and the sequence itself.

        Safe to call multiple times (idempotent).
        """
        if self._tokens is not None:
            self._tokens.clear()
            self._tokens = None

    def __enter__(self) -> "CamelCased":
        self._live()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit — calls release()."""
        self.release()
