"""Flag arity: how many tokens following a flag belong to it."""
from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, Sequence

from nixshim.core.exceptions import MalformedArgumentsError


class Arity(Enum):
    """Number of trailing tokens a flag consumes.

    ``TERMINAL`` flags consume nothing; their presence means the invocation
    already names its own command (or only asks for help/version output).
    """

    ZERO = 0
    ONE = 1
    TWO = 2
    TERMINAL = "terminal"

    @property
    def consumes(self) -> int:
        if self is Arity.TERMINAL:
            return 0
        return int(self.value)


def classify(table: Mapping[str, Arity], token: str) -> Optional[Arity]:
    """Return the arity of ``token`` in ``table``, or None when unrecognized.

    Matching is exact: no prefixes, and ``--flag=value`` is just an unknown token.
    """
    return table.get(token)


def take_values(args: Sequence[str], index: int, arity: Arity) -> list[str]:
    """Return the values belonging to the flag at ``args[index]``.

    Raises:
        MalformedArgumentsError: fewer than ``arity.consumes`` tokens remain.
    """
    count = arity.consumes
    available = len(args) - index - 1
    if available < count:
        raise MalformedArgumentsError(args[index], expected=count, available=available)
    return list(args[index + 1 : index + 1 + count])


__all__ = ["Arity", "classify", "take_values"]
