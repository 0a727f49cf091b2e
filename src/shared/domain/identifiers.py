"""KSUID identifiers shared by every aggregate.

An ``Identifier`` wraps the 20 raw bytes of a KSUID: a 4-byte big-endian
timestamp (seconds since the KSUID epoch) followed by a 16-byte random
payload.  Externally it is rendered as a fixed-length, sortable, 27-character
base62 string.

- ``parse``: external string -> ``Identifier`` (raises ``InvalidIdentifier``).
- ``render``: ``Identifier`` -> canonical string (total).
- ``generate``: fresh, time-ordered ``Identifier``.
- ``parse_many``: batch variant, fails on the first bad entry.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Protocol

from ksuid import Ksuid, KsuidMs

from shared.domain.errors import InvalidIdentifier

KSUID_BYTES = 20
KSUID_TEXT_LENGTH = 27
BASE62_ALPHABET = frozenset(string.digits + string.ascii_uppercase + string.ascii_lowercase)


@dataclass(frozen=True, order=True)
class Identifier:
    """Immutable KSUID value.  Equality and ordering are by raw bytes."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != KSUID_BYTES:
            raise ValueError(f"KSUID must be {KSUID_BYTES} bytes, got {len(self.raw)}.")

    @property
    def created_at(self) -> datetime:
        """Timestamp component of the KSUID (second precision, UTC)."""
        return Ksuid.from_bytes(self.raw).datetime

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"Identifier({render(self)!r})"


class IdentifierGenerator(Protocol):
    """Source of fresh identifiers, injected into the inbound mappers."""

    def __call__(self) -> Identifier: ...


def generate() -> Identifier:
    """Return a fresh KSUID drawn from the process clock and entropy pool.

    The first payload byte carries the sub-second fraction of the creation
    time (1/256 s steps), so identifiers sort in creation order down to about
    4 ms.  The text and byte forms are plain KSUIDs.
    """
    return Identifier(bytes(KsuidMs()))


def render(identifier: Identifier) -> str:
    return str(Ksuid.from_bytes(identifier.raw))


def parse(text: str) -> Identifier:
    """Parse the canonical external form of an identifier.

    Raises:
        InvalidIdentifier: for anything that is not a 27-character base62
            string encoding a 160-bit value.
    """
    if not isinstance(text, str):
        cause: Exception = TypeError(
            f"Identifier must be a string, got {type(text).__name__}."
        )
        raise InvalidIdentifier(text, cause) from cause

    if len(text) != KSUID_TEXT_LENGTH:
        cause = ValueError(
            f"Identifier must be {KSUID_TEXT_LENGTH} characters, got {len(text)}."
        )
        raise InvalidIdentifier(text, cause) from cause

    if not BASE62_ALPHABET.issuperset(text):
        cause = ValueError("Identifier contains characters outside the base62 alphabet.")
        raise InvalidIdentifier(text, cause) from cause

    try:
        ksuid = Ksuid.from_base62(text)
    except (ValueError, OverflowError) as exc:
        raise InvalidIdentifier(text, exc) from exc

    return Identifier(bytes(ksuid))


def parse_many(texts: Iterable[str]) -> List[Identifier]:
    """Parse every entry; the first invalid one aborts the whole batch."""
    return [parse(text) for text in texts]
