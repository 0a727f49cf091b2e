"""Closed string vocabularies (status enumerations).

Each vocabulary is a Django ``TextChoices`` whose values are the canonical
wire spellings.  Parsing is case-insensitive and otherwise exact: no
whitespace is stripped and unknown spellings are rejected.
"""

from __future__ import annotations

from typing import Iterable, List, Type, TypeVar

from django.db import models

from shared.domain.errors import InvalidEnumValue

TChoice = TypeVar("TChoice", bound=models.TextChoices)


def parse_choice(vocabulary: Type[TChoice], domain: str, raw: str) -> TChoice:
    """Return the member of ``vocabulary`` spelled ``raw``.

    Raises:
        InvalidEnumValue: if ``raw`` is not a string or not in the closed set.
    """
    if isinstance(raw, str) and raw.lower() in vocabulary.values:
        return vocabulary(raw.lower())
    error = InvalidEnumValue(domain, raw)
    raise error from error.cause


def parse_choices(
    vocabulary: Type[TChoice], domain: str, raws: Iterable[str]
) -> List[TChoice]:
    """Batch variant of ``parse_choice``; reports the first invalid entry."""
    return [parse_choice(vocabulary, domain, raw) for raw in raws]


def render_choice(member: models.TextChoices) -> str:
    return str(member.value)
