"""Unit tests for KSUID identifiers.

Covers:
- parse/render round trip and canonical form.
- Rejection of wrong length, non-base62 characters, overflow, non-strings.
- generate: uniqueness, sub-second ordering, creation time, injectable
  generators.
- parse_many: first bad entry aborts the batch.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

import pytest

from shared.domain.errors import InvalidIdentifier, MappingError
from shared.domain.identifiers import (
    KSUID_BYTES,
    KSUID_TEXT_LENGTH,
    Identifier,
    generate,
    parse,
    parse_many,
    render,
)

pytestmark = pytest.mark.unit

VALID = "2N1yQqzh1fhkGEPv5rJRqOZqxE3"
OTHER = "0ujtsYcgvSTl8PAuAdqWYSMnLOv"
MAX_KSUID = "aWgEPTl1tmebfsQzFP4bxwgy80V"


class TestParse:
    def test_parses_canonical_text(self):
        identifier = parse(VALID)
        assert isinstance(identifier, Identifier)
        assert len(identifier.raw) == KSUID_BYTES

    def test_round_trip_from_text(self):
        assert render(parse(VALID)) == VALID
        assert render(parse(OTHER)) == OTHER

    def test_max_value_is_accepted(self):
        assert render(parse(MAX_KSUID)) == MAX_KSUID

    def test_equal_text_gives_equal_identifiers(self):
        assert parse(VALID) == parse(VALID)
        assert parse(VALID) != parse(OTHER)

    def test_str_is_canonical_form(self):
        assert str(parse(VALID)) == VALID


class TestParseRejects:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "2N1yQqzh1fhkGEPv5rJRqOZqxE",  # 26 chars
            "2N1yQqzh1fhkGEPv5rJRqOZqxE3A",  # 28 chars
            "not-a-ksuid",
        ],
    )
    def test_wrong_length(self, text):
        with pytest.raises(InvalidIdentifier) as exc_info:
            parse(text)
        assert exc_info.value.raw_input == text
        assert isinstance(exc_info.value.cause, ValueError)

    @pytest.mark.parametrize(
        "text",
        [
            "2N1yQqzh1fhkGEPv5rJRqOZqx-3",
            "2N1yQqzh1fhkGEPv5rJRqOZqx 3",
            "2N1yQqzh1fhkGEPv5rJRqOZqxé3",
        ],
    )
    def test_characters_outside_base62(self, text):
        assert len(text) == KSUID_TEXT_LENGTH
        with pytest.raises(InvalidIdentifier):
            parse(text)

    def test_value_above_160_bits(self):
        with pytest.raises(InvalidIdentifier) as exc_info:
            parse("zzzzzzzzzzzzzzzzzzzzzzzzzzz")
        assert exc_info.value.__cause__ is exc_info.value.cause

    @pytest.mark.parametrize("value", [None, 42, b"2N1yQqzh1fhkGEPv5rJRqOZqxE3"])
    def test_non_string_input(self, value):
        with pytest.raises(InvalidIdentifier) as exc_info:
            parse(value)
        assert isinstance(exc_info.value.cause, TypeError)

    def test_is_a_mapping_error(self):
        with pytest.raises(MappingError):
            parse("bad")


class TestGenerate:
    def test_round_trip(self):
        for _ in range(50):
            identifier = generate()
            assert parse(render(identifier)) == identifier

    def test_rendered_length(self):
        assert len(render(generate())) == KSUID_TEXT_LENGTH

    def test_fresh_identifiers_differ(self):
        assert len({generate() for _ in range(100)}) == 100

    def test_injected_generator(self, fixed_id_generator, fixed_id):
        assert fixed_id_generator() == fixed_id
        assert render(fixed_id) == VALID

    def test_sorts_in_creation_order_within_a_second(self):
        first = generate()
        time.sleep(0.02)
        second = generate()
        assert first < second
        assert render(first) < render(second)

    def test_created_at_is_now(self):
        created = generate().created_at.replace(tzinfo=timezone.utc)
        assert abs(datetime.now(timezone.utc) - created) < timedelta(seconds=5)


class TestIdentifierValue:
    def test_rejects_wrong_byte_length(self):
        with pytest.raises(ValueError):
            Identifier(b"\x00" * 19)

    def test_ordering_follows_bytes(self):
        low = Identifier(b"\x00" * KSUID_BYTES)
        high = Identifier(b"\xff" * KSUID_BYTES)
        assert low < high
        assert sorted([high, low]) == [low, high]

    def test_is_hashable(self):
        assert {parse(VALID): 1}[parse(VALID)] == 1

    def test_created_at_of_zero_timestamp_is_ksuid_epoch(self):
        created = Identifier(bytes(KSUID_BYTES)).created_at.replace(tzinfo=timezone.utc)
        assert created == datetime(2014, 5, 13, 16, 53, 20, tzinfo=timezone.utc)


class TestParseMany:
    def test_parses_every_entry(self):
        assert parse_many([VALID, OTHER]) == [parse(VALID), parse(OTHER)]

    def test_empty_batch(self):
        assert parse_many([]) == []

    def test_first_bad_entry_is_reported(self):
        with pytest.raises(InvalidIdentifier) as exc_info:
            parse_many([VALID, "first-bad", "second-bad"])
        assert exc_info.value.raw_input == "first-bad"
