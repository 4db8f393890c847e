from __future__ import annotations

import pytest

from ezschdoc.record import (
    Record,
    normalize_attributes,
    normalize_name,
    parse_leading_int,
    parse_record_kind,
    records_from_blocks,
    tokenize,
)


def test_tokenize_returns_pairs_in_order() -> None:
    body = "|RECORD=4|Location.X=100|LOCATION.Y=200|Text=hello world"

    assert tokenize(body) == [
        ("RECORD", "4"),
        ("Location.X", "100"),
        ("LOCATION.Y", "200"),
        ("Text", "hello world"),
    ]


def test_tokenize_skips_text_outside_attribute_shape() -> None:
    assert tokenize("RECORD31|A=1||B=|C=x=y|=z") == [("A", "1"), ("C", "x=y")]


@pytest.mark.parametrize("body", ["", "no pipes here", "|", "|NAME="])
def test_tokenize_without_matches_is_empty(body: str) -> None:
    assert tokenize(body) == []


@pytest.mark.parametrize(
    "pairs",
    [
        [("RECORD", "1"), ("LIBREFERENCE", "RES_0603")],
        [("%UTF8%TEXT", "Ω"), ("TEXT", "Ohm"), ("Formula", "a=b")],
        [("X1", "10"), ("Y1", "20"), ("X1", "30")],
    ],
)
def test_tokenize_reads_back_joined_pairs(pairs: list[tuple[str, str]]) -> None:
    body = "".join(f"|{name}={value}" for name, value in pairs)

    assert tokenize(body) == pairs


def test_normalize_name_maps_percent_and_first_dot() -> None:
    assert normalize_name("%UTF8%Text") == "_utf8_text"
    assert normalize_name("Location.X") == "location_x"
    assert normalize_name("Location.X.Frac") == "location_x.frac"


def test_normalize_attributes_last_write_wins() -> None:
    attributes = normalize_attributes([("Location.X", "1"), ("LOCATION_X", "2"), ("Other", "3")])

    assert attributes == {"location_x": "2", "other": "3"}


@pytest.mark.parametrize(
    ("text", "expected"),
    [("12", 12), ("-7", -7), ("12.5", 12), (" 3abc", 3), ("abc", None), ("", None), (None, None)],
)
def test_parse_leading_int(text: str | None, expected: int | None) -> None:
    assert parse_leading_int(text) == expected


def test_parse_record_kind() -> None:
    assert parse_record_kind("|RECORD=215|OWNERINDEX=3") == 215
    assert parse_record_kind("|RECORD=x|A=1") is None
    assert parse_record_kind("|HEADER=Protel") is None


def test_records_from_blocks_skips_non_record_blocks_without_consuming_index() -> None:
    records = records_from_blocks(
        [
            "|HEADER=Protel for Windows",
            "|RECORD=31|SHEETSTYLE=1",
            "garbage",
            "|RECORD=1|LIBREFERENCE=RES",
        ]
    )

    assert [(r.kind, r.index) for r in records] == [(31, 0), (1, 1)]
    assert records[1].attributes == [("RECORD", "1"), ("LIBREFERENCE", "RES")]


def test_record_get_is_case_insensitive() -> None:
    record = Record.from_body(41, "|RECORD=41|OwnerIndex=5|ownerindex=6", 0)

    assert record.get("OWNERINDEX") == "6"
    assert record.get("missing", "x") == "x"
