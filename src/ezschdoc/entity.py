from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .errors import Diagnostic
from .record import Record, normalize_attributes, parse_leading_int

Point = tuple[int | None, int | None]

_REQUIRED = object()
_LEADING_FLOAT_PATTERN = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def decode_color(value: int | str | None) -> str:
    # 0x00BBGGRR -> "rrggbb"
    color = parse_leading_int(value) if isinstance(value, str) else value
    if color is None:
        color = 0
    return "".join(f"{(color >> shift) & 0xFF:02x}" for shift in (0, 8, 16))


def decode_fixed(integer: int, fraction: int = 0) -> float:
    return integer + fraction / 100_000


def parse_leading_float(text: str | None) -> float | None:
    if text is None:
        return None
    match = _LEADING_FLOAT_PATTERN.match(text)
    if match is None:
        return None
    return float(match.group(1))


# Omitting the default marks an attribute as required: missing or unparsable
# values then give None plus a diagnostic.
class AttributeReader:
    def __init__(self, attributes: dict[str, str], record_index: int, diagnostics: list[Diagnostic]) -> None:
        self.attributes = attributes
        self.record_index = record_index
        self.diagnostics = diagnostics

    def _missing(self, name: str) -> None:
        self.diagnostics.append(
            Diagnostic("missing-attribute", f"required attribute {name!r} is absent", self.record_index)
        )

    def _malformed(self, name: str, value: str) -> None:
        self.diagnostics.append(
            Diagnostic("malformed-attribute", f"attribute {name!r} has non-numeric value {value!r}", self.record_index)
        )

    def integer(self, name: str, default: Any = _REQUIRED) -> int | None:
        value = self.attributes.get(name)
        if value is None:
            if default is _REQUIRED:
                self._missing(name)
                return None
            return default
        parsed = parse_leading_int(value)
        if parsed is None:
            self._malformed(name, value)
        return parsed

    def number(self, name: str, default: Any = _REQUIRED) -> float | None:
        value = self.attributes.get(name)
        if value is None:
            if default is _REQUIRED:
                self._missing(name)
                return None
            return default
        parsed = parse_leading_float(value)
        if parsed is None:
            self._malformed(name, value)
        return parsed

    def fixed(self, name: str) -> float | None:
        base = self.integer(name)
        if base is None:
            return None
        fraction = self.integer(f"{name}_frac", 0)
        return decode_fixed(base, fraction or 0)

    def flag(self, name: str) -> bool:
        return self.attributes.get(name) == "T"

    def text(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def localized(self, name: str, default: str = "") -> str:
        value = self.attributes.get(f"_utf8_{name}")
        if value is None:
            value = self.attributes.get(name, default)
        return value

    def color(self, name: str, default: int = 0) -> str:
        value = self.attributes.get(name)
        if value is None:
            return decode_color(default)
        return decode_color(value)

    def points(self) -> list[Point]:
        points: list[Point] = []
        idx = 1
        while f"x{idx}" in self.attributes:
            points.append((self.integer(f"x{idx}"), self.integer(f"y{idx}")))
            idx += 1
        return points


@dataclass(eq=False)
class SchObject:
    KIND: ClassVar[int | None] = None
    NAME: ClassVar[str] = "Object"

    record: Record
    attributes: dict[str, str] = field(default_factory=dict, repr=False)
    owner_index: int = -1
    index_in_sheet: int = -1
    owner_part_id: int | None = None
    owner_display_mode: int = -1
    parent_index: int | None = field(default=None, repr=False)
    child_indices: list[int] = field(default_factory=list, repr=False)
    harness_index: int | None = field(default=None, repr=False)
    is_unknown_type: bool = False

    @property
    def kind(self) -> int:
        return self.record.kind

    @property
    def index(self) -> int:
        return self.record.index

    @classmethod
    def from_record(cls, record: Record, diagnostics: list[Diagnostic]) -> "SchObject":
        attributes = normalize_attributes(record.attributes)
        reader = AttributeReader(attributes, record.index, diagnostics)
        return cls(
            record=record,
            attributes=attributes,
            owner_index=_or_default(reader.integer("ownerindex", -1), -1),
            index_in_sheet=_or_default(reader.integer("indexinsheet", -1), -1),
            owner_part_id=reader.integer("ownerpartid", None),
            owner_display_mode=_or_default(reader.integer("ownerpartdisplaymode", -1), -1),
            **cls._decode(reader),
        )

    @classmethod
    def _decode(cls, reader: AttributeReader) -> dict[str, Any]:
        return {}


def _or_default(value: int | None, default: int) -> int:
    return default if value is None else value
