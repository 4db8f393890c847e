from __future__ import annotations

import re
from dataclasses import dataclass, field

RECORD_PREFIX = "|RECORD="

_ATTRIBUTE_PATTERN = re.compile(r"\|(?P<name>[^|=]+)=(?P<value>[^|]+)")
_LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")

Attribute = tuple[str, str]


def tokenize(body: str) -> list[Attribute]:
    # Values run up to the next pipe; text outside the |name=value shape is skipped.
    return [(m.group("name"), m.group("value")) for m in _ATTRIBUTE_PATTERN.finditer(body)]


def normalize_name(name: str) -> str:
    # "%UTF8%TEXT" becomes "_utf8_text", "LOCATION.X" becomes "location_x".
    return name.lower().replace("%", "_").replace(".", "_", 1)


def normalize_attributes(attributes: list[Attribute]) -> dict[str, str]:
    # Colliding normalized names keep the last value in record order.
    out: dict[str, str] = {}
    for name, value in attributes:
        out[normalize_name(name)] = value
    return out


def parse_leading_int(text: str | None) -> int | None:
    # "12" and "12.5" both give 12.
    if text is None:
        return None
    match = _LEADING_INT_PATTERN.match(text)
    if match is None:
        return None
    return int(match.group(1))


def parse_record_kind(body: str) -> int | None:
    if not body.startswith(RECORD_PREFIX):
        return None
    return parse_leading_int(body[len(RECORD_PREFIX) :].split("|", 1)[0])


@dataclass(frozen=True)
class Record:
    kind: int
    index: int
    data: str
    attributes: list[Attribute] = field(default_factory=list)

    @classmethod
    def from_body(cls, kind: int, body: str, index: int) -> "Record":
        return cls(kind=kind, index=index, data=body, attributes=tokenize(body))

    def get(self, name: str, default: str | None = None) -> str | None:
        # Case-insensitive; the last occurrence wins.
        wanted = name.lower()
        value = default
        for key, item in self.attributes:
            if key.lower() == wanted:
                value = item
        return value


def records_from_blocks(blocks) -> list[Record]:
    # Blocks without the record prefix do not consume a sequence index.
    records: list[Record] = []
    for block in blocks:
        if not block.startswith(RECORD_PREFIX):
            continue
        kind = parse_record_kind(block)
        records.append(Record.from_body(-1 if kind is None else kind, block, len(records)))
    return records
