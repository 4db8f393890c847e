from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

import olefile

from . import stream as stream_module
from .entity import SchObject
from .errors import DecodeError, Diagnostic
from .objects import (
    OBJECT_CLASSES,
    Component,
    Designator,
    Harness,
    HarnessPin,
    HarnessWire,
    ImplementationParameterList,
    Parameter,
    Sheet,
    decode_object,
)
from .record import Record, parse_leading_int, records_from_blocks

logger = logging.getLogger(__name__)

DEFAULT_STREAM = "FileHeader"
PARENT_SEARCH_LIMIT = 1024

_STRICT_CODES = {"missing-attribute", "malformed-attribute"}
_CLASSES_BY_NAME = {cls.__name__.upper(): cls for cls in OBJECT_CLASSES}


def read(path: str, *, stream: str = DEFAULT_STREAM, strict: bool = False) -> "Document":
    """Open a schematic compound file and decode its record stream."""
    if not olefile.isOleFile(path):
        raise ValueError(f"not an OLE compound document: {path}")
    with olefile.OleFileIO(path) as ole:
        if not ole.exists(stream):
            raise ValueError(f"missing stream {stream!r} in {path}")
        data = ole.openstream(stream).read()
    return load(data, strict=strict, path=path)


def load(
    source: bytes | bytearray | memoryview | Iterable[str],
    *,
    strict: bool = False,
    path: str | None = None,
) -> "Document":
    """Decode a document from framed bytes or from pre-split ``|RECORD=`` blocks."""
    diagnostics: list[Diagnostic] = []
    if isinstance(source, (bytes, bytearray, memoryview)):
        records = stream_module.read_records(source, diagnostics)
    elif isinstance(source, str):
        raise TypeError("expected bytes or an iterable of text blocks, got a single str")
    else:
        records = records_from_blocks(source)
    doc = Document(records=records, diagnostics=diagnostics, path=path)
    if strict:
        failures = [item for item in doc.diagnostics if item.code in _STRICT_CODES]
        if failures:
            raise DecodeError(failures)
    return doc


@dataclass(eq=False)
class Document:
    records: list[Record]
    diagnostics: list[Diagnostic] = field(default_factory=list)
    path: str | None = None
    objects: list[SchObject] = field(init=False, default_factory=list)
    sheet: Sheet | None = field(init=False, default=None)
    _lookup: dict[int, SchObject] = field(init=False, default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        for record in self.records:
            obj = decode_object(record, self.diagnostics)
            self.objects.append(obj)
            self._lookup[record.index] = obj
        self._link()
        self.sheet = next((obj for obj in self.objects if isinstance(obj, Sheet)), None)

    def _link(self) -> None:
        current_harness: Harness | None = None
        for obj in self.objects:
            if isinstance(obj, Harness):
                current_harness = obj
            # Harness members follow their harness record; their owner index is not used.
            if isinstance(obj, (HarnessWire, HarnessPin)):
                obj.harness_index = None if current_harness is None else current_harness.index
            if obj.owner_index < 0:
                continue
            owner = self._lookup.get(obj.owner_index)
            if owner is None:
                message = f"owner index {obj.owner_index} does not match any record"
                logger.warning(message)
                self.diagnostics.append(Diagnostic("dangling-owner", message, obj.index))
                continue
            obj.parent_index = owner.index
            owner.child_indices.append(obj.index)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[SchObject]:
        return iter(self.objects)

    @property
    def unknown_objects(self) -> list[SchObject]:
        return [obj for obj in self.objects if obj.is_unknown_type]

    def object_at(self, index: int) -> SchObject | None:
        return self._lookup.get(index)

    def parent(self, obj: SchObject) -> SchObject | None:
        if obj.parent_index is None:
            return None
        return self._lookup.get(obj.parent_index)

    def children(self, obj: SchObject) -> list[SchObject]:
        return [self._lookup[index] for index in obj.child_indices if index in self._lookup]

    def harness(self, obj: SchObject) -> Harness | None:
        if obj.harness_index is None:
            return None
        found = self._lookup.get(obj.harness_index)
        return found if isinstance(found, Harness) else None

    def query(
        self,
        types: str | type[SchObject] | Iterable[str | type[SchObject]] | None = None,
    ) -> Iterator[SchObject]:
        if types is None:
            yield from self.objects
            return
        wanted = _normalize_types(types)
        for obj in self.objects:
            if isinstance(obj, wanted):
                yield obj

    def find_parent(
        self,
        obj: SchObject,
        kind: type[SchObject] | tuple[type[SchObject], ...],
    ) -> SchObject | None:
        # Bounded walk; corrupt chains and cycles end in None.
        current = self.parent(obj)
        for _ in range(PARENT_SEARCH_LIMIT):
            if current is None or isinstance(current, kind):
                return current
            current = self.parent(current)
        if current is None:
            return None
        message = f"parent chain longer than {PARENT_SEARCH_LIMIT} hops"
        logger.warning(message)
        self.diagnostics.append(Diagnostic("parent-chain-limit", message, obj.index))
        return None

    def full_designator(self, designator: Designator) -> str:
        component = self.find_parent(designator, Component)
        if component is None:
            return designator.text
        part_id = component.current_part_id
        # Single-part components report a part count of 2.
        if component.part_count is None or component.part_count <= 2:
            return designator.text
        if part_id is None or part_id <= 0:
            return designator.text
        if part_id <= 26:
            return designator.text + chr(ord("A") + part_id - 1)
        return f"{designator.text}[{part_id}]"

    def is_implementation_parameter(self, parameter: Parameter) -> bool:
        return isinstance(self.parent(parameter), ImplementationParameterList)

    def find_parent_record(self, start_index: int, kind: int) -> Record | None:
        by_index = {record.index: record for record in self.records}
        current = by_index.get(start_index)
        for _ in range(PARENT_SEARCH_LIMIT):
            if current is None:
                return None
            if current.kind == kind:
                return current
            owner = parse_leading_int(current.get("ownerindex") or None)
            if owner is None or owner < 0:
                return None
            current = by_index.get(owner)
        return None

    def find_child_records(self, parent_index: int, kind: int | None = None) -> list[Record]:
        results: list[Record] = []
        for record in self.records:
            if kind is not None and record.kind != kind:
                continue
            if parse_leading_int(record.get("ownerindex") or None) == parent_index:
                results.append(record)
        return results

    def apply_variant(self, overlay: Mapping[str, Mapping[str, str]]):
        from .variant import apply_variant

        return apply_variant(self, overlay)


def _normalize_types(
    types: str | type[SchObject] | Iterable[str | type[SchObject]],
) -> tuple[type[SchObject], ...]:
    if isinstance(types, str):
        items: list[str | type[SchObject]] = list(types.replace(",", " ").split())
    elif isinstance(types, type):
        items = [types]
    else:
        items = list(types)
    out: list[type[SchObject]] = []
    for item in items:
        if isinstance(item, type):
            out.append(item)
            continue
        cls = _CLASSES_BY_NAME.get(item.strip().upper())
        if cls is None:
            raise ValueError(f"unknown object type: {item}")
        out.append(cls)
    return tuple(out)
