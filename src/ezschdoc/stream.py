from __future__ import annotations

import logging
import struct

from .errors import Diagnostic, FramingError
from .record import Record, parse_record_kind

logger = logging.getLogger(__name__)

RECORD_MARKER = b"|RECORD="
MIN_RECORD_SIZE = 4

_U16_LE = struct.Struct("<H")


class ByteReader:
    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self.position = 0

    def __len__(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        return len(self._data) - self.position

    def at_end(self) -> bool:
        return self.position >= len(self._data)

    def read(self, size: int) -> bytes:
        if size > self.remaining:
            raise FramingError(
                f"record payload truncated at offset {self.position}: "
                f"expected {size} bytes, {self.remaining} available"
            )
        chunk = self._data[self.position : self.position + size]
        self.position += size
        return chunk

    def read_u8(self) -> int:
        return self.read(1)[0]

    def read_u16_le(self) -> int:
        return _U16_LE.unpack(self.read(2))[0]


def read_records(data: bytes | bytearray | memoryview, diagnostics: list[Diagnostic]) -> list[Record]:
    # Frame: <u16 length><u8 padding><u8 type><payload>. Non-record payloads take no index.
    reader = ByteReader(data)
    records: list[Record] = []
    while reader.position + MIN_RECORD_SIZE < len(reader):
        frame_offset = reader.position
        payload_length = reader.read_u16_le()
        padding = reader.read_u8()
        record_type = reader.read_u8()
        if record_type != 0:
            raise FramingError(f"invalid record type {record_type:#04x} in frame at offset {frame_offset}")
        payload = reader.read(payload_length)
        is_record = payload[: len(RECORD_MARKER)] == RECORD_MARKER
        if padding != 0:
            message = f"non-zero padding byte {padding:#04x} in frame at offset {frame_offset}"
            logger.warning(message)
            diagnostics.append(Diagnostic("padding", message, len(records) if is_record else None))
        if not is_record:
            continue
        # Payloads end with a NUL terminator.
        body = payload[:-1].decode("utf-8", errors="replace")
        kind = parse_record_kind(body)
        records.append(Record.from_body(-1 if kind is None else kind, body, len(records)))
    return records
