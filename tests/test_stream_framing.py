from __future__ import annotations

import logging

import pytest

import ezschdoc
from ezschdoc.errors import FramingError
from ezschdoc.stream import ByteReader, read_records
from tests._schdoc_helpers import frame, stream_of, text_frame


def test_byte_reader_reads_little_endian_and_tracks_position() -> None:
    reader = ByteReader(b"\x34\x12\x07abc")

    assert reader.read_u16_le() == 0x1234
    assert reader.read_u8() == 7
    assert reader.position == 3
    assert reader.read(3) == b"abc"
    assert reader.at_end()


def test_byte_reader_rejects_truncated_read() -> None:
    reader = ByteReader(b"ab")

    with pytest.raises(FramingError):
        reader.read(3)


def test_binary_records_skip_header_and_start_at_zero() -> None:
    data = stream_of("|RECORD=31|SHEETSTYLE=0", "|RECORD=1|LIBREFERENCE=RES")
    diagnostics = []

    records = read_records(data, diagnostics)

    assert [(r.kind, r.index) for r in records] == [(31, 0), (1, 1)]
    assert diagnostics == []


def test_binary_record_body_drops_terminator() -> None:
    records = read_records(stream_of("|RECORD=4|TEXT=hi"), [])

    assert records[0].data == "|RECORD=4|TEXT=hi"
    assert records[0].attributes[-1] == ("TEXT", "hi")


def test_non_record_payloads_do_not_consume_index() -> None:
    data = b"".join(
        [
            text_frame("|RECORD=1|A=1"),
            frame(b"\x01\x02\x03\x04\x05\x06\x07\x08\x09"),
            text_frame("|RECORD=2|A=2"),
        ]
    )

    records = read_records(data, [])

    assert [(r.kind, r.index) for r in records] == [(1, 0), (2, 1)]


def test_non_zero_padding_is_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    data = text_frame("|RECORD=29|LOCATION.X=1|LOCATION.Y=2", padding=3)
    diagnostics = []

    with caplog.at_level(logging.WARNING, logger="ezschdoc.stream"):
        records = read_records(data, diagnostics)

    assert len(records) == 1
    assert [item.code for item in diagnostics] == ["padding"]
    assert "padding" in caplog.text


def test_padding_on_header_frame_is_not_blamed_on_a_record() -> None:
    data = frame(b"|HEADER=x\x00", padding=1) + text_frame("|RECORD=1", padding=2)
    diagnostics = []

    records = read_records(data, diagnostics)

    assert [r.index for r in records] == [0]
    assert [(item.code, item.record_index) for item in diagnostics] == [("padding", None), ("padding", 0)]


def test_non_zero_record_type_is_fatal() -> None:
    data = stream_of("|RECORD=1") + text_frame("|RECORD=2", record_type=1)

    with pytest.raises(FramingError, match="invalid record type"):
        ezschdoc.load(data)


def test_truncated_payload_is_fatal() -> None:
    data = text_frame("|RECORD=1|LIBREFERENCE=RES")[:-4]

    with pytest.raises(FramingError, match="truncated"):
        read_records(data, [])


def test_load_selects_framing_by_source_shape() -> None:
    from_bytes = ezschdoc.load(stream_of("|RECORD=29|LOCATION.X=1|LOCATION.Y=2"))
    from_blocks = ezschdoc.load(["|RECORD=29|LOCATION.X=1|LOCATION.Y=2"])

    assert [obj.index for obj in from_bytes] == [obj.index for obj in from_blocks] == [0]
    assert type(from_bytes.objects[0]) is type(from_blocks.objects[0])


def test_load_rejects_single_string() -> None:
    with pytest.raises(TypeError):
        ezschdoc.load("|RECORD=1")
