from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest

import ezschdoc.document as document_module
from tests._schdoc_helpers import stream_of


class _FakeOle:
    def __init__(self, streams: dict[str, bytes]) -> None:
        self._streams = streams

    def __enter__(self) -> "_FakeOle":
        return self

    def __exit__(self, *exc_info) -> None:
        return None

    def exists(self, name: str) -> bool:
        return name in self._streams

    def openstream(self, name: str) -> io.BytesIO:
        return io.BytesIO(self._streams[name])


def _patch_olefile(monkeypatch, streams: dict[str, bytes]) -> None:
    monkeypatch.setattr(
        document_module,
        "olefile",
        SimpleNamespace(isOleFile=lambda _path: True, OleFileIO=lambda _path: _FakeOle(streams)),
    )


def test_read_decodes_file_header_stream(monkeypatch) -> None:
    _patch_olefile(
        monkeypatch,
        {"FileHeader": stream_of("|RECORD=31|SHEETSTYLE=0", "|RECORD=29|OWNERINDEX=0|LOCATION.X=5|LOCATION.Y=6")},
    )

    doc = document_module.read("board.SchDoc")

    assert doc.path == "board.SchDoc"
    assert doc.sheet is not None
    junction = doc.objects[1]
    assert (junction.x, junction.y) == (5, 6)
    assert doc.parent(junction) is doc.sheet


def test_read_rejects_missing_stream(monkeypatch) -> None:
    _patch_olefile(monkeypatch, {"Storage": b""})

    with pytest.raises(ValueError, match="missing stream"):
        document_module.read("board.SchDoc")


def test_read_rejects_non_ole_file(tmp_path: Path) -> None:
    path = tmp_path / "plain.SchDoc"
    path.write_bytes(b"not a compound file" * 40)

    with pytest.raises(ValueError, match="not an OLE compound document"):
        document_module.read(str(path))
