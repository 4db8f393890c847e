from __future__ import annotations

from pathlib import Path

import ezschdoc
import ezschdoc.cli as cli_module
from ezschdoc.errors import FramingError


def test_cli_inspect_reports_counts_and_diagnostics(monkeypatch, tmp_path: Path, capsys) -> None:
    dummy_path = tmp_path / "dummy.SchDoc"
    dummy_path.write_bytes(b"schdoc")
    doc = ezschdoc.load(
        [
            "|RECORD=31|SHEETSTYLE=1",
            "|RECORD=1|LIBREFERENCE=RES",
            "|RECORD=34|OWNERINDEX=1|TEXT=R1",
            "|RECORD=41|OWNERINDEX=1|NAME=Value|TEXT=1k",
            "|RECORD=41|OWNERINDEX=1|NAME=Tolerance|TEXT=1%",
            "|RECORD=9999",
        ]
    )
    monkeypatch.setattr(cli_module, "read", lambda _path: doc)

    code = cli_module._run_inspect(str(dummy_path))
    captured = capsys.readouterr()

    assert code == 0
    assert "records: 6" in captured.out
    assert "sheet: 1550x1110" in captured.out
    assert "Parameter: 2" in captured.out
    assert "Designator: 1" in captured.out
    assert "unknown[9999]: 1" in captured.out
    assert "diagnostics: 1" in captured.out
    assert "unknown-kind[5]" in captured.out


def test_cli_inspect_missing_file(tmp_path: Path, capsys) -> None:
    code = cli_module._run_inspect(str(tmp_path / "missing.SchDoc"))

    assert code == 2
    assert "file not found" in capsys.readouterr().err


def test_cli_inspect_framing_error(monkeypatch, tmp_path: Path, capsys) -> None:
    dummy_path = tmp_path / "bad.SchDoc"
    dummy_path.write_bytes(b"schdoc")

    def fake_read(_path: str):
        raise FramingError("invalid record type 0x01")

    monkeypatch.setattr(cli_module, "read", fake_read)

    assert cli_module.main(["inspect", str(dummy_path)]) == 2
    assert "corrupt record stream" in capsys.readouterr().err


def test_cli_without_command_prints_help(capsys) -> None:
    assert cli_module.main([]) == 0
    assert "inspect" in capsys.readouterr().out
