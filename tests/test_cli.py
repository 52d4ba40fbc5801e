from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from cef_codec.cli import main


def test_cli_encode(cool_line: str, capsys) -> None:
    main(
        [
            "encode",
            "--vendor", "Cool Vendor",
            "--product", "Cool Product",
            "--device-version", "1.0",
            "--class-id", "COOL_THING",
            "--name", "Something cool happened.",
            "--severity", "Unknown",
            "--ext", "src=127.0.0.1",
        ]
    )
    assert capsys.readouterr().out == cool_line + "\n"


def test_cli_encode_missing_field_exits_2(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["encode", "--vendor", "Cool Vendor"])
    assert exc_info.value.code == 2
    assert "unable to create" in capsys.readouterr().err


def test_cli_decode_json(cool_line: str, capsys) -> None:
    main(["decode", cool_line, "--json"])
    out = json.loads(capsys.readouterr().out)
    assert out["Version"] == 0
    assert out["Extensions"] == {"src": "127.0.0.1"}


def test_cli_decode_text(cool_line: str, capsys) -> None:
    main(["decode", cool_line])
    out = capsys.readouterr().out
    assert "Device Vendor: Cool Vendor" in out
    assert "  src=127.0.0.1" in out


def test_cli_decode_invalid_exits_2(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["decode", "not cef"])
    assert exc_info.value.code == 2
    assert capsys.readouterr().err.startswith("Error: ")


def test_cli_decode_file(tmp_path: Path, write_cef_log: Callable[[Path], None], capsys) -> None:
    log = tmp_path / "events.log"
    write_cef_log(log)

    with pytest.raises(SystemExit) as exc_info:
        main(["decode-file", str(log)])
    assert exc_info.value.code == 1

    captured = capsys.readouterr()
    assert "1 Something cool happened. [Unknown]" in captured.out
    assert "Decoded 2 of 4 lines." in captured.out
    assert "3: " in captured.err


def test_cli_decode_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["decode-file", str(tmp_path / "missing.log")])
    assert exc_info.value.code == 2
