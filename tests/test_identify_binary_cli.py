"""Tests for the identifybin command-line tool."""

import json
import pathlib

import pytest

from binary_test_utils import MH_MAGIC_64, make_elf_header, make_macho_header, make_pe_header
from identifybin.tools.identify_binary import identify_source, main


class TestMain:
    def test_single_file(self, tmp_path: pathlib.Path, capsys):
        binary = tmp_path / "app"
        binary.write_bytes(make_elf_header(0x3E))

        assert main([str(binary)]) == 0

        out = capsys.readouterr().out
        assert out.strip() == f"{binary}: linux/x86_64 (little-endian)"

    def test_multiple_files_json(self, tmp_path: pathlib.Path, capsys):
        exe = tmp_path / "app.exe"
        exe.write_bytes(make_pe_header(0xAA64))
        dylib = tmp_path / "lib.dylib"
        dylib.write_bytes(make_macho_header(MH_MAGIC_64, 0x01000007))

        assert main([str(exe), str(dylib), "--json"]) == 0

        lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert lines == [
            {
                "source": str(exe),
                "operating_system": "windows",
                "architecture": "arm64",
                "endianness": "little",
            },
            {
                "source": str(dylib),
                "operating_system": "darwin",
                "architecture": "x86_64",
                "endianness": "big",
            },
        ]

    def test_failure_sets_exit_code(self, tmp_path: pathlib.Path, capsys):
        good = tmp_path / "good"
        good.write_bytes(make_elf_header(0x28))
        text = tmp_path / "readme.txt"
        text.write_text("This is a plain text file, not a binary. " * 3)

        assert main([str(good), str(text)]) == 1

        captured = capsys.readouterr()
        assert f"{good}: linux/arm" in captured.out
        assert f"{text}: ERROR: Unknown binary format" in captured.err

    def test_missing_file_reported(self, tmp_path: pathlib.Path, capsys):
        assert main([str(tmp_path / "missing")]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_bytes_option(self, tmp_path: pathlib.Path, capsys):
        binary = tmp_path / "big.dll"
        binary.write_bytes(make_pe_header(0x8664, pe_offset=0x400, size=0x800))

        assert main([str(binary), "--bytes", "128"]) == 1
        assert "Truncated pe header" in capsys.readouterr().err

    def test_rejects_non_positive_bytes(self, tmp_path: pathlib.Path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "any"), "--bytes", "0"])

    def test_url_fetch_failure(self, fake_get, capsys):
        fake_get.respond(404)

        assert main(["https://example.com/missing"]) == 1
        assert "got 404" in capsys.readouterr().err


class TestIdentifySource:
    def test_returns_result(self, tmp_path: pathlib.Path, capsys):
        binary = tmp_path / "tool"
        binary.write_bytes(make_elf_header(0xB7, encoding=2))

        result = identify_source(str(binary))

        assert result is not None
        assert result.to_dict()["architecture"] == "arm64"
        assert "arm64 (big-endian)" in capsys.readouterr().out

    def test_returns_none_on_error(self, capsys):
        assert identify_source("/nonexistent/path/tool") is None
