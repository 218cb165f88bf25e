"""Tests for PE/COFF header decoding."""

import struct

import pytest

from binary_test_utils import make_pe_header
from identifybin.coff import PE_MACHINES, parse_pe
from identifybin.errors import TruncatedHeader, UnsupportedArchitecture
from identifybin.types import (
    Architecture,
    BinaryFormat,
    BinaryType,
    Endianness,
    OperatingSystem,
)


class TestParsePe:
    """Tests for parse_pe."""

    @pytest.mark.parametrize(
        "machine,architecture",
        [
            (0x014C, Architecture.X86),
            (0x8664, Architecture.X86_64),
            (0xAA64, Architecture.ARM64),
        ],
    )
    def test_supported_machines(self, machine, architecture):
        """Test every supported machine type."""
        result = parse_pe(make_pe_header(machine))
        assert result == BinaryType(
            OperatingSystem.WINDOWS, architecture, Endianness.LITTLE
        )

    def test_amd64_at_0x80(self):
        """Test e_lfanew 0x80 with machine 0x8664 at 0x84."""
        data = bytearray(256)
        data[0:2] = b"MZ"
        struct.pack_into("<I", data, 0x3C, 0x80)
        struct.pack_into("<H", data, 0x84, 0x8664)

        result = parse_pe(data)

        assert result == BinaryType(
            OperatingSystem.WINDOWS, Architecture.X86_64, Endianness.LITTLE
        )

    def test_pe_signature_not_required(self):
        """Test that only the machine field is consulted."""
        data = make_pe_header(0x14C)
        data[0x80:0x84] = b"\x00\x00\x00\x00"

        assert parse_pe(data).architecture == Architecture.X86

    def test_unsupported_machine_raises(self):
        """Test that ARMNT (0x1C4) is not supported."""
        with pytest.raises(UnsupportedArchitecture, match="0x1c4") as excinfo:
            parse_pe(make_pe_header(0x1C4))

        assert excinfo.value.binary_format == BinaryFormat.PE

    def test_machine_field_at_buffer_end(self):
        """Test that a machine field ending exactly at the buffer end is read."""
        data = make_pe_header(0xAA64, pe_offset=250, size=256)
        assert parse_pe(data).architecture == Architecture.ARM64

    def test_machine_field_one_past_end_raises(self):
        """Test that pe_offset + 6 > len raises TruncatedHeader."""
        data = make_pe_header(0x8664, pe_offset=251, size=256)

        with pytest.raises(TruncatedHeader) as excinfo:
            parse_pe(data)

        assert excinfo.value.offset == 255
        assert excinfo.value.size == 256

    def test_huge_pe_offset_raises(self):
        """Test that an e_lfanew far past the buffer is rejected."""
        data = make_pe_header(0x8664, pe_offset=0xFFFFFFFF, size=64)

        with pytest.raises(TruncatedHeader):
            parse_pe(data)

    def test_buffer_without_lfanew_raises(self):
        """Test that a buffer ending before 0x40 is rejected."""
        data = bytearray(0x3E)
        data[0:2] = b"MZ"

        with pytest.raises(TruncatedHeader):
            parse_pe(data)


class TestMachineTable:
    def test_machines_all_little_endian_targets(self):
        assert set(PE_MACHINES.values()) == {
            Architecture.X86,
            Architecture.X86_64,
            Architecture.ARM64,
        }
