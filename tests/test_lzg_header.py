#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import struct
import unittest

from lzg.errors import BadMagicError, ChecksumMismatchError, CorruptStreamError, UnknownMethodError
from lzg.header import (
    HEADER_SIZE,
    METHOD_COPY,
    METHOD_LZG1,
    looks_like_lzg_block,
    method_name,
    parse_header,
    peek_decoded_size,
)
from lzg_fixtures import MARKERS, make_block, make_copy_block, make_lzg1_block


class LZGHeaderTests(unittest.TestCase):
    def test_short_buffers_are_bad_magic(self) -> None:
        full = make_copy_block(b"Hello")
        for n in range(HEADER_SIZE):
            with self.assertRaises(BadMagicError):
                parse_header(full[:n])

    def test_invalid_magic(self) -> None:
        blob = bytearray(make_copy_block(b"Hello"))
        blob[2] = ord("H")
        with self.assertRaises(BadMagicError):
            parse_header(bytes(blob))

    def test_magic_checked_before_checksum(self) -> None:
        blob = bytearray(make_copy_block(b"Hello"))
        blob[0] = 0
        blob[-1] ^= 0xFF
        with self.assertRaises(BadMagicError):
            parse_header(bytes(blob))

    def test_checksum_mismatch_carries_values(self) -> None:
        blob = bytearray(make_copy_block(b"Hello"))
        blob[-1] ^= 0x01
        with self.assertRaises(ChecksumMismatchError) as ctx:
            parse_header(bytes(blob))
        self.assertEqual(ctx.exception.expected, 0x058C01F5)
        self.assertNotEqual(ctx.exception.actual, ctx.exception.expected)
        self.assertEqual(ctx.exception.reason, "checksum_mismatch")

    def test_checksum_checked_before_method(self) -> None:
        blob = make_block(b"Hello", method=7, checksum=0)
        with self.assertRaises(ChecksumMismatchError):
            parse_header(blob)

    def test_unknown_method(self) -> None:
        for method in (2, 3, 0x80, 0xFF):
            with self.assertRaises(UnknownMethodError) as ctx:
                parse_header(make_block(b"Hello", method=method))
            self.assertEqual(ctx.exception.method, method)

    def test_copy_header_fields(self) -> None:
        hdr = parse_header(make_copy_block(b"Hello"))
        self.assertEqual(hdr.method, METHOD_COPY)
        self.assertEqual(hdr.payload_start, 16)
        self.assertIsNone(hdr.markers)
        self.assertEqual(hdr.checksum, 0x058C01F5)
        self.assertEqual(hdr.decoded_size, 5)
        self.assertEqual(hdr.encoded_size, 5)

    def test_lzg1_header_reads_markers(self) -> None:
        hdr = parse_header(make_lzg1_block(b"A", decoded_size=1))
        self.assertEqual(hdr.method, METHOD_LZG1)
        self.assertEqual(hdr.payload_start, 20)
        self.assertEqual(hdr.markers, tuple(MARKERS))

    def test_size_fields_are_not_load_bearing(self) -> None:
        hdr = parse_header(make_block(b"Hello", method=0, decoded_size=999, encoded_size=1234))
        self.assertEqual(hdr.decoded_size, 999)
        self.assertEqual(hdr.encoded_size, 1234)

    def test_header_only_is_valid(self) -> None:
        for method in (METHOD_COPY, METHOD_LZG1):
            hdr = parse_header(make_block(b"", method=method))
            self.assertEqual(hdr.payload_start, 16)
            self.assertIsNone(hdr.markers)

    def test_truncated_marker_set(self) -> None:
        for n in (1, 2, 3):
            with self.assertRaises(CorruptStreamError):
                parse_header(make_block(MARKERS[:n], method=METHOD_LZG1))

    def test_accepts_bytearray_and_memoryview(self) -> None:
        blob = make_copy_block(b"Hello")
        self.assertEqual(parse_header(bytearray(blob)).method, METHOD_COPY)
        self.assertEqual(parse_header(memoryview(blob)).method, METHOD_COPY)

    def test_rejects_non_bytes(self) -> None:
        with self.assertRaises(TypeError):
            parse_header("LZG" + "\0" * 13)  # type: ignore[arg-type]

    def test_method_name_labels(self) -> None:
        self.assertEqual(method_name(METHOD_COPY), "copy")
        self.assertEqual(method_name(METHOD_LZG1), "lzg1")
        self.assertEqual(method_name(9), "unknown")


class LZGSniffTests(unittest.TestCase):
    def test_looks_like_lzg_block(self) -> None:
        self.assertTrue(looks_like_lzg_block(make_copy_block(b"Hello")))
        self.assertTrue(looks_like_lzg_block(make_lzg1_block(b"A")))
        self.assertFalse(looks_like_lzg_block(b"LZG"))
        self.assertFalse(looks_like_lzg_block(make_block(b"Hello", method=5)))
        self.assertFalse(looks_like_lzg_block(b"MC" + b"\0" * 20))
        self.assertFalse(looks_like_lzg_block("LZG"))  # type: ignore[arg-type]

    def test_sniff_large_bytes_like_inputs(self) -> None:
        blob = make_copy_block(b"\0" * 100000)
        self.assertTrue(looks_like_lzg_block(memoryview(blob)))
        self.assertTrue(looks_like_lzg_block(bytearray(blob)))
        self.assertFalse(looks_like_lzg_block(memoryview(blob)[:HEADER_SIZE - 1]))

    def test_sniff_does_not_check_checksum(self) -> None:
        self.assertTrue(looks_like_lzg_block(make_block(b"Hello", method=0, checksum=0)))

    def test_peek_decoded_size(self) -> None:
        blob = make_block(b"Hello", method=0, decoded_size=0x01020304)
        self.assertEqual(peek_decoded_size(blob), 0x01020304)
        self.assertEqual(peek_decoded_size(blob[:7]), 0x01020304)
        self.assertEqual(peek_decoded_size(blob[:6]), 0)
        self.assertEqual(peek_decoded_size(b"XYZ" + struct.pack(">I", 5)), 0)


if __name__ == "__main__":
    unittest.main()
