#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .checksum import lzg_checksum
from .errors import BadMagicError, ChecksumMismatchError, CorruptStreamError, UnknownMethodError

MAGIC = b"LZG"
HEADER_SIZE = 16
MARKER_COUNT = 4

METHOD_COPY = 0
METHOD_LZG1 = 1
SUPPORTED_METHODS = (METHOD_COPY, METHOD_LZG1)
METHOD_TO_NAME: Dict[int, str] = {
    METHOD_COPY: "copy",
    METHOD_LZG1: "lzg1",
}

# Big-endian field offsets inside the fixed header.
OFFSET_DECODED_SIZE = 3
OFFSET_ENCODED_SIZE = 7
OFFSET_CHECKSUM = 11
OFFSET_METHOD = 15

Markers = Tuple[int, int, int, int]


@dataclass(frozen=True)
class LZGHeader:
    method: int
    checksum: int
    decoded_size: int
    encoded_size: int
    payload_start: int
    markers: Optional[Markers] = None


def method_name(method: int) -> str:
    return METHOD_TO_NAME.get(int(method), "unknown")


def coerce_bytes(blob: object) -> bytes:
    if isinstance(blob, bytes):
        return blob
    if isinstance(blob, (bytearray, memoryview)):
        return bytes(blob)
    raise TypeError(f"LZG input must be bytes-like, not {type(blob).__name__}")


def parse_header(blob: bytes) -> LZGHeader:
    """Validate the fixed LZG header and locate the payload.

    Checks run in order and stop at the first failure: length and magic,
    declared checksum against the checksum of everything after the header,
    then the method byte. For LZG1 the four marker bytes that follow the
    header are read too.
    """
    raw = coerce_bytes(blob)
    if len(raw) < HEADER_SIZE:
        raise BadMagicError(f"block too short for LZG header: {len(raw)} < {HEADER_SIZE}")
    if raw[:3] != MAGIC:
        raise BadMagicError("invalid MAGIC")

    decoded_size, encoded_size, declared = struct.unpack_from(">III", raw, OFFSET_DECODED_SIZE)
    actual = lzg_checksum(raw, HEADER_SIZE)
    if actual != declared:
        raise ChecksumMismatchError(declared, actual)

    method = raw[OFFSET_METHOD]
    if method not in SUPPORTED_METHODS:
        raise UnknownMethodError(method)

    if method == METHOD_COPY:
        return LZGHeader(method, declared, decoded_size, encoded_size, HEADER_SIZE)

    # A header with no payload at all is an empty LZG1 stream.
    if len(raw) == HEADER_SIZE:
        return LZGHeader(method, declared, decoded_size, encoded_size, HEADER_SIZE)
    if len(raw) < HEADER_SIZE + MARKER_COUNT:
        raise CorruptStreamError("truncated marker set")
    m1, m2, m3, m4 = raw[HEADER_SIZE : HEADER_SIZE + MARKER_COUNT]
    return LZGHeader(
        method,
        declared,
        decoded_size,
        encoded_size,
        HEADER_SIZE + MARKER_COUNT,
        markers=(m1, m2, m3, m4),
    )


def looks_like_lzg_block(data: bytes) -> bool:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        return False
    raw = bytes(data[:HEADER_SIZE])
    if len(raw) < HEADER_SIZE:
        return False
    if raw[:3] != MAGIC:
        return False
    return int(raw[OFFSET_METHOD]) in SUPPORTED_METHODS


def peek_decoded_size(blob: bytes) -> int:
    """Return the decoded size stored in the header, or 0 if it cannot be read.

    Only the magic and the size field are looked at; the checksum is not
    verified, so the value is a hint for buffer sizing, not a promise.
    """
    raw = coerce_bytes(blob)
    if len(raw) < OFFSET_DECODED_SIZE + 4:
        return 0
    if raw[:3] != MAGIC:
        return 0
    return struct.unpack_from(">I", raw, OFFSET_DECODED_SIZE)[0]
