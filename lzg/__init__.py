#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
lzg package

Decoder for the LZG container format (plain copy and LZG1 methods). The
lzgDec.py script is the command-line entrypoint; the logic lives here in
small testable units.
"""

from __future__ import annotations

from .checksum import lzg_checksum
from .codec import DecodeResult, decode, decoded_size, decompress
from .errors import (
    BadMagicError,
    ChecksumMismatchError,
    CorruptStreamError,
    LZGError,
    UnknownMethodError,
)
from .header import (
    HEADER_SIZE,
    METHOD_COPY,
    METHOD_LZG1,
    LZGHeader,
    looks_like_lzg_block,
    method_name,
    parse_header,
)
from .output import DecodedData

__version__ = "1.0.0"

__all__ = [
    "BadMagicError",
    "ChecksumMismatchError",
    "CorruptStreamError",
    "DecodeResult",
    "DecodedData",
    "HEADER_SIZE",
    "LZGError",
    "LZGHeader",
    "METHOD_COPY",
    "METHOD_LZG1",
    "UnknownMethodError",
    "decode",
    "decoded_size",
    "decompress",
    "looks_like_lzg_block",
    "lzg_checksum",
    "method_name",
    "parse_header",
]
