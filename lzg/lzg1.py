#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Optional, Tuple

from .errors import CorruptStreamError

# Copy length for the 5-bit length code of the distant, medium and near tokens.
LENGTH_DECODE_LUT: Tuple[int, ...] = tuple(range(2, 30)) + (35, 48, 72, 128)

TAG_LITERAL = 0
TAG_DISTANT = 1
TAG_MEDIUM = 2
TAG_SHORT = 3
TAG_NEAR = 4

DISTANT_OFFSET_BIAS = 2056
MEDIUM_OFFSET_BIAS = 8
SHORT_OFFSET_BIAS = 8


def _build_tag_table(markers: Tuple[int, int, int, int]) -> bytearray:
    m1, m2, m3, m4 = markers
    table = bytearray(256)
    # Assigned last-to-first so the lower-numbered marker wins on duplicates.
    for tag, marker in ((TAG_NEAR, m4), (TAG_SHORT, m3), (TAG_MEDIUM, m2), (TAG_DISTANT, m1)):
        table[marker & 0xFF] = tag
    return table


def decode_copy(data: bytes, payload_start: int) -> bytearray:
    return bytearray(data[payload_start:])


def decode_lzg1(
    data: bytes,
    payload_start: int,
    markers: Optional[Tuple[int, int, int, int]],
) -> bytearray:
    """Expand an LZG1 token stream.

    Bytes that are not markers are literals. A marker followed by 0 is the
    marker byte itself as a literal; any other follow-up byte starts a copy
    token whose length/offset layout depends on which marker fired. Copies
    read from the output produced so far and may overlap the bytes being
    written (offset < length), which is how runs are encoded.
    """
    out = bytearray()
    if markers is None:
        return out
    tags = _build_tag_table(markers)
    lut = LENGTH_DECODE_LUT
    pos = payload_start
    end = len(data)

    while pos < end:
        symbol = data[pos]
        pos += 1
        tag = tags[symbol]
        if tag == TAG_LITERAL:
            out.append(symbol)
            continue

        if pos >= end:
            raise CorruptStreamError(f"copy token truncated at input offset {pos - 1}")
        b = data[pos]
        pos += 1
        if b == 0:
            out.append(symbol)
            continue

        if tag == TAG_DISTANT:
            if pos + 2 > end:
                raise CorruptStreamError(f"distant copy truncated at input offset {pos - 2}")
            length = lut[b & 0x1F]
            offset = (((b & 0xE0) << 11) | (data[pos] << 8) | data[pos + 1]) + DISTANT_OFFSET_BIAS
            pos += 2
        elif tag == TAG_MEDIUM:
            if pos >= end:
                raise CorruptStreamError(f"medium copy truncated at input offset {pos - 2}")
            length = lut[b & 0x1F]
            offset = (((b & 0xE0) << 3) | data[pos]) + MEDIUM_OFFSET_BIAS
            pos += 1
        elif tag == TAG_SHORT:
            length = (b >> 6) + 3
            offset = (b & 0x3F) + SHORT_OFFSET_BIAS
        else:
            length = lut[b & 0x1F]
            offset = (b >> 5) + 1

        start = len(out) - offset
        if start < 0:
            raise CorruptStreamError(
                f"back-reference offset {offset} exceeds decoded length {len(out)} "
                f"at input offset {pos}"
            )
        if offset >= length:
            out += out[start : start + length]
        else:
            for i in range(length):
                out.append(out[start + i])
    return out
