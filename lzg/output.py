#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass
from typing import List

REPLACEMENT_CHAR = "\ufffd"


def _utf8_lenient(data: bytes) -> str:
    """Minimal 1/2/3-byte UTF-8 reader compatible with historical LZG decoders.

    Continuation bytes are not range-checked and 4-byte sequences are not
    understood. A sequence cut off by the end of data becomes U+FFFD.
    """
    out: List[str] = []
    i = 0
    n = len(data)
    while i < n:
        c = data[i]
        if c < 0x80:
            out.append(chr(c))
            i += 1
        elif 0xC0 <= c < 0xE0:
            if i + 1 >= n:
                out.append(REPLACEMENT_CHAR)
                break
            out.append(chr(((c & 0x1F) << 6) | (data[i + 1] & 0x3F)))
            i += 2
        else:
            if i + 2 >= n:
                out.append(REPLACEMENT_CHAR)
                break
            out.append(chr(((c & 0x0F) << 12) | ((data[i + 1] & 0x3F) << 6) | (data[i + 2] & 0x3F)))
            i += 3
    return "".join(out)


@dataclass(frozen=True)
class DecodedData:
    data: bytes

    def __len__(self) -> int:
        return len(self.data)

    def as_bytes(self) -> bytes:
        return self.data

    def as_latin1_text(self) -> str:
        return self.data.decode("latin-1")

    def as_utf8_text(self, strict: bool = False) -> str:
        if strict:
            return self.data.decode("utf-8", errors="strict")
        return _utf8_lenient(self.data)
