#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import REASON_OK, CorruptStreamError, LZGError, reason_text
from .header import HEADER_SIZE, METHOD_COPY, coerce_bytes, method_name, parse_header, peek_decoded_size
from .lzg1 import decode_copy, decode_lzg1
from .output import DecodedData

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    ok: bool
    data: Optional[DecodedData]
    reason: str = REASON_OK
    message: str = ""

    @property
    def size(self) -> int:
        return len(self.data) if self.data is not None else 0


def decompress(blob: bytes, verify_size: bool = False) -> DecodedData:
    raw = coerce_bytes(blob)
    hdr = parse_header(raw)
    if verify_size and hdr.encoded_size != len(raw) - HEADER_SIZE:
        raise CorruptStreamError(
            f"encoded size mismatch: header {hdr.encoded_size} != actual {len(raw) - HEADER_SIZE}"
        )

    if hdr.method == METHOD_COPY:
        out = decode_copy(raw, hdr.payload_start)
    else:
        out = decode_lzg1(raw, hdr.payload_start, hdr.markers)

    if verify_size and len(out) != hdr.decoded_size:
        raise CorruptStreamError(f"decoded size mismatch: header {hdr.decoded_size} != actual {len(out)}")
    log.debug("decoded %s block: %d -> %d bytes", method_name(hdr.method), len(raw), len(out))
    return DecodedData(bytes(out))


def decode(blob: bytes, verify_size: bool = False) -> DecodeResult:
    """Decode an LZG block without raising on bad data.

    Format failures come back as a result with `ok=False` and a `reason`
    label (bad_magic, checksum_mismatch, unknown_method, corrupt_stream).
    Passing something that is not bytes-like is still a TypeError.
    """
    try:
        data = decompress(blob, verify_size=verify_size)
    except LZGError as e:
        log.debug("LZG decode rejected (%s): %s", e.reason, e)
        return DecodeResult(ok=False, data=None, reason=e.reason, message=str(e) or reason_text(e.reason))
    return DecodeResult(ok=True, data=data)


def decoded_size(blob: bytes) -> int:
    return peek_decoded_size(blob)
