#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict

REASON_OK = "ok"
REASON_ERROR = "error"
REASON_BAD_MAGIC = "bad_magic"
REASON_CHECKSUM_MISMATCH = "checksum_mismatch"
REASON_UNKNOWN_METHOD = "unknown_method"
REASON_CORRUPT_STREAM = "corrupt_stream"

REASON_TO_TEXT: Dict[str, str] = {
    REASON_OK: "ok",
    REASON_ERROR: "decode failed",
    REASON_BAD_MAGIC: "not an LZG block",
    REASON_CHECKSUM_MISMATCH: "checksum mismatch",
    REASON_UNKNOWN_METHOD: "unknown method",
    REASON_CORRUPT_STREAM: "corrupt stream",
}


class LZGError(ValueError):
    reason = REASON_ERROR


class BadMagicError(LZGError):
    reason = REASON_BAD_MAGIC


class ChecksumMismatchError(LZGError):
    reason = REASON_CHECKSUM_MISMATCH

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"checksum mismatch: header {expected:#010x} != computed {actual:#010x}")
        self.expected = expected
        self.actual = actual


class UnknownMethodError(LZGError):
    reason = REASON_UNKNOWN_METHOD

    def __init__(self, method: int) -> None:
        super().__init__(f"unknown method: {method}")
        self.method = method


class CorruptStreamError(LZGError):
    reason = REASON_CORRUPT_STREAM


def reason_text(reason: str) -> str:
    return REASON_TO_TEXT.get(str(reason), "unknown reason")
