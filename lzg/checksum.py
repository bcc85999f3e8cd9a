#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations


def lzg_checksum(data: bytes, start: int = 0) -> int:
    """Rolling additive checksum used by the LZG header.

    Two 16-bit sums over data[start:]: `a` starts at 1 and adds each byte,
    `b` adds every intermediate `a`. Result is `(b << 16) | a`.
    """
    a = 1
    b = 0
    for i in range(start, len(data)):
        a = (a + data[i]) & 0xFFFF
        b = (b + a) & 0xFFFF
    return (b << 16) | a
