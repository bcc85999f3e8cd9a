#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
lzgDec.py: decode an LZG compressed file.

Usage:
    python lzgDec.py infile [outfile] [--text {bytes,latin1,utf8}]

Without outfile the decoded data goes to stdout and progress to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from lzg import (
    DecodedData,
    LZGError,
    __version__,
    decoded_size,
    decompress,
    looks_like_lzg_block,
    method_name,
    parse_header,
)

VERSION = __version__

DEFAULTS = {
    "text": "bytes",
}

TEXT_CHOICES = ("bytes", "latin1", "utf8")


def out(msg: str) -> None:
    sys.stdout.write(msg + "\n")
    sys.stdout.flush()


def eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def render_output(data: DecodedData, text_mode: str, strict_utf8: bool) -> bytes:
    if text_mode == "latin1":
        return data.as_latin1_text().encode("utf-8")
    if text_mode == "utf8":
        return data.as_utf8_text(strict=strict_utf8).encode("utf-8", errors="surrogatepass")
    return data.as_bytes()


def print_info(blob: bytes, say: Callable[[str], None]) -> int:
    try:
        hdr = parse_header(blob)
    except LZGError as e:
        eprint(f"[ERROR] {e}")
        return 2
    say(f"method:        {method_name(hdr.method)} ({hdr.method})")
    say(f"decoded size:  {hdr.decoded_size}")
    say(f"encoded size:  {hdr.encoded_size}")
    say(f"checksum:      {hdr.checksum:#010x}")
    if hdr.markers is not None:
        say("markers:       " + " ".join(f"{m:#04x}" for m in hdr.markers))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="lzgDec.py",
        description="Decode an LZG compressed file (copy and LZG1 methods).",
    )
    ap.add_argument("infile", help="LZG compressed input file")
    ap.add_argument("outfile", nargs="?", default=None, help="output file (default: stdout)")
    ap.add_argument(
        "--text",
        choices=TEXT_CHOICES,
        default=DEFAULTS["text"],
        help=f"output projection; text is written as UTF-8 (default: {DEFAULTS['text']})",
    )
    ap.add_argument("--strict-utf8", action="store_true", help="reject malformed UTF-8 in --text utf8")
    ap.add_argument("--verify-size", action="store_true", help="check the size fields stored in the header")
    ap.add_argument("--info", action="store_true", help="print header fields and exit")
    ap.add_argument("--quiet", action="store_true", help="less terminal output")
    ap.add_argument("--verbose", action="store_true", help="enable debug logging")
    ap.add_argument("--version", action="version", version=f"lzgDec.py v{VERSION}")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Keep stdout clean for the payload when no outfile is given.
    to_stdout = args.outfile is None and not args.info

    def say(msg: str) -> None:
        if args.quiet:
            return
        if to_stdout:
            eprint(msg)
        else:
            out(msg)

    in_path = Path(args.infile)
    say(f'Loading from "{in_path}".')
    try:
        blob = in_path.read_bytes()
    except OSError as e:
        eprint(f'[ERROR] Unable to open file "{in_path}": {e}')
        return 2
    if not blob:
        eprint("[ERROR] Input file is empty.")
        return 2

    if args.info:
        return print_info(blob, out)

    if not looks_like_lzg_block(blob):
        eprint("Bad input data!")
        return 2

    say(f"Decompressing to {decoded_size(blob)} bytes.")
    try:
        data = decompress(blob, verify_size=args.verify_size)
    except LZGError as e:
        eprint("Decompression failed (bad data)!")
        eprint(f"[ERROR] {e.reason}: {e}")
        return 2

    try:
        payload = render_output(data, args.text, args.strict_utf8)
    except UnicodeDecodeError as e:
        eprint(f"[ERROR] decoded data is not valid UTF-8: {e}")
        return 2

    if to_stdout:
        sys.stdout.buffer.write(payload)
        sys.stdout.flush()
        return 0

    out_path = Path(args.outfile)
    say(f'Saving to "{out_path}".')
    try:
        out_path.write_bytes(payload)
    except OSError as e:
        eprint(f'[ERROR] Error writing "{out_path}": {e}')
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
