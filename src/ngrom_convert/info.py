"""Cartridge header report.

The Genesis cartridge header lives at 0x100-0x1FF of the ROM's first
decoded block. Fields are described by a fixed table and rendered by
iterating over it.

Field layout as documented for early dump tools: the product code seems to
start at 0x183 and run 11 bytes (0x182 may belong to the software type), the
modem data field may only be 10 bytes wide, and the address fields may have
been misinterpreted. Values are printed as stored, without validation.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable

import click

from ngrom_core.codec import decode_smd_block
from ngrom_core.formats import RomFormat, sniff_format
from ngrom_core.protocol import HEADER_LEN, SMD_BLOCK_LEN
from ngrom_verify.const import RomReadError

SOFTWARE_TYPES = {
    b"GM": b"Game",
    b"Al": b"Educational",
}


def _ascii(raw: bytes) -> bytes:
    # Byte-for-byte; no trimming, non-printables kept.
    return raw


def _software_type(raw: bytes) -> bytes:
    return SOFTWARE_TYPES.get(raw, raw)


def _hex(raw: bytes) -> bytes:
    return b"0x" + raw.hex().upper().encode("ascii")


# (label, offset, length, decoder)
HEADER_FIELDS: list[tuple[str, int, int, Callable[[bytes], bytes]]] = [
    ("System", 0x100, 16, _ascii),
    ("Copyright", 0x110, 16, _ascii),
    ("Game name (domestic)", 0x120, 48, _ascii),
    ("Game name (overseas)", 0x150, 48, _ascii),
    ("Software type", 0x180, 2, _software_type),
    ("Product code and version", 0x183, 11, _ascii),
    ("Checksum", 0x18E, 2, _hex),
    ("I/O support", 0x190, 16, _ascii),
    ("ROM start address", 0x1A0, 4, _hex),
    ("ROM end address", 0x1A4, 4, _hex),
    ("Modem data", 0x1BC, 20, _ascii),
    ("Memo", 0x1C8, 40, _ascii),
    ("Countries", 0x1F0, 3, _ascii),
]

LABEL_WIDTH = 26


def read_header(path) -> tuple[RomFormat, bytes]:
    """Return the detected format and the 512-byte logical header of ``path``.

    SMD dumps have their first block decoded so the header reads the same
    as in a BIN image.
    """
    path = str(path)
    try:
        f = open(path, "rb")
    except OSError as e:
        raise RomReadError("E_OPEN", e.strerror or str(e), path) from e

    with f:
        try:
            header = f.read(HEADER_LEN)
        except OSError as e:
            raise RomReadError("E_SHORT_READ", e.strerror or str(e), path) from e
        if len(header) < HEADER_LEN:
            raise RomReadError("E_SHORT_READ", f"{len(header)} of {HEADER_LEN} header bytes", path)

        fmt = sniff_format(header)
        if fmt is RomFormat.UNKNOWN:
            raise RomReadError("E_UNKNOWN_FORMAT", path=path)
        if fmt is RomFormat.BIN:
            return fmt, header

        # Header bytes already consumed; the next block holds the cartridge header.
        try:
            block = f.read(SMD_BLOCK_LEN)
        except OSError as e:
            raise RomReadError("E_SHORT_READ", e.strerror or str(e), path) from e
        if len(block) < SMD_BLOCK_LEN:
            raise RomReadError("E_SHORT_READ", f"{len(block)} of {SMD_BLOCK_LEN} block bytes", path)

    return fmt, bytes(decode_smd_block(block)[:HEADER_LEN])


def header_values(header: bytes) -> list[tuple[str, bytes]]:
    """Rendered field values as raw bytes, in table order."""
    values = []
    for label, offset, length, decode in HEADER_FIELDS:
        values.append((label, decode(bytes(header[offset:offset + length]))))
    return values


def header_fields(header: bytes) -> list[tuple[str, str]]:
    # latin-1 maps each byte to the code point of the same value.
    return [(label, value.decode("latin-1")) for label, value in header_values(header)]


def header_lines(header: bytes) -> list[bytes]:
    """One report line per field, label prefix plus the untouched field bytes."""
    return [f"{label:>{LABEL_WIDTH}}: ".encode("ascii") + value for label, value in header_values(header)]


def show_info_list(paths) -> dict:
    """Print the cartridge header of each file.

    Unreadable or unrecognized files are reported and skipped.
    """
    shown: list[str] = []
    skipped: list[str] = []
    errors: list[dict] = []

    for p in paths:
        path = str(p)
        click.echo(f"Showing info from ROM data for file: {path}")
        try:
            _, header = read_header(path)
        except RomReadError as e:
            click.echo(f"  NGROM ERROR: {e}", err=True)
            click.echo("  ... skipping.")
            errors.append(e.as_entry())
            skipped.append(path)
            continue

        # Bytes go straight to the binary stream: no ANSI stripping, no re-encoding.
        for line in header_lines(header):
            click.echo(line)
        shown.append(path)

    status = "PASS" if not errors else "FAIL"
    return {"status": status, "error_count": len(errors), "errors": errors, "shown": shown, "skipped": skipped}
