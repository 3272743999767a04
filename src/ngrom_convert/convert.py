"""SMD to BIN batch conversion."""
from __future__ import annotations

import os
from pathlib import Path

import click

from ngrom_core.codec import decode_smd_block
from ngrom_core.policy import FileCheckAction, StopRequested, apply_action
from ngrom_core.protocol import HEADER_LEN, MIN_SMD_FILE_LEN, SMD_BLOCK_LEN
from ngrom_verify.const import RomReadError

SMD_SUFFIX = "smd"
BIN_SUFFIX = "bin"


def output_name(path) -> str:
    """Output file name for ``path``: "x.smd" -> "x.bin", anything else gets ".bin" appended."""
    name = Path(path).name
    _, dot, suffix = name.rpartition(".")
    if dot and suffix.lower() == SMD_SUFFIX:
        return name[: -len(SMD_SUFFIX)] + BIN_SUFFIX
    return f"{name}.{BIN_SUFFIX}"


def count_blocks(size: int, path: str) -> int:
    """Number of SMD blocks in a dump of ``size`` bytes.

    Raises RomReadError if the dump is undersized or not block aligned.
    """
    if size < MIN_SMD_FILE_LEN:
        raise RomReadError("E_TOO_SMALL", f"only {size} bytes", path)
    blocks, extra = divmod(size - HEADER_LEN, SMD_BLOCK_LEN)
    if extra:
        raise RomReadError("E_BLOCK_BOUNDARY", f"{extra} trailing bytes", path)
    return blocks


def convert_file(in_path: str, out_path: str) -> int:
    """Convert one SMD dump to a BIN image. Returns the number of blocks written."""
    try:
        size = os.path.getsize(in_path)
    except OSError as e:
        raise RomReadError("E_OPEN", e.strerror or str(e), in_path) from e
    num_blocks = count_blocks(size, in_path)

    try:
        f_in = open(in_path, "rb")
    except OSError as e:
        raise RomReadError("E_OPEN", e.strerror or str(e), in_path) from e

    with f_in:
        try:
            f_out = open(out_path, "wb")
        except OSError as e:
            raise RomReadError("E_OPEN", e.strerror or str(e), out_path) from e

        with f_out:
            f_in.seek(HEADER_LEN)
            smd_block = bytearray(SMD_BLOCK_LEN)
            bin_block = bytearray(SMD_BLOCK_LEN)
            for i in range(num_blocks):
                try:
                    n = f_in.readinto(smd_block)
                except OSError as e:
                    raise RomReadError("E_SHORT_READ", f"SMD block {i}: {e.strerror or e}", in_path) from e
                if n != SMD_BLOCK_LEN:
                    raise RomReadError("E_SHORT_READ", f"SMD block {i}: {n} of {SMD_BLOCK_LEN} bytes", in_path)

                decode_smd_block(smd_block, bin_block)

                try:
                    written = f_out.write(bin_block)
                except OSError as e:
                    raise RomReadError("E_SHORT_WRITE", f"block {i}: {e.strerror or e}", out_path) from e
                if written != SMD_BLOCK_LEN:
                    raise RomReadError("E_SHORT_WRITE", f"block {i}: {written} of {SMD_BLOCK_LEN} bytes", out_path)

    return num_blocks


def convert_files(paths, outdir, collision: FileCheckAction) -> dict:
    """Convert each SMD dump in ``paths`` into ``outdir``.

    The first fatal error ends the batch; outputs already written are kept.
    Existing outputs are handled by ``collision``.
    """
    converted: list[str] = []
    skipped: list[str] = []

    def fail(entry: dict) -> dict:
        return {
            "status": "FAIL",
            "error_count": 1,
            "errors": [entry],
            "converted": converted,
            "skipped": skipped,
        }

    for p in paths:
        in_path = str(p)
        out_path = os.path.join(str(outdir), output_name(in_path))

        click.echo(f"Converting {in_path}")
        click.echo(f"        to {out_path}")

        if os.path.exists(out_path):
            try:
                proceed = apply_action(
                    collision,
                    "Output file already exists!",
                    skip_note="  ...skipping!",
                )
            except StopRequested:
                return fail(RomReadError("E_OUTPUT_EXISTS", path=out_path).as_entry())
            if not proceed:
                skipped.append(in_path)
                continue

        try:
            convert_file(in_path, out_path)
        except RomReadError as e:
            click.echo(f"  NGROM ERROR: {e}", err=True)
            return fail(e.as_entry())

        click.echo("  Conversion complete!")
        converted.append(in_path)

    return {"status": "PASS", "error_count": 0, "errors": [], "converted": converted, "skipped": skipped}
