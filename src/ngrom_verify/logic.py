from pathlib import Path

import click

from ngrom_core.formats import RomFormat, has_bin_marker, has_smd_marker
from ngrom_core.protocol import HEADER_LEN
from .const import RomReadError


def read_header_bytes(path, length: int = HEADER_LEN) -> bytes:
    """Read exactly ``length`` bytes from the start of ``path``.

    Raises RomReadError with E_OPEN or E_SHORT_READ.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise RomReadError("E_OPEN", e.strerror or str(e), str(path)) from e
    with f:
        try:
            header = f.read(length)
        except OSError as e:
            raise RomReadError("E_SHORT_READ", e.strerror or str(e), str(path)) from e
    if len(header) < length:
        raise RomReadError("E_SHORT_READ", f"{len(header)} of {length} bytes", str(path))
    return header


def _check_header(fmt: RomFormat, header: bytes, path: str) -> None:
    if fmt is RomFormat.BIN:
        if not has_bin_marker(header):
            raise RomReadError("E_NOT_BIN", path=path)
        return

    # SMD: copier marker present, and no linear-image marker pretending to be one.
    if not has_smd_marker(header):
        raise RomReadError("E_NOT_SMD", path=path)
    if has_bin_marker(header):
        raise RomReadError("E_LOOKS_BIN", path=path)


def check_formats(fmt: RomFormat, paths, quiet: bool = False) -> dict:
    """Check each file's header against ``fmt``.

    Every file is checked even after a failure; status is PASS only if all pass.
    Progress goes to the console unless ``quiet`` is set.
    """
    if fmt not in (RomFormat.SMD, RomFormat.BIN):
        raise ValueError(f"Format checks not implemented for {fmt!r}")

    def say(text: str, err: bool = False) -> None:
        if not quiet:
            click.echo(text, err=err)

    errors = []
    files = []
    for p in paths:
        path = str(Path(p))
        say(f"Checking file for {fmt.name} format: {path}")
        try:
            _check_header(fmt, read_header_bytes(path), path)
        except RomReadError as e:
            if e.code == "E_LOOKS_BIN":
                say("  ...FAILED! (appears to be BIN format)")
            elif e.code in ("E_NOT_SMD", "E_NOT_BIN"):
                say("  ...FAILED!")
            else:
                say(f"  NGROM ERROR: {e}", err=True)
            errors.append(e.as_entry())
            files.append({"path": path, "status": "FAIL", "code": e.code})
            continue

        say("  ...GOOD!")
        files.append({"path": path, "status": "PASS"})

    status = "PASS" if not errors else "FAIL"
    return {"status": status, "format": fmt.value, "error_count": len(errors), "errors": errors, "files": files}
