import json
from pathlib import Path
import click
from ngrom_core.formats import RomFormat
from .logic import check_formats

EXIT_FAILED_CHECK = 2


def _emit(result: dict) -> None:
    click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    if result["status"] != "PASS":
        raise SystemExit(EXIT_FAILED_CHECK)


@click.group()
def main():
    pass


@main.command("smd")
@click.argument("paths", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
def smd_cmd(paths):
    """Check that every file is an SMD dump."""
    _emit(check_formats(RomFormat.SMD, paths, quiet=True))


@main.command("bin")
@click.argument("paths", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
def bin_cmd(paths):
    """Check that every file is a linear BIN image."""
    _emit(check_formats(RomFormat.BIN, paths, quiet=True))


if __name__ == "__main__":
    main()
