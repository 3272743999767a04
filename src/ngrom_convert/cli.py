"""ngrom - Genesis ROM conversion (SMD -> BIN) utility."""
from __future__ import annotations

import click

from ngrom_core import __version__
from ngrom_core.formats import RomFormat
from ngrom_core.policy import ACTION_CHOICES, FileCheckAction, StopRequested, apply_action
from ngrom_verify.logic import check_formats
from ngrom_convert.convert import convert_files
from ngrom_convert.info import show_info_list

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_STOPPED = 2

DEFAULT_CHECK_ACTION = FileCheckAction.STOP.value
DEFAULT_COLLISION_ACTION = FileCheckAction.SKIP.value
DEFAULT_OUTDIR = "."


def run(
    files: list[str],
    info: bool = False,
    checks: FileCheckAction = FileCheckAction.STOP,
    collision: FileCheckAction = FileCheckAction.SKIP,
    outdir: str = DEFAULT_OUTDIR,
) -> int:
    """Check, then report or convert ``files``. Returns the process exit code."""
    if checks is FileCheckAction.SKIP:
        click.echo("Skipping SMD format checks...")
    else:
        result = check_formats(RomFormat.SMD, files)
        if result["status"] != "PASS":
            try:
                apply_action(
                    checks,
                    "one or more files failed SMD format check",
                    warn_note="  continuing...",
                    announce_stop=False,
                )
            except StopRequested:
                click.echo("NGROM stopping due to failed SMD format check on one or more files")
                return EXIT_STOPPED

    if info:
        show_info_list(files)
        return EXIT_OK

    result = convert_files(files, outdir, collision)
    if result["status"] != "PASS":
        click.echo("NGROM stopping due to error writing an output file")
        return EXIT_STOPPED
    return EXIT_OK


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, type=click.Path(path_type=str))
@click.option("-i", "--info", is_flag=True, help="Show information about the file(s) instead of doing conversion(s).")
@click.option(
    "-c",
    "--checks",
    type=click.Choice(ACTION_CHOICES),
    default=DEFAULT_CHECK_ACTION,
    show_default=True,
    help="ROM format checks. \"stop\" exits if any check fails, \"warn\" reports and continues, \"skip\" performs no checks.",
)
@click.option(
    "-f",
    "--file-collision",
    "file_collision",
    type=click.Choice(ACTION_CHOICES),
    default=DEFAULT_COLLISION_ACTION,
    show_default=True,
    help="Action when an output file already exists. \"stop\" exits, \"warn\" overwrites, \"skip\" leaves it and moves on.",
)
@click.option(
    "-o",
    "--outdir",
    type=click.Path(file_okay=False, path_type=str),
    default=DEFAULT_OUTDIR,
    help="Output directory. Ignored with --info.  [default: current directory]",
)
@click.version_option(__version__, prog_name="ngrom")
def ngrom(files: tuple[str, ...], info: bool, checks: str, file_collision: str, outdir: str) -> int:
    """New GROM - Genesis ROM conversion utility.

    Converts SMD dumps in FILES to BIN images. Output names take the .bin
    extension, replacing .smd where present.
    """
    if not files:
        raise click.UsageError("No files specified.")

    return run(
        list(files),
        info=info,
        checks=FileCheckAction.parse(checks),
        collision=FileCheckAction.parse(file_collision),
        outdir=outdir,
    )


def main(args: list[str] | None = None) -> None:
    try:
        rc = ngrom.main(args=args, prog_name="ngrom", standalone_mode=False)
    except click.UsageError as e:
        click.echo(f"NGROM ERROR: {e.format_message()}", err=True)
        if e.ctx is not None:
            click.echo(e.ctx.get_help(), err=True)
        raise SystemExit(EXIT_USAGE)
    except click.ClickException as e:
        e.show()
        raise SystemExit(EXIT_USAGE)
    except click.Abort:
        raise SystemExit(EXIT_USAGE)
    except Exception as e:
        # Fail closed, with a single-line reason.
        click.echo(f"FATAL: {e}", err=True)
        raise SystemExit(EXIT_STOPPED)
    raise SystemExit(rc or EXIT_OK)


if __name__ == "__main__":
    main()
