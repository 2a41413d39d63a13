# src/lstree/cli/commands.py
from __future__ import annotations
from pathlib import Path
from typing import List, Optional, Tuple

import click

# relative imports ONLY
from ..config import BOOL_VALUES, ConfigError, load_settings, parse_bool
from ..core.errors import TreeError
from ..core.renderer import HierarchyRenderer, RenderOptions
from ..core.summary import format_summary
from ..utils.io_paths import printable, write_lines
from ..utils.log import get_logger, setup_logging

log = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BoolFlag(click.ParamType):
    """true / false / 1 / 0 (also yes/no, on/off; case-insensitive)."""

    name = "true|false"

    def convert(self, value, param, ctx):
        if isinstance(value, bool):
            return value
        try:
            return parse_bool(str(value))
        except ValueError:
            self.fail(f"{value!r} is not one of {', '.join(BOOL_VALUES)}.", param, ctx)


BOOL_FLAG = BoolFlag()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("directory_path", default=".", required=False)
@click.option("-x", "--x_spacing", "x_spacing", type=click.IntRange(min=0), default=None,
              help="Horizontal spacing (number of spaces). Defaults to 3.")
@click.option("-y", "--y_spacing", "y_spacing", type=click.IntRange(min=0), default=None,
              help="Vertical spacing (number of lines). Defaults to 1.")
@click.option("-s", "--sort", "sort_entries", type=BOOL_FLAG, default=None,
              help="Sort entries by name. Defaults to true.")
@click.option("-i", "--ignore", "ignore_names", multiple=True, metavar="NAME",
              help="Skip entries with exactly this name. Repeatable.")
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Also write the tree and summary to this file.")
@click.option("--count-root/--no-count-root", "count_root", default=None,
              help="Count the root directory in the directory total.")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="TOML config file (default: $LSTREE_CONFIG or ./lstree.toml).")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help="Diagnostics level on stderr.")
@click.version_option(package_name="lstree", prog_name="lstree")
def cli(
    directory_path: str,
    x_spacing: Optional[int],
    y_spacing: Optional[int],
    sort_entries: Optional[bool],
    ignore_names: Tuple[str, ...],
    output_path: Optional[Path],
    count_root: Optional[bool],
    config_path: Optional[Path],
    log_level: Optional[str],
):
    """Print the directory tree rooted at DIRECTORY_PATH (default: current directory)."""
    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        raise click.UsageError(str(exc))

    setup_logging(log_level or settings.app.log_level)

    cfg = settings.render
    ignore = list(cfg.ignore)
    ignore += [name for name in ignore_names if name not in ignore]
    options = RenderOptions(
        x_spacing=cfg.x_spacing if x_spacing is None else x_spacing,
        y_spacing=cfg.y_spacing if y_spacing is None else y_spacing,
        sort_entries=cfg.sort if sort_entries is None else sort_entries,
        ignore_names=tuple(ignore),
        count_root=cfg.count_root if count_root is None else count_root,
    )

    lines: List[str] = []

    def _write(line: str) -> None:
        click.echo(line)
        lines.append(line)

    renderer = HierarchyRenderer(options, write=_write)
    try:
        counters = renderer.render(directory_path)
    except TreeError as exc:
        click.echo(f"Error: {printable(str(exc))}", err=True)
        raise SystemExit(1)

    # a single file always comes out as "0 directories, 1 file"
    summary = format_summary(*counters.totals)
    click.echo()
    click.echo(summary)
    lines += ["", summary]

    if counters.errors:
        log.warning("%d subtree(s) skipped", len(counters.errors))

    if output_path is not None:
        try:
            out = write_lines(lines, output_path)
        except OSError as exc:
            raise click.FileError(str(output_path), hint=exc.strerror or str(exc))
        click.echo(f"Saved to {printable(str(out))}", err=True)


if __name__ == "__main__":
    cli()
