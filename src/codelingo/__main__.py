"""CLI entry point for codelingo.

Provides commands for identifying single files, checking the
statistics exclusion policy, and computing per-language statistics
for a directory tree.
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from codelingo import __version__
from codelingo.errors import CodelingoError

if TYPE_CHECKING:
    from codelingo.config.models import Config
    from codelingo.linguist import Linguist


def _load_config(ctx: click.Context) -> "Config":
    """Load configuration and set up logging."""
    from codelingo.config.loader import load_config
    from codelingo.utils.logging import configure_logging

    try:
        cfg = load_config(ctx.obj.get("config"))
    except CodelingoError as e:
        raise click.ClickException(str(e)) from e
    configure_logging(cfg.logging)
    return cfg


def _build(cfg: "Config") -> "Linguist":
    """Build the Linguist, reporting definition errors as CLI errors."""
    from codelingo.linguist import Linguist

    try:
        return Linguist.from_config(cfg)
    except CodelingoError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.pass_context
def cli(ctx: click.Context, config: Path | None) -> None:
    """Programming language identification.

    Detects the language of source files from their name, shebang,
    extension, editor modeline and content, and reports language
    statistics for whole directory trees.
    """
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.pass_context
def identify(ctx: click.Context, paths: tuple[Path, ...], as_json: bool) -> None:
    """Identify the language of files.

    Exits with status 1 if any file cannot be read.
    """
    cfg = _load_config(ctx)
    linguist = _build(cfg)

    results = []
    failed = False
    for path in paths:
        try:
            with path.open("rb") as f:
                data = f.read(cfg.sampling.max_bytes)
        except OSError as e:
            click.echo(f"{path}: cannot read ({e.strerror or e})", err=True)
            failed = True
            continue

        result = linguist.identify_file(path, data)
        if as_json:
            results.append(result.model_dump(mode="json"))
        elif result.is_match:
            click.echo(f"{result.path}: {result.language} ({result.strategy})")
        else:
            line = f"{result.path}: no match ({result.reason})"
            if result.candidates:
                line += f" [{', '.join(result.candidates)}]"
            click.echo(line)

    if as_json:
        click.echo(json.dumps(results, indent=2))
    if failed:
        ctx.exit(1)


@cli.command()
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def vendored(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Show whether paths are excluded from language statistics.

    Paths are checked as given; they do not need to exist.
    """
    linguist = _build(_load_config(ctx))

    for path in paths:
        kind = linguist.exclusion_filter.excluded_as(path)
        if kind is None:
            click.echo(f"{path}: counted")
        else:
            click.echo(f"{path}: excluded ({kind})")


@cli.command()
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--files", "with_files", is_flag=True, help="Include per-file results")
@click.pass_context
def stats(ctx: click.Context, directory: Path, as_json: bool, with_files: bool) -> None:
    """Show language statistics for a directory tree.

    Files matched by .gitignore are skipped. Vendored, generated,
    documentation and binary files are counted separately.
    """
    from codelingo.services.content import FilesystemContentProvider
    from codelingo.services.scanner import TreeScanner

    cfg = _load_config(ctx)
    if with_files:
        cfg.analysis.include_files = True
    linguist = _build(cfg)

    scanner = TreeScanner(directory, respect_gitignore=cfg.filter.respect_gitignore)
    provider = FilesystemContentProvider(scanner.root, cfg.sampling.max_bytes)
    report = linguist.analyze_tree(scanner.iter_files(), provider)

    if as_json:
        click.echo(report.model_dump_json(indent=2))
        return

    if not report.languages:
        click.echo("No languages detected.")
    else:
        percentages = report.percentages()
        click.echo("\nLanguages:")
        click.echo("-" * 60)
        for name, language_stats in report.sorted_languages():
            click.echo(
                f"  {percentages[name]:6.2f}%  {name:<24} "
                f"{language_stats.bytes} bytes, {language_stats.files} files"
            )

    click.echo(f"\nUnknown: {report.unknown.files} files, {report.unknown.bytes} bytes")
    click.echo(f"Excluded: {report.excluded.files} files, {report.excluded.bytes} bytes")
    if report.unreadable:
        click.echo(f"Unreadable: {len(report.unreadable)} files")

    if with_files:
        click.echo("\nFiles:")
        for entry in report.files:
            if entry.excluded_as is not None:
                label = f"excluded ({entry.excluded_as})"
            elif entry.result is not None and entry.result.is_match:
                label = f"{entry.result.language} ({entry.result.strategy})"
            else:
                label = "unknown"
            click.echo(f"  {entry.path}: {label}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
