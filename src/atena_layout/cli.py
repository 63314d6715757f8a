from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from atena_layout.config import LayoutSettings
from atena_layout.core.errors import AtenaValidationError
from atena_layout.data import PREVIEW_COLUMNS, iter_records, read_address_book
from atena_layout.models.errors import AtenaLayoutError
from atena_layout.service import LayoutService

app = typer.Typer(help="Lay out はがきデザインキット address books for postcard printing.")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _settings(
    max_line_length: Optional[int],
    honorific: Optional[str],
    encoding: Optional[str],
) -> LayoutSettings:
    overrides = {
        key: value
        for key, value in (
            ("max_line_length", max_line_length),
            ("default_honorific", honorific),
            ("encoding", encoding),
        )
        if value is not None
    }
    try:
        base = LayoutSettings.from_env()
        return LayoutSettings.create(**{**base.model_dump(), **overrides})
    except AtenaValidationError as exc:
        typer.echo(f"Invalid settings: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _load(csv_path: Path, encoding: str):
    try:
        return read_address_book(csv_path, encoding=encoding)
    except AtenaLayoutError as exc:
        typer.echo(f"CSV読込エラー: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def layout(
    csv_path: Path = typer.Argument(..., help="Address book CSV export."),
    max_line_length: Optional[int] = typer.Option(
        None, "--max-line-length", "-w", help="Characters per address line (default 20)."
    ),
    honorific: Optional[str] = typer.Option(
        None, "--honorific", help="Honorific for rows that leave it blank (default 様)."
    ),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", "-e", help="File encoding (default cp932)."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write JSON Lines here instead of stdout."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Write one JSON layout per addressee, in file order."""
    _configure_logging(verbose)
    settings = _settings(max_line_length, honorific, encoding)

    df = _load(csv_path, settings.encoding)
    service = LayoutService(settings)
    lines = [
        result.layout.model_dump_json() for result in service.build_batch(iter_records(df))
    ]

    if output is None:
        for line in lines:
            typer.echo(line)
    else:
        try:
            output.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        except OSError as exc:
            typer.echo(f"Could not write {output}: {exc}", err=True)
            raise typer.Exit(code=1) from exc
        typer.echo(f"Wrote {len(lines)} layouts to {output}")


@app.command()
def preview(
    csv_path: Path = typer.Argument(..., help="Address book CSV export."),
    encoding: Optional[str] = typer.Option(
        None, "--encoding", "-e", help="File encoding (default cp932)."
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Rows to show."),
) -> None:
    """Show the address book rows as a table."""
    settings = _settings(None, None, encoding)
    df = _load(csv_path, settings.encoding)

    table = Table(title="宛名データ一覧")
    for column in PREVIEW_COLUMNS:
        table.add_column(column, no_wrap=True, overflow="ellipsis", max_width=18)

    rows = df if limit is None else df.head(limit)
    for record in iter_records(rows):
        table.add_row(*[(record.get(column) or "").strip() or "-" for column in PREVIEW_COLUMNS])

    console = Console(width=240)
    console.print(table)
    typer.echo(f"{len(df)} 件の宛名を読み込みました。")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
