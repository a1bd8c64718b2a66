from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from .analysis import evaluate_scenarios, linear_values, sweep
from .charts import render_charts
from .config import settings
from .defaults import FIELD_SPECS, default_inputs, write_default_inputs
from .engine import compute, summarize
from .io import InputError, build_inputs, load_scenarios, write_metrics_json
from .log import configure_logging
from .models import InputRecord
from .report import render_markdown, write_report

app = typer.Typer(add_completion=False, help="MLOps platform ROI projections.")


def _inputs_or_exit(inputs: Optional[Path], overrides: List[str]) -> InputRecord:
    try:
        return build_inputs(inputs, overrides)
    except InputError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Log level"),
) -> None:
    configure_logging(log_level, settings.log_file)


@app.command()
def defaults(
    out: Optional[Path] = typer.Option(None, "--out", help="Write the default inputs to this file"),
    camel: bool = typer.Option(False, help="Use camelCase field names"),
) -> None:
    if out is None:
        typer.echo(default_inputs().model_dump_json(indent=2, by_alias=camel))
        return
    write_default_inputs(out, by_alias=camel)
    typer.echo(f"Wrote {out}")


@app.command()
def fields() -> None:
    for spec in FIELD_SPECS:
        typer.echo(f"{spec.name:<28} {spec.group:<26} [{spec.minimum:g}, {spec.maximum:g}] step {spec.step:g}")


@app.command(name="compute")
def compute_cmd(
    inputs: Optional[Path] = typer.Option(None, "--inputs", help="JSON file of field values"),
    overrides: List[str] = typer.Option([], "--set", help="Override one field, e.g. --set gpu_utilization=60"),
    as_json: bool = typer.Option(False, "--json", help="Print the full metrics as JSON"),
    out: Optional[Path] = typer.Option(None, "--out", help="Also write the metrics JSON here"),
) -> None:
    record = _inputs_or_exit(inputs, overrides)
    if as_json or out:
        metrics = compute(record)
        if out:
            write_metrics_json(out, metrics)
        if as_json:
            typer.echo(metrics.model_dump_json(indent=2))
            return

    summary = summarize(record, settings.currency_symbol)
    for title, value in summary.tiles.items():
        typer.echo(f"{title}: {value}")
    for title, value in summary.category_tiles.items():
        typer.echo(f"  {title}: {value}")
    for note in summary.notes:
        typer.echo(f"Note: {note}")


@app.command()
def report(
    inputs: Optional[Path] = typer.Option(None, "--inputs", help="JSON file of field values"),
    overrides: List[str] = typer.Option([], "--set", help="Override one field, e.g. --set gpu_utilization=60"),
    out_dir: Path = typer.Option(Path(settings.output_dir), help="Output directory"),
    html: bool = typer.Option(False, help="Also render HTML"),
) -> None:
    record = _inputs_or_exit(inputs, overrides)
    summary = summarize(record, settings.currency_symbol)
    out_dir.mkdir(parents=True, exist_ok=True)

    summary_path = out_dir / "summary.json"
    summary_path.write_text(summary.model_dump_json(indent=2), encoding="utf-8")

    write_report(summary, out_dir, html=html, currency_symbol=settings.currency_symbol)
    render_charts(summary, out_dir / "charts", settings.currency_symbol, settings.chart_template)

    typer.echo(f"Wrote {summary_path}")
    typer.echo(f"Report written to {out_dir}")
    typer.echo(f"Charts in {out_dir / 'charts'}")


@app.command(name="dump-markdown")
def dump_markdown(
    inputs: Optional[Path] = typer.Option(None, "--inputs", help="JSON file of field values"),
    overrides: List[str] = typer.Option([], "--set", help="Override one field, e.g. --set gpu_utilization=60"),
) -> None:
    record = _inputs_or_exit(inputs, overrides)
    typer.echo(render_markdown(summarize(record, settings.currency_symbol), settings.currency_symbol))


@app.command(name="sweep")
def sweep_cmd(
    field: str = typer.Option(..., "--field", help="Field to vary"),
    start: float = typer.Option(..., "--start"),
    stop: float = typer.Option(..., "--stop"),
    steps: int = typer.Option(11, "--steps", min=1),
    inputs: Optional[Path] = typer.Option(None, "--inputs", help="JSON file of field values"),
    overrides: List[str] = typer.Option([], "--set", help="Override one field, e.g. --set gpu_utilization=60"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write the table as CSV"),
) -> None:
    record = _inputs_or_exit(inputs, overrides)
    try:
        df = sweep(record, field, linear_values(start, stop, steps))
    except InputError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out, index=False)
        typer.echo(f"Wrote {out}")
    else:
        typer.echo(df.to_string(index=False))


@app.command()
def scenarios(
    input: Path = typer.Option(..., "--input", help="CSV with one scenario per row"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write the results as CSV"),
) -> None:
    try:
        df = evaluate_scenarios(load_scenarios(input))
    except InputError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out, index=False)
        typer.echo(f"Wrote {out}")
    else:
        typer.echo(df.to_string(index=False))


if __name__ == "__main__":
    app()
