from __future__ import annotations

import html as html_lib
from pathlib import Path
from typing import Dict, List

from .defaults import GROUPS, fields_in_group
from .formatting import format_currency
from .log import logger
from .models import Summary
from .series import MONTH_LABELS
from .utils import plain_number


def _format_line_items(summary: Summary, symbol: str) -> List[str]:
    lines = ["| Line item | Annual value |", "|---|---:|"]
    for name, value in summary.metrics.line_items.model_dump().items():
        lines.append(f"| {name.replace('_', ' ')} | {format_currency(round(value, 2), symbol)} |")
    return lines


def _format_inputs(summary: Summary) -> List[str]:
    values = summary.inputs.model_dump()
    lines = []
    for group in GROUPS:
        lines.append(f"### {group}")
        for spec in fields_in_group(group):
            lines.append(f"- {spec.label}: `{plain_number(values[spec.name])}`")
        lines.append("")
    return lines


def render_markdown(summary: Summary, currency_symbol: str = "$") -> str:
    metrics = summary.metrics
    lines = [
        f"# {summary.title}",
        "",
        f"Generated: `{summary.generated_at}`",
        "",
        "## Headline",
    ]
    lines.extend([f"- **{title}**: {value}" for title, value in summary.tiles.items()])
    lines.append(f"- Annual investment: {format_currency(metrics.annual_investment, currency_symbol)}")

    lines.extend(["", "## Savings by Category"])
    lines.extend([f"- {title}: {value}" for title, value in summary.category_tiles.items()])

    lines.extend(["", "## Line Items"])
    lines.extend(_format_line_items(summary, currency_symbol))

    lines.extend(["", "## Cumulative Savings", "", "| Month | Cumulative |", "|---|---:|"])
    for month, value in zip(MONTH_LABELS, summary.series):
        lines.append(f"| {month} | {format_currency(value, currency_symbol)} |")

    lines.extend(["", "## Notes"])
    if summary.notes:
        lines.extend([f"- {note}" for note in summary.notes])
    else:
        lines.append("- None")

    lines.extend(["", "## Inputs", ""])
    lines.extend(_format_inputs(summary))

    lines.extend(["## Assumptions"])
    lines.append(
        "- Each savings line applies a fixed capture fraction to the theoretical saving; "
        "hourly rates assume 2080 working hours per year."
    )
    lines.append(
        "- Latency and time-to-market benefits are heuristics and are not unit-consistent."
    )

    return "\n".join(lines)


def render_html(summary: Summary, currency_symbol: str = "$") -> str:
    md = render_markdown(summary, currency_symbol)
    return f"""<html><head><title>{html_lib.escape(summary.title)}</title></head><body><pre>{html_lib.escape(md)}</pre></body></html>"""


def write_report(summary: Summary, out_dir: Path, html: bool = False, currency_symbol: str = "$") -> Dict[str, str]:
    out_dir.mkdir(parents=True, exist_ok=True)
    md_path = out_dir / "report.md"
    md_path.write_text(render_markdown(summary, currency_symbol), encoding="utf-8")
    outputs = {"markdown": str(md_path)}
    if html:
        html_path = out_dir / "report.html"
        html_path.write_text(render_html(summary, currency_symbol), encoding="utf-8")
        outputs["html"] = str(html_path)
    logger.info("Report written to {}", out_dir)
    return outputs
