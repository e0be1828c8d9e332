"""
Results rendering for approximation benchmarks.

Provides console text, an HTML results table, matplotlib charts and JSON
export. Every reporter consumes ``ResultSet`` objects only.
"""

import html
import json
import re
from pathlib import Path
from typing import Callable, Optional

import numpy as np

from .result import ErrorSeries, ResultRecord, ResultSet


def slugify(text: str) -> str:
    """Filesystem friendly version of a suite name."""
    slug = re.sub(r"[^A-Za-z0-9]+", "_", text).strip("_").lower()
    return slug or "results"


def format_range(input_range: tuple) -> str:
    """Render a scalar or pair range as ``(low, high)``."""

    def fmt(value) -> str:
        if isinstance(value, tuple):
            return "(" + ", ".join(fmt(v) for v in value) + ")"
        if isinstance(value, (int, np.integer)):
            return str(int(value))
        return f"{float(value):g}"

    low, high = input_range
    return f"({fmt(low)}, {fmt(high)})"


class ConsoleReporter:
    """Generates console/CLI reports."""

    def __init__(self, use_color: bool = True):
        self.use_color = use_color

    def _color(self, text: str, color: str) -> str:
        """Apply ANSI color if enabled."""
        if not self.use_color:
            return text

        colors = {
            "green": "\033[92m",
            "red": "\033[91m",
            "yellow": "\033[93m",
            "blue": "\033[94m",
            "bold": "\033[1m",
            "reset": "\033[0m",
        }

        return f"{colors.get(color, '')}{text}{colors['reset']}"

    def format_value(self, value) -> str:
        """Format an error statistic for display."""
        return f"{float(value):.6g}"

    def format_ns(self, ns: float) -> str:
        """Format a per-call duration for display."""
        return f"{ns:.2f} ns / call"

    def _errors_line(self, label: str, errors: ErrorSeries) -> str:
        fv = self.format_value
        return (
            f"{label}: ({fv(errors.minimum)}, {fv(errors.maximum)}), "
            f"mean: {fv(errors.mean)}, median: {fv(errors.median)}, "
            f"variance: {fv(errors.variance)}"
        )

    def single_result(self, record: ResultRecord) -> str:
        """Generate report for a single candidate."""
        lines = []
        lines.append(self._color(f"{record.name} - {record.description}", "bold"))
        lines.append(self._errors_line("Absolute error", record.absolute_errors))
        lines.append(self._errors_line("Relative error", record.relative_errors))
        lines.append(f"Standard deviation: {self.format_value(record.stddev)}")
        lines.append(f"Execution time: {self.format_ns(record.ns_per_call)}")
        return "\n".join(lines)

    def result_set(self, results: ResultSet) -> str:
        """Generate the full report for a suite."""
        if not results:
            return "No results to display"

        lines = []
        lines.append(self._color(f"{'=' * 70}", "blue"))
        lines.append(self._color(f"Testing: {results.suite_name}", "bold"))
        lines.append(self._color(f"{'=' * 70}", "blue"))
        lines.append(
            f"Input range: {format_range(results.input_range)}, "
            f"{results.sample_count} samples in range"
        )
        lines.append(
            "Approximate loop and call overhead (already subtracted): "
            f"{self.format_ns(results.overhead_ns_per_call)}"
        )
        lines.append("Tested functions:")

        for record in results:
            lines.append("")
            lines.append(self.single_result(record))

        return "\n".join(lines)

    def comparison_table(self, results: ResultSet) -> str:
        """Generate a compact comparison table, one row per candidate."""
        if not results:
            return "No results to display"

        headers = ["Method", "Abs. max", "Abs. mean", "Rel. max", "Rel. mean", "Stddev", "ns/call"]
        col_widths = [32, 12, 12, 12, 12, 12, 10]

        lines = []
        header_row = ""
        for i, header in enumerate(headers):
            header_row += f"{header:<{col_widths[i]}}"
        lines.append(self._color(header_row, "bold"))
        lines.append("-" * sum(col_widths))

        fastest = min(r.ns_per_call for r in results)
        for record in results:
            label = f"{record.name} {record.description}"
            label = label[:29] + "..." if len(label) > 32 else label
            row = [f"{label:<{col_widths[0]}}"]
            row.append(f"{self.format_value(record.absolute_errors.maximum):<{col_widths[1]}}")
            row.append(f"{self.format_value(record.absolute_errors.mean):<{col_widths[2]}}")
            row.append(f"{self.format_value(record.relative_errors.maximum):<{col_widths[3]}}")
            row.append(f"{self.format_value(record.relative_errors.mean):<{col_widths[4]}}")
            row.append(f"{self.format_value(record.stddev):<{col_widths[5]}}")
            speed = f"{record.ns_per_call:.1f}"
            if record.ns_per_call == fastest and len(results) > 1:
                speed = self._color(speed, "green")
            row.append(speed)
            lines.append("".join(row))

        return "\n".join(lines)


HTML5_START = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <style>
        .center {
            display: block;
            margin-left: auto;
            margin-right: auto;
            width: 90%;
            text-align: center;
        }
        .centercontainer {
            margin: 0 auto;
        }
        #results {
            border-collapse: collapse;
            width: 100%;
        }
        #results td, #results th {
            font-size: 80%;
            text-align: center;
            border: 1px solid #ddd;
        }
        #results tr:hover {
            background-color: #ddd;
        }
        #results th {
            padding-top: 12px;
            padding-bottom: 12px;
            background-color: #aaa;
            color: white;
        }
    </style>
    <title>{title}</title>
</head>
<body id="home">"""

HTML5_END = """</body>
</html>"""

ERROR_COLUMNS = ["Min.", "Max.", "Mean", "Median", "Var."]


class HTMLReporter:
    """Writes an HTML page with the chart image and a results table."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = output_dir or Path("results")

    @staticmethod
    def _cell(value) -> str:
        return f"<td>{float(value):.3g}</td>"

    def _error_cells(self, errors: ErrorSeries) -> list[str]:
        return [
            self._cell(errors.minimum),
            self._cell(errors.maximum),
            self._cell(errors.mean),
            self._cell(errors.median),
            self._cell(errors.variance),
        ]

    def table(self, results: ResultSet) -> str:
        """Render the results table."""
        lines = ['<div class="centercontainer">', '<table id="results">', "<thead>", "<tr>"]
        lines.append("<th></th>")
        lines.append("<th colspan=5>Absolute error</th>")
        lines.append("<th colspan=5>Relative error</th>")
        lines.append("<th></th>")
        lines.append("<th></th>")
        lines.append("</tr>")
        lines.append("<tr>")
        lines.append("<th>Method</th>")
        lines.extend(f"<th>{c}</th>" for c in ERROR_COLUMNS)
        lines.extend(f"<th>{c}</th>" for c in ERROR_COLUMNS)
        lines.append("<th>stddev</th>")
        lines.append("<th>Execution time<br>[ns / call]</th>")
        lines.append("</tr>")
        lines.append("</thead>")
        for record in results:
            lines.append("<tr>")
            lines.append(f"<td>{html.escape(record.description)}</td>")
            lines.extend(self._error_cells(record.absolute_errors))
            lines.extend(self._error_cells(record.relative_errors))
            lines.append(self._cell(record.stddev))
            lines.append(self._cell(record.ns_per_call))
            lines.append("</tr>")
        lines.append("</table>")
        lines.append("</div>")
        return "\n".join(lines)

    def render(self, results: ResultSet, chart_filename: Optional[str] = None) -> str:
        """Render the full HTML page."""
        title = f"approx results - {results.suite_name}" if results else "approx results"
        parts = [HTML5_START.replace("{title}", html.escape(title))]
        if results:
            parts.append(f'<h1 class="center">Results for {html.escape(results.suite_name)}</h1>')
        if chart_filename:
            parts.append(f'<img src="{html.escape(chart_filename)}" alt="result plot" class="center">')
        parts.append(self.table(results))
        parts.append(HTML5_END)
        return "\n".join(parts)

    def save(
        self,
        results: ResultSet,
        filename: str = "result.html",
        chart_filename: Optional[str] = None,
    ) -> Path:
        """Write the HTML page and return its path."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.output_dir / filename
        with open(filepath, "w") as f:
            f.write(self.render(results, chart_filename))
        return filepath


def median_window(values: np.ndarray, size_percent: float) -> tuple[float, float]:
    """Bounds of the ``size_percent`` share of values centered on the median."""
    ordered = np.sort(np.asarray(values, dtype=np.float64))
    middle = ordered.size // 2
    half = int(ordered.size // 2 * size_percent / 100)
    left = max(middle - half, 0)
    right = min(middle + half, ordered.size - 1)
    return float(ordered[left]), float(ordered[right])


class ChartReporter:
    """Generates visual charts using matplotlib."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = output_dir or Path("results/charts")
        import matplotlib
        matplotlib.use("Agg")  # Non-interactive backend

    @staticmethod
    def _x_axis(results: ResultSet) -> tuple[np.ndarray, str]:
        """Sample positions for line plots.

        Only a linear sweep over a scalar range maps sample i to position i;
        pair inputs are plotted against the sample index.
        """
        low, high = results.input_range
        if isinstance(low, tuple):
            return np.arange(results.sample_count), "sample"
        return np.linspace(float(low), float(high), results.sample_count), "x"

    @staticmethod
    def _apply_ylim(ax, low: float, high: float, floor: Optional[float] = None) -> None:
        if not (np.isfinite(low) and np.isfinite(high)):
            return
        if high - low == 0:
            high = low + 1
        ax.set_ylim(low if floor is None else floor, high)

    def _plot_lines(
        self,
        ax,
        results: ResultSet,
        values_fn: Callable[[ResultRecord], np.ndarray],
        size_percent: float,
        title: str,
        y_label: str,
    ) -> None:
        x, x_label = self._x_axis(results)
        lows, highs = [], []
        for record in results:
            values = values_fn(record).astype(np.float64)
            ax.plot(x, values, label=record.description, linewidth=1)
            low, high = median_window(values, size_percent)
            lows.append(low)
            highs.append(high)
        self._apply_ylim(ax, min(lows), max(highs))
        ax.set_title(title)
        ax.set_xlabel(x_label)
        ax.set_ylabel(y_label)
        ax.legend(fontsize="x-small")

    def _plot_bars(self, ax, results: ResultSet, size_percent: float, y_label: str) -> None:
        names = [r.description for r in results]
        speeds = np.array([r.ns_per_call for r in results], dtype=np.float64)
        positions = np.arange(len(names))
        ax.bar(positions, speeds, width=0.75, color="steelblue")
        low, high = median_window(speeds, size_percent)
        self._apply_ylim(ax, low, high, floor=0.0)
        ax.set_xticks(positions)
        ax.set_xticklabels(names, rotation=45, ha="right", fontsize="x-small")
        ax.set_ylabel(y_label)

    def suite_overview(self, results: ResultSet, filename: Optional[str] = None) -> Optional[Path]:
        """Values, execution time, absolute and relative error in one figure."""
        import matplotlib.pyplot as plt

        if not results:
            return None

        fig, axes = plt.subplots(2, 2, figsize=(12, 8))
        self._plot_lines(axes[0][0], results, lambda r: r.values, 98, "Value", "f(x)")
        self._plot_bars(axes[0][1], results, 70, "Execution time [ns / call]")
        self._plot_lines(
            axes[1][0], results, lambda r: r.absolute_errors.values, 80,
            "Absolute error", "|f(x) - F(x)|",
        )
        self._plot_lines(
            axes[1][1], results, lambda r: r.relative_errors.values, 80,
            "Relative error", "|1 - f(x) / F(x)|",
        )
        fig.suptitle(f"Results for {results.suite_name}")
        fig.tight_layout()

        self.output_dir.mkdir(parents=True, exist_ok=True)
        filename = filename or "result.png"
        filepath = self.output_dir / filename
        fig.savefig(filepath, dpi=100, bbox_inches="tight")
        plt.close(fig)

        return filepath


class JSONReporter:
    """Exports results as JSON for further analysis."""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = output_dir or Path("results")

    def save_result_set(self, results: ResultSet, filename: Optional[str] = None) -> Path:
        """Save a suite's results to JSON."""
        filename = filename or f"{slugify(results.suite_name) if results else 'results'}.json"
        filepath = self.output_dir / filename
        results.save(filepath)
        return filepath

    def load_result(self, filepath: Path) -> dict:
        """Load a result from JSON."""
        with open(filepath) as f:
            return json.load(f)

    def load_all_results(self, pattern: str = "*.json") -> list[dict]:
        """Load all results matching a pattern."""
        results = []
        for filepath in sorted(self.output_dir.glob(pattern)):
            results.append(self.load_result(filepath))
        return results
