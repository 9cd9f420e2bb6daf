"""
CipherBench Console Output
===========================

Rich-based console formatters for CipherBench results: the comparison
table with the fastest timings highlighted, a horizontal bar chart of
encryption/decryption times, and panels for single transforms and
round-trip tests.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.bar import Bar
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import BenchConsole
from cipherbench.algorithms.alphabet import ALPHABET
from cipherbench.algorithms.registry import CIPHERS
from cipherbench.benchmark.timing import format_time
from cipherbench.core.models import (
    CipherId,
    ComparisonResult,
    IndividualTestResult,
    SecurityLevel,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_SECURITY_COLOURS: dict[SecurityLevel, str] = {
    SecurityLevel.LOW: "bold white on red",
    SecurityLevel.MEDIUM: "bold black on yellow",
    SecurityLevel.MEDIUM_HIGH: "bold white on green",
}

_ENCRYPT_COLOUR = "bright_blue"
_DECRYPT_COLOUR = "dark_orange"

_PREVIEW_LIMIT = 100


def _preview(text: str, limit: int = _PREVIEW_LIMIT) -> str:
    return text if len(text) <= limit else text[:limit] + "..."


class BenchConsoleOutput:
    """Console output formatters for CipherBench results.

    Usage::

        console = BenchConsole()
        output = BenchConsoleOutput(console)
        output.display_comparison(comparison)
        output.display_individual(individual_result)
    """

    def __init__(self, console: Optional[BenchConsole] = None) -> None:
        self.console = console or BenchConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Comparison Display
    # ------------------------------------------------------------------ #

    def display_comparison(self, comparison: ComparisonResult) -> None:
        """Display the comparison table, the bar chart and run summary."""
        self.console.section("Cipher Performance Comparison")

        tbl = Table(
            title="Average Time per Operation",
            caption=(
                f"{comparison.iterations:,} iterations • "
                f"{comparison.message_length} characters"
            ),
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Cipher", style="bold")
        tbl.add_column("Encrypt", justify="right")
        tbl.add_column("Decrypt", justify="right")
        tbl.add_column("Complexity", justify="center")
        tbl.add_column("Security", justify="center")

        for cipher, bench in comparison.results.items():
            name = Text(bench.name, style="bold")
            name.append(f"\n{CIPHERS[cipher].description}", style="dim")
            tbl.add_row(
                name,
                self._time_cell(
                    bench.encrypt_time, cipher == comparison.fastest_encrypt
                ),
                self._time_cell(
                    bench.decrypt_time, cipher == comparison.fastest_decrypt
                ),
                bench.complexity,
                Text(
                    f" {bench.security.value} ",
                    style=_SECURITY_COLOURS[bench.security],
                ),
            )

        self._rich.print(tbl)
        self._display_chart(comparison)
        self._display_samples(comparison)

    @staticmethod
    def _time_cell(value: float, fastest: bool) -> Text:
        if fastest:
            return Text(f"🏆 {format_time(value)}", style="bold green")
        return Text(format_time(value))

    def _display_chart(self, comparison: ComparisonResult) -> None:
        """Render encrypt/decrypt times as horizontal bars on one scale."""
        times = [
            t
            for bench in comparison.results.values()
            for t in (bench.encrypt_time, bench.decrypt_time)
        ]
        max_time = max(times) or 1.0

        chart = Table.grid(padding=(0, 1))
        chart.add_column(style="bold", width=14)
        chart.add_column(width=8)
        chart.add_column(ratio=1)
        chart.add_column(justify="right", width=12)

        for bench in comparison.results.values():
            label = bench.name.split(" ")[0]
            chart.add_row(
                label,
                Text("encrypt", style=_ENCRYPT_COLOUR),
                Bar(max_time, 0, bench.encrypt_time, color=_ENCRYPT_COLOUR),
                format_time(bench.encrypt_time),
            )
            chart.add_row(
                "",
                Text("decrypt", style=_DECRYPT_COLOUR),
                Bar(max_time, 0, bench.decrypt_time, color=_DECRYPT_COLOUR),
                format_time(bench.decrypt_time),
            )

        self._rich.print(
            Panel(chart, title="Performance Comparison (ms)", border_style="cyan")
        )

    def _display_samples(self, comparison: ComparisonResult) -> None:
        tbl = Table(
            title="Ciphertext Samples",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Cipher", style="bold")
        tbl.add_column("Encrypted", overflow="fold")
        tbl.add_column("Decrypted", overflow="fold")
        for bench in comparison.results.values():
            tbl.add_row(bench.name, _preview(bench.encrypted), _preview(bench.decrypted))
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Single transform
    # ------------------------------------------------------------------ #

    def display_transform(self, metadata: dict) -> None:
        """Display the outcome of one encrypt or decrypt operation."""
        encrypting = metadata["action"] == "encrypt"
        self.console.section(
            "Encryption Complete" if encrypting else "Decryption Complete"
        )

        body = Text()
        body.append("Cipher: ", style="bold")
        body.append(f"{metadata['name']}\n")
        body.append("Key: ", style="bold")
        body.append(f"{metadata['key']}\n")
        body.append("Input: ", style="bold")
        body.append(f"{metadata['input']}\n")
        body.append("Output: ", style="bold")
        body.append(metadata["output"], style="bold bright_green")

        self._rich.print(Panel(body, title="Result", border_style="cyan"))

    # ------------------------------------------------------------------ #
    #  Individual test
    # ------------------------------------------------------------------ #

    def display_individual(self, result: IndividualTestResult) -> None:
        """Display a single cipher's round-trip test."""
        self.console.section("Individual Algorithm Test")

        tbl = Table(
            title=result.name,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            show_header=False,
        )
        tbl.add_column("Field", style="bold")
        tbl.add_column("Value", overflow="fold")
        tbl.add_row("Key", result.key)
        tbl.add_row("Execution Time", f"{result.execution_time:.3f} ms")
        tbl.add_row("Original", result.original)
        tbl.add_row("Encrypted", result.encrypted)
        tbl.add_row("Decrypted", result.decrypted)
        tbl.add_row(
            "Round Trip",
            Text("OK", style="bold green")
            if result.round_trip_ok
            else Text("MISMATCH", style="bold red"),
        )
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Substitution alphabet
    # ------------------------------------------------------------------ #

    def display_alphabet(self, keyword: str, permutation: str) -> None:
        """Show the plain alphabet above its keyword-derived substitute."""
        self.console.section(f"Substitution Alphabet for '{keyword}'")
        tbl = Table(border_style="bright_cyan", show_header=False)
        tbl.add_column(style="bold")
        tbl.add_column(style="bright_white")
        tbl.add_row("Plain", " ".join(ALPHABET))
        tbl.add_row("Cipher", " ".join(permutation))
        self._rich.print(tbl)

    def display_key_help(self, cipher: CipherId) -> None:
        """Print the key rules for *cipher*."""
        self.console.warning(f"{CIPHERS[cipher].name}: {CIPHERS[cipher].key_help}")
