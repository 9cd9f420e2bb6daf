"""
CipherBench Console Interface
==============================

Rich-powered console abstraction providing a unified presentation layer
for the CipherBench CLI.

The class wraps :class:`rich.console.Console` and adds convenience methods
for the banner, section headers, coloured status messages, tables and a
status spinner -- all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all CipherBench output
# ---------------------------------------------------------------------------
_BENCH_THEME = Theme(
    {
        "bench.banner": "bold bright_cyan",
        "bench.section": "bold bright_magenta",
        "bench.success": "bold green",
        "bench.warning": "bold yellow",
        "bench.error": "bold red",
        "bench.info": "bold bright_blue",
        "bench.dim": "dim white",
        "bench.highlight": "bold bright_white",
        "bench.high": "bold red",
        "bench.medium": "bold yellow",
        "bench.low": "bold bright_cyan",
        "bench.informational": "bold bright_blue",
    }
)

# ---------------------------------------------------------------------------
# ASCII banner art
# ---------------------------------------------------------------------------
_BANNER_ART = r"""
[bright_cyan]
   ___ _      _               ___                 _
  / __(_)_ __| |_  ___ _ _   | _ ) ___ _ _  __| |_
 | (__| | '_ \ ' \/ -_) '_|  | _ \/ -_) ' \/ _| ' \
  \___|_| .__/_||_\___|_|    |___/\___|_||_\__|_||_|
        |_|
[/bright_cyan]"""

_TAGLINE = "Classical Cipher Comparison Toolkit"


class BenchConsole:
    """Unified console interface for the CipherBench CLI.

    Usage::

        con = BenchConsole()
        con.banner()
        con.section("Comparison Results")
        con.success("Benchmark complete")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
        """
        self._console = Console(
            theme=_BENCH_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the CipherBench ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[bench.highlight]{_TAGLINE}[/bench.highlight]\n"
            f"[bench.dim]Version: {version}  |  {now}[/bench.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="bench.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[bench.success][✔] SUCCESS:[/bench.success] {message}"
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[bench.warning][⚠] WARNING:[/bench.warning] {message}"
        )

    def info(self, message: str) -> None:
        """Print an informational message."""
        self._console.print(
            f"[bench.info][ℹ] INFO:[/bench.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Findings display
    # ------------------------------------------------------------------ #

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render a findings table with automatic severity colouring.

        Expects objects with ``severity``, ``title``, and ``description``
        attributes (e.g. :class:`shared.models.Finding`).
        """
        if not findings:
            return

        severity_style_map: dict[str, str] = {
            "HIGH": "bench.high",
            "MEDIUM": "bench.medium",
            "LOW": "bench.low",
            "INFO": "bench.informational",
        }

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            sev_style = severity_style_map.get(sev_name, "")
            sev_cell = (
                f"[{sev_style}]{sev_name}[/{sev_style}]"
                if sev_style
                else sev_name
            )
            tbl.add_row(
                str(idx),
                sev_cell,
                str(getattr(finding, "title", "")),
                str(getattr(finding, "description", "")),
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Status spinner
    # ------------------------------------------------------------------ #

    @contextmanager
    def status(
        self, message: str = "Working..."
    ) -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message.

        Example::

            with con.status("Running benchmark..."):
                result = engine.compare(text, key)
        """
        with self._console.status(
            f"[bench.info]{message}[/bench.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj
