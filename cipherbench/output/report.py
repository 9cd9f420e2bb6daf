"""
CipherBench Report Generator
=============================

Generates HTML and JSON reports from CipherBench results.  The HTML
report uses inline CSS for portability and renders comparison runs as a
timing table with proportional bars; the JSON report is machine-readable
output for scripting and CI pipelines.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from shared.models import RunResult
from cipherbench import __version__
from cipherbench.benchmark.timing import format_time
from cipherbench.core.models import ComparisonResult


# ===================================================================== #
#  HTML Template (inline, no template engine)
# ===================================================================== #

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>CipherBench Report - {title}</title>
    <style>
        :root {{
            --bg-primary: #0d1117;
            --bg-secondary: #161b22;
            --bg-tertiary: #21262d;
            --text-primary: #c9d1d9;
            --text-secondary: #8b949e;
            --accent-cyan: #58a6ff;
            --accent-green: #3fb950;
            --accent-yellow: #d29922;
            --accent-red: #f85149;
            --accent-orange: #fd7e14;
            --accent-purple: #bc8cff;
            --border: #30363d;
        }}
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.6;
            padding: 2rem;
        }}
        .container {{ max-width: 1100px; margin: 0 auto; }}
        .header {{
            text-align: center;
            padding: 2rem;
            border: 1px solid var(--accent-cyan);
            border-radius: 8px;
            margin-bottom: 2rem;
            background: var(--bg-secondary);
        }}
        .header h1 {{ color: var(--accent-cyan); font-size: 2rem; }}
        .header .subtitle {{ color: var(--text-secondary); font-size: 0.9rem; }}
        .section {{
            background: var(--bg-secondary);
            border: 1px solid var(--border);
            border-radius: 8px;
            padding: 1.5rem;
            margin-bottom: 1.5rem;
        }}
        .section h2 {{
            color: var(--accent-purple);
            font-size: 1.4rem;
            margin-bottom: 1rem;
            padding-bottom: 0.5rem;
            border-bottom: 1px solid var(--border);
        }}
        table {{ width: 100%; border-collapse: collapse; margin: 1rem 0; }}
        th, td {{ padding: 0.6rem 1rem; text-align: left; border: 1px solid var(--border); }}
        th {{ background: var(--bg-tertiary); color: var(--accent-cyan); font-weight: 600; }}
        td.fastest {{ color: var(--accent-green); font-weight: 700; }}
        .badge {{
            display: inline-block;
            padding: 0.2rem 0.7rem;
            border-radius: 4px;
            font-weight: 700;
            font-size: 0.85rem;
        }}
        .badge-info {{ background: rgba(88, 166, 255, 0.2); color: var(--accent-cyan); }}
        .badge-low {{ background: rgba(63, 185, 80, 0.2); color: var(--accent-green); }}
        .badge-medium {{ background: rgba(210, 153, 34, 0.2); color: var(--accent-yellow); }}
        .badge-high {{ background: rgba(248, 81, 73, 0.2); color: var(--accent-red); }}
        .bar {{ height: 12px; border-radius: 6px; margin: 2px 0; }}
        .bar-encrypt {{ background: var(--accent-cyan); }}
        .bar-decrypt {{ background: var(--accent-orange); }}
        .finding {{
            padding: 1rem;
            margin: 0.5rem 0;
            border-left: 4px solid var(--border);
            background: var(--bg-tertiary);
            border-radius: 0 4px 4px 0;
        }}
        .finding-high {{ border-left-color: var(--accent-red); }}
        .finding-medium {{ border-left-color: var(--accent-yellow); }}
        .finding-low {{ border-left-color: var(--accent-green); }}
        .finding-info {{ border-left-color: var(--accent-cyan); }}
        .finding h3 {{ font-size: 1rem; margin-bottom: 0.5rem; }}
        .finding p {{ color: var(--text-secondary); font-size: 0.9rem; }}
        pre {{
            background: var(--bg-tertiary);
            padding: 1rem;
            border-radius: 4px;
            overflow-x: auto;
            font-size: 0.85rem;
            color: var(--text-secondary);
        }}
        .footer {{
            text-align: center;
            padding: 1.5rem;
            color: var(--text-secondary);
            font-size: 0.8rem;
            border-top: 1px solid var(--border);
            margin-top: 2rem;
        }}
    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>CipherBench :: {tool}</h1>
            <div class="subtitle">
                {target}<br>
                Generated: {timestamp}
            </div>
        </div>

        <div class="section">
            <h2>Summary</h2>
            <p>{summary}</p>
            <table>
                <tr>
                    <th>Operation</th><td>{tool}</td>
                    <th>Input</th><td>{target}</td>
                </tr>
                <tr>
                    <th>Duration</th><td>{duration:.3f}s</td>
                    <th>Findings</th><td>{finding_count}</td>
                </tr>
            </table>
        </div>

        {comparison_section}

        <div class="section">
            <h2>Findings</h2>
            {findings_html}
        </div>

        {raw_data_section}

        <div class="footer">
            CipherBench v{version} | Classical Cipher Comparison Toolkit<br>
            Report generated {timestamp}
        </div>
    </div>
</body>
</html>
"""


class BenchReportGenerator:
    """Generates HTML and JSON reports from :class:`RunResult` objects.

    Usage::

        generator = BenchReportGenerator()
        generator.generate_html(run_result, Path("report.html"))
        generator.generate_json(run_result, Path("report.json"))
    """

    def generate_html(
        self,
        result: RunResult,
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write an HTML report for *result* and return its path."""
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")

        html_content = _HTML_TEMPLATE.format(
            title=self._escape_html(title or result.target),
            target=self._escape_html(result.target),
            timestamp=timestamp,
            summary=self._escape_html(result.summary),
            tool=self._escape_html(result.tool_name),
            duration=result.duration_seconds or 0.0,
            finding_count=result.finding_count,
            comparison_section=self._build_comparison_section(result),
            findings_html=self._build_findings_html(result),
            raw_data_section=self._build_raw_data_section(result),
            version=__version__,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
        return output_path

    def build_json(self, result: RunResult) -> dict[str, Any]:
        """Return the JSON report structure for *result*."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": __version__,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [
                f.model_dump(mode="json") for f in result.findings
            ],
            "metadata": result.metadata,
        }

    def generate_json(self, result: RunResult, output_path: Path) -> Path:
        """Write a JSON report for *result* and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(self.build_json(result), indent=2, ensure_ascii=False, default=str),
            encoding="utf-8",
        )
        return output_path

    # ------------------------------------------------------------------ #
    #  Private HTML Builders
    # ------------------------------------------------------------------ #

    def _build_comparison_section(self, result: RunResult) -> str:
        if result.tool_name != "compare" or not result.metadata:
            return ""

        comparison = ComparisonResult.model_validate(result.metadata)
        max_time = max(
            max(b.encrypt_time, b.decrypt_time)
            for b in comparison.results.values()
        ) or 1.0

        rows: list[str] = []
        for cipher, bench in comparison.results.items():
            enc_cls = ' class="fastest"' if cipher == comparison.fastest_encrypt else ""
            dec_cls = ' class="fastest"' if cipher == comparison.fastest_decrypt else ""
            enc_pct = bench.encrypt_time / max_time * 100
            dec_pct = bench.decrypt_time / max_time * 100
            rows.append(
                "<tr>"
                f"<td>{self._escape_html(bench.name)}</td>"
                f"<td{enc_cls}>{format_time(bench.encrypt_time)}</td>"
                f"<td{dec_cls}>{format_time(bench.decrypt_time)}</td>"
                f"<td>{bench.complexity}</td>"
                f"<td>{bench.security.value}</td>"
                "<td>"
                f'<div class="bar bar-encrypt" style="width: {enc_pct:.1f}%"></div>'
                f'<div class="bar bar-decrypt" style="width: {dec_pct:.1f}%"></div>'
                "</td>"
                "</tr>"
            )

        return (
            '<div class="section">'
            "  <h2>Performance Comparison</h2>"
            "  <table>"
            "    <tr><th>Cipher</th><th>Encrypt</th><th>Decrypt</th>"
            "<th>Complexity</th><th>Security</th><th>Chart</th></tr>"
            f"    {''.join(rows)}"
            "  </table>"
            f"  <p>{comparison.iterations:,} iterations &bull; "
            f"{comparison.message_length} characters</p>"
            "</div>"
        )

    def _build_findings_html(self, result: RunResult) -> str:
        if not result.findings:
            return '<p style="color: var(--text-secondary);">No findings.</p>'

        html_parts: list[str] = []
        for finding in result.findings:
            severity = finding.severity.value.lower()
            html_parts.append(
                f'<div class="finding finding-{severity}">'
                f'  <h3><span class="badge badge-{severity}">{severity.upper()}</span> '
                f"  {self._escape_html(finding.title)}</h3>"
                f"  <p>{self._escape_html(finding.description)}</p>"
            )
            if finding.recommendation:
                html_parts.append(
                    f"  <p><strong>Recommendation:</strong> "
                    f"{self._escape_html(finding.recommendation)}</p>"
                )
            if finding.references:
                refs = ", ".join(self._escape_html(r) for r in finding.references)
                html_parts.append(
                    f'  <p style="font-size: 0.8rem;">References: {refs}</p>'
                )
            html_parts.append("</div>")

        return "\n".join(html_parts)

    def _build_raw_data_section(self, result: RunResult) -> str:
        if not result.metadata:
            return ""

        json_str = json.dumps(result.metadata, indent=2, ensure_ascii=False, default=str)
        return (
            '<div class="section">'
            "  <h2>Raw Data</h2>"
            f"  <pre>{self._escape_html(json_str)}</pre>"
            "</div>"
        )

    @staticmethod
    def _escape_html(text: str) -> str:
        """Escape HTML special characters."""
        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&#x27;")
        )
