"""Tests for JSON and HTML report generation."""

from __future__ import annotations

import asyncio
import json

import pytest

from cipherbench.output.report import BenchReportGenerator


@pytest.fixture
def comparison_result(engine):
    return asyncio.run(engine.compare("Attack at dawn", "lemon", iterations=3))


@pytest.fixture
def reporter():
    return BenchReportGenerator()


def test_build_json_structure(reporter, comparison_result):
    report = reporter.build_json(comparison_result)
    assert report["report_metadata"]["tool"] == "compare"
    assert report["summary"]["total_findings"] == len(comparison_result.findings)
    assert set(report["metadata"]["results"]) == {"vigenere", "caesar", "substitution"}
    assert "encryptTime" in report["metadata"]["results"]["caesar"]


def test_generate_json_writes_file(tmp_path, reporter, comparison_result):
    path = reporter.generate_json(comparison_result, tmp_path / "out" / "report.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["metadata"]["iterations"] == 3


def test_generate_html_has_comparison(tmp_path, reporter, comparison_result):
    path = reporter.generate_html(comparison_result, tmp_path / "report.html")
    html = path.read_text(encoding="utf-8")
    assert "Performance Comparison" in html
    assert "Caesar Cipher" in html
    assert 'class="fastest"' in html


def test_html_without_comparison_section(tmp_path, reporter, engine):
    result = asyncio.run(engine.encrypt("HELLO", "C", "caesar"))
    html = reporter.generate_html(result, tmp_path / "encrypt.html").read_text(
        encoding="utf-8"
    )
    assert "Performance Comparison" not in html
    assert "No findings." in html


def test_escape_html():
    assert BenchReportGenerator._escape_html('<a href="x">&</a>') == (
        "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
    )


def test_report_version_matches_package(reporter, comparison_result):
    from cipherbench import __version__

    assert reporter.build_json(comparison_result)["report_metadata"]["version"] == __version__
