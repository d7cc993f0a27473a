#!/usr/bin/env python3
"""텍스트 리포트 내보내기 테스트"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from report.exporter import TABLE_HEADER, export_text_report, format_trial_table
from report.parser import parse_report
from view.builder import build_comparison_view
from view.formatting import fmt_metric, fmt_number

REPORT = (
    "TRIAL RUN 2 - DEADLINE == 12 SECURITY UTILITY == 0.75\n"
    "A,x,6.004,0.7\n"
    "TRIAL RUN 1 - DEADLINE == 10.5 SECURITY UTILITY == 0.8\n"
    "A,x,5.0,0.9\n"
    "B,x,3.456,0.899\n"
)


def test_full_report_layout():
    text = export_text_report(parse_report(REPORT), {})
    rule = "-" * 80

    expected = (
        "SCHEDULER PERFORMANCE REPORT\n"
        + "=" * 80 + "\n\n"
        "TRIAL RUN 1\n"
        "Deadline: 10.5\n"
        "Min Security Utility: 0.8\n"
        f"{rule}\n{TABLE_HEADER}\n{rule}\n"
        "1 | B | 3.46 | 0.90\n"
        "2 | A | 5.00 | 0.90\n"
        "\n\n"
        "TRIAL RUN 2\n"
        "Deadline: 12\n"
        "Min Security Utility: 0.75\n"
        f"{rule}\n{TABLE_HEADER}\n{rule}\n"
        "1 | A | 6.00 | 0.70\n"
        "\n\n"
    )
    assert text == expected


def test_excluded_scheduler_not_exported():
    text = export_text_report(parse_report(REPORT), {"B": False})
    assert "| B |" not in text
    assert "1 | A | 5.00 | 0.90" in text


def test_empty_report():
    text = export_text_report({}, {})
    assert text.startswith("SCHEDULER PERFORMANCE REPORT\n")
    assert "TRIAL RUN" not in text


def test_nan_rendered_as_placeholder():
    trials = parse_report(
        "TRIAL RUN 1 - DEADLINE == 1 SECURITY UTILITY == 1\n"
        "A,x,n/a,0.5\n"
    )
    table = format_trial_table(build_comparison_view(trials, {}, {}, 1))
    assert table.splitlines()[-1] == "1 | A | N/A | 0.50"


def test_formatters():
    assert fmt_metric(1.005) in ("1.00", "1.01")
    assert fmt_metric(2) == "2.00"
    assert fmt_metric(None) == "N/A"
    assert fmt_metric(float("nan")) == "N/A"
    assert fmt_metric("text") == "text"
    assert fmt_number(10.0) == "10"
    assert fmt_number(10.5) == "10.5"
    assert fmt_number(float("nan")) == "N/A"
