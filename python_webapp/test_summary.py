#!/usr/bin/env python3
"""트라이얼 간 요약 통계 테스트"""

import math
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import pytest

from analysis.summary import SUMMARY_COLUMNS, calculate_statistics, summarize_schedulers
from report.parser import parse_report

REPORT = (
    "TRIAL RUN 1 - DEADLINE == 1 SECURITY UTILITY == 1\n"
    "A,x,10,0.9\n"
    "B,x,20,0.5\n"
    "TRIAL RUN 2 - DEADLINE == 1 SECURITY UTILITY == 1\n"
    "A,x,12,0.4\n"
    "B,x,18,0.6\n"
    "TRIAL RUN 3 - DEADLINE == 1 SECURITY UTILITY == 1\n"
    "A,x,14,0.95\n"
    "C,x,5,0.1\n"
)


def test_calculate_statistics():
    result = calculate_statistics([1.0, 2.0, 3.0])
    assert result["mean"] == pytest.approx(2.0)
    assert result["std"] == pytest.approx(1.0)
    assert result["min"] == 1.0
    assert result["max"] == 3.0
    assert result["ci_lower"] < 2.0 < result["ci_upper"]


def test_calculate_statistics_edge_cases():
    assert calculate_statistics([]) == {}
    assert calculate_statistics([float("nan")]) == {}

    single = calculate_statistics([4.0, float("nan")])
    assert single["mean"] == 4.0
    assert math.isnan(single["std"])

    flat = calculate_statistics([2.0, 2.0])
    assert flat["ci_lower"] == flat["ci_upper"] == 2.0


def test_summarize_schedulers():
    df = summarize_schedulers(parse_report(REPORT), {})

    assert list(df.columns) == SUMMARY_COLUMNS
    assert list(df["scheduler"]) == ["A", "B", "C"]

    a = df[df["scheduler"] == "A"].iloc[0]
    assert a["trials"] == 3
    assert a["wins"] == 2
    assert a["mean_rank"] == pytest.approx(4 / 3)
    assert a["makespan_mean"] == pytest.approx(12.0)

    c = df[df["scheduler"] == "C"].iloc[0]
    assert c["trials"] == 1
    assert math.isnan(c["makespan_std"])


def test_summarize_respects_selection():
    df = summarize_schedulers(parse_report(REPORT), {"A": False})
    assert "A" not in set(df["scheduler"])
    b = df[df["scheduler"] == "B"].iloc[0]
    assert b["wins"] == 2


def test_summarize_empty():
    df = summarize_schedulers({}, {})
    assert df.empty
    assert list(df.columns) == SUMMARY_COLUMNS
