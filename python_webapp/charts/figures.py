"""
Plotly 차트 생성

- 트라이얼 비교: 가로 막대 (makespan / utility), 막대 색 = 스케줄러 색
- 추세: 트라이얼 번호별 선 그래프 (없는 트라이얼 번호는 건너뜀)
"""
from typing import Dict, List

import plotly.graph_objects as go

from view.builder import RankedEntry, TrendRecord
from view.formatting import fmt_metric
from view.palette import resolve_color

METRIC_LABELS = {
    'makespan': 'Makespan',
    'utility': 'Security Utility',
}


def _bar_figure(entries: List[RankedEntry], metric: str) -> go.Figure:
    # 1위가 위쪽에 오도록 역순
    ordered = list(reversed(entries))
    values = [getattr(e, metric) for e in ordered]

    fig = go.Figure()
    fig.add_bar(
        y=[e.scheduler for e in ordered],
        x=values,
        orientation='h',
        marker_color=[e.color for e in ordered],
        text=[fmt_metric(v) for v in values],
        textposition='outside',
        hovertemplate='%{y}: %{x:.2f}<extra></extra>'
    )

    fig.update_layout(
        height=max(240, 80 + 36 * len(entries)),
        xaxis_title=METRIC_LABELS[metric],
        yaxis_title="",
        yaxis=dict(type='category'),
        margin=dict(l=150, r=40, t=20, b=40),
        showlegend=False
    )
    return fig


def makespan_bar_figure(entries: List[RankedEntry]) -> go.Figure:
    """Makespan 막대 (낮을수록 좋음)"""
    return _bar_figure(entries, 'makespan')


def utility_bar_figure(entries: List[RankedEntry]) -> go.Figure:
    """Security Utility 막대 (높을수록 좋음)"""
    return _bar_figure(entries, 'utility')


def trend_figure(
    records: List[TrendRecord],
    schedulers: List[str],
    colors: Dict[str, str],
    metric: str
) -> go.Figure:
    """
    트라이얼 간 추세 선 그래프

    Args:
        records: build_trend_view 결과
        schedulers: 그릴 스케줄러 (선택된 것만)
        colors: {스케줄러: 색상}
        metric: 'makespan' 또는 'utility'
    """
    if metric not in METRIC_LABELS:
        raise ValueError(f"Unknown metric: {metric}")

    fig = go.Figure()
    for name in schedulers:
        points = [
            (r.trial, getattr(r, metric)[name])
            for r in records
            if name in getattr(r, metric)
        ]
        if not points:
            continue

        fig.add_scatter(
            x=[p[0] for p in points],
            y=[p[1] for p in points],
            mode='lines+markers',
            name=name,
            line=dict(color=resolve_color(name, colors), width=2),
            marker=dict(size=8)
        )

    fig.update_layout(
        height=400,
        xaxis_title="Trial Run",
        yaxis_title=METRIC_LABELS[metric],
        xaxis=dict(dtick=1),
        margin=dict(l=60, r=20, t=20, b=40)
    )
    return fig


def image_export_config(filename: str) -> Dict:
    """plotly 모드바 PNG 다운로드 설정"""
    return {
        'toImageButtonOptions': {
            'format': 'png',
            'filename': filename,
            'scale': 2
        },
        'displaylogo': False
    }
