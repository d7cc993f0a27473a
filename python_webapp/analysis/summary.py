"""
트라이얼 간 스케줄러 요약 통계

각 스케줄러에 대해:
  - trials: 등장한 트라이얼 수
  - wins: 1위 횟수
  - mean_rank: 평균 순위 (낮을수록 좋음)
  - makespan/utility 평균, 표준편차, 95% 신뢰구간

NaN 측정값은 통계에서 제외.
"""
from typing import Dict, List

import numpy as np
import pandas as pd
from scipy import stats

from report.trial import Trial
from view.builder import build_comparison_view

SUMMARY_COLUMNS = [
    'scheduler', 'trials', 'wins', 'mean_rank',
    'makespan_mean', 'makespan_std', 'makespan_ci_lower', 'makespan_ci_upper',
    'utility_mean', 'utility_std', 'utility_ci_lower', 'utility_ci_upper',
]


def calculate_statistics(values: List[float]) -> Dict:
    """
    통계량 계산 (반복 측정용)

    Returns:
        mean: 평균
        std: 표준편차 (표본 2개 미만이면 NaN)
        min: 최소값
        max: 최대값
        ci_lower: 95% 신뢰구간 하한
        ci_upper: 95% 신뢰구간 상한
    """
    clean = np.array([v for v in values if not np.isnan(v)], dtype=float)
    if clean.size == 0:
        return {}

    mean = float(np.mean(clean))
    n = clean.size

    if n < 2:
        return {
            'mean': mean,
            'std': np.nan,
            'min': float(clean[0]),
            'max': float(clean[0]),
            'ci_lower': np.nan,
            'ci_upper': np.nan
        }

    std = float(np.std(clean, ddof=1))  # 표본 표준편차

    if std == 0:
        ci = (mean, mean)
    else:
        # 95% 신뢰구간 (t-distribution)
        ci = stats.t.interval(0.95, n - 1, loc=mean, scale=std / np.sqrt(n))

    return {
        'mean': mean,
        'std': std,
        'min': float(np.min(clean)),
        'max': float(np.max(clean)),
        'ci_lower': float(ci[0]),
        'ci_upper': float(ci[1])
    }


def summarize_schedulers(trials: Dict[int, Trial], selection: Dict[str, bool]) -> pd.DataFrame:
    """
    포함된 스케줄러별 요약 표

    Returns:
        SUMMARY_COLUMNS 컬럼의 DataFrame (평균 순위 오름차순)
    """
    ranks: Dict[str, List[int]] = {}
    makespans: Dict[str, List[float]] = {}
    utilities: Dict[str, List[float]] = {}
    appearances: Dict[str, set] = {}

    for number in sorted(trials):
        for entry in build_comparison_view(trials, selection, {}, number):
            ranks.setdefault(entry.scheduler, []).append(entry.rank)
            makespans.setdefault(entry.scheduler, []).append(entry.makespan)
            utilities.setdefault(entry.scheduler, []).append(entry.utility)
            appearances.setdefault(entry.scheduler, set()).add(number)

    rows = []
    for name in sorted(ranks):
        makespan_stats = calculate_statistics(makespans[name])
        utility_stats = calculate_statistics(utilities[name])
        rows.append({
            'scheduler': name,
            'trials': len(appearances[name]),
            'wins': sum(1 for r in ranks[name] if r == 1),
            'mean_rank': float(np.mean(ranks[name])),
            'makespan_mean': makespan_stats.get('mean', np.nan),
            'makespan_std': makespan_stats.get('std', np.nan),
            'makespan_ci_lower': makespan_stats.get('ci_lower', np.nan),
            'makespan_ci_upper': makespan_stats.get('ci_upper', np.nan),
            'utility_mean': utility_stats.get('mean', np.nan),
            'utility_std': utility_stats.get('std', np.nan),
            'utility_ci_lower': utility_stats.get('ci_lower', np.nan),
            'utility_ci_upper': utility_stats.get('ci_upper', np.nan),
        })

    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    if not df.empty:
        df = df.sort_values(['mean_rank', 'scheduler'], kind='mergesort').reset_index(drop=True)
    return df
