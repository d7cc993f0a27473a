"""
뷰 모델 생성

파싱된 트라이얼 + 선택 상태 + 색상으로 차트/표에 필요한 데이터를 만든다.
모두 순수 함수: 입력 트라이얼을 수정하지 않음.

순위 규칙:
  - utility 내림차순
  - utility 차이가 UTILITY_EPSILON 미만이면 makespan 오름차순
  - NaN 값은 맨 뒤
"""
import math
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Dict, List

import pandas as pd

from config.settings import UTILITY_EPSILON
from report.trial import Measurement, Trial
from view.palette import resolve_color


@dataclass
class RankedEntry:
    """비교 뷰의 한 행"""
    scheduler: str
    makespan: float
    utility: float
    rank: int
    color: str


@dataclass
class TrendRecord:
    """추세 뷰의 한 점 (트라이얼 1개)"""
    trial: int
    makespan: Dict[str, float] = field(default_factory=dict)
    utility: Dict[str, float] = field(default_factory=dict)


def is_selected(name: str, selection: Dict[str, bool]) -> bool:
    """선택 마스크에 없는 이름은 포함으로 취급"""
    return selection.get(name, True)


def _compare_values(a: float, b: float) -> int:
    """오름차순 비교 (NaN은 뒤로)"""
    a_nan, b_nan = math.isnan(a), math.isnan(b)
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_measurements(a: Measurement, b: Measurement) -> int:
    """순위 비교 함수 (음수면 a가 앞)"""
    if math.isnan(a.utility) or math.isnan(b.utility):
        if math.isnan(a.utility) and math.isnan(b.utility):
            return _compare_values(a.makespan, b.makespan)
        return 1 if math.isnan(a.utility) else -1

    if abs(a.utility - b.utility) < UTILITY_EPSILON:
        return _compare_values(a.makespan, b.makespan)
    return -1 if a.utility > b.utility else 1


def rank_measurements(measurements: List[Measurement]) -> List[Measurement]:
    """안정 정렬 (원본 리스트는 그대로)"""
    return sorted(measurements, key=cmp_to_key(compare_measurements))


def build_comparison_view(
    trials: Dict[int, Trial],
    selection: Dict[str, bool],
    colors: Dict[str, str],
    trial_number: int
) -> List[RankedEntry]:
    """
    단일 트라이얼 비교 뷰

    Args:
        trials: 파싱 결과
        selection: {스케줄러: 포함 여부}
        colors: {스케줄러: 색상}
        trial_number: 대상 트라이얼

    Returns:
        순위순 RankedEntry 리스트 (트라이얼이 없거나 선택이 없으면 빈 리스트)
    """
    trial = trials.get(trial_number)
    if trial is None:
        return []

    included = [m for m in trial.measurements if is_selected(m.scheduler, selection)]

    return [
        RankedEntry(
            scheduler=m.scheduler,
            makespan=m.makespan,
            utility=m.utility,
            rank=idx + 1,
            color=resolve_color(m.scheduler, colors)
        )
        for idx, m in enumerate(rank_measurements(included))
    ]


def build_trend_view(
    trials: Dict[int, Trial],
    selection: Dict[str, bool],
    colors: Dict[str, str],
    max_trial: int
) -> List[TrendRecord]:
    """
    트라이얼 간 추세 뷰

    1..max_trial 중 존재하는 트라이얼만 기록 (없는 번호는 채우지 않음 → 선이 끊김).
    같은 트라이얼에 같은 이름이 여러 번 나오면 마지막 값 사용.

    colors는 레코드에 들어가지 않지만 두 뷰의 호출 형태를 맞추기 위해 받는다.
    """
    records = []
    for number in range(1, max_trial + 1):
        trial = trials.get(number)
        if trial is None:
            continue

        record = TrendRecord(trial=number)
        for m in trial.measurements:
            if is_selected(m.scheduler, selection):
                record.makespan[m.scheduler] = m.makespan
                record.utility[m.scheduler] = m.utility
        records.append(record)

    return records


def trend_dataframe(records: List[TrendRecord]) -> pd.DataFrame:
    """추세 레코드 → long-form DataFrame (trial, scheduler, makespan, utility)"""
    rows = [
        {
            'trial': record.trial,
            'scheduler': name,
            'makespan': record.makespan[name],
            'utility': record.utility[name],
        }
        for record in records
        for name in record.makespan
    ]
    return pd.DataFrame(rows, columns=['trial', 'scheduler', 'makespan', 'utility'])


def comparison_dataframe(entries: List[RankedEntry]) -> pd.DataFrame:
    """순위 표 (Rank, Scheduler, Makespan, Utility)"""
    return pd.DataFrame(
        [
            {
                'Rank': e.rank,
                'Scheduler': e.scheduler,
                'Makespan': e.makespan,
                'Utility': e.utility,
            }
            for e in entries
        ],
        columns=['Rank', 'Scheduler', 'Makespan', 'Utility']
    )
