"""
벤치마크 리포트 파서

입력 형식:
  TRIAL RUN <int> - DEADLINE == <float> SECURITY UTILITY == <float>
  SCHEDULER,...                      (헤더 행, 건너뜀)
  <이름>,<무시>,<makespan>,<utility>

상태 머신 (2개 상태):
  AWAITING_TRIAL_HEADER: 트라이얼 헤더를 기다림, 측정 행은 버림
  IN_TRIAL_BODY: 현재 트라이얼에 측정 행을 추가

best-effort 파싱: 형식이 맞지 않는 줄은 예외 없이 건너뜀.
"""
import logging
import re
from enum import Enum
from typing import Dict, List, Optional

import numpy as np

from config.settings import HEADER_TOKEN
from report.trial import Measurement, Trial

logger = logging.getLogger(__name__)

TRIAL_PREFIX = 'TRIAL RUN'
HEADER_PATTERN = re.compile(
    r'TRIAL RUN (\d+) - DEADLINE == ([\d.]+) SECURITY UTILITY == ([\d.]+)'
)


class ParserState(Enum):
    AWAITING_TRIAL_HEADER = 0
    IN_TRIAL_BODY = 1


class LineAction(Enum):
    TRIAL_STARTED = 0
    MEASUREMENT_ADDED = 1
    SKIPPED = 2


def parse_float(text: str) -> float:
    """숫자 변환 (실패 시 NaN)"""
    try:
        return float(text)
    except ValueError:
        return np.nan


class ReportParser:
    """줄 단위 리포트 파서"""

    def __init__(self):
        self.trials: Dict[int, Trial] = {}
        self.state = ParserState.AWAITING_TRIAL_HEADER
        self.current: Optional[Trial] = None
        self.skipped = 0

    def feed(self, line: str) -> LineAction:
        """
        한 줄 처리

        Returns:
            이번 줄에서 일어난 전이 (TRIAL_STARTED / MEASUREMENT_ADDED / SKIPPED)
        """
        line = line.strip()

        if line.startswith(TRIAL_PREFIX):
            trial = self._parse_header(line)
            if trial is None:
                # 깨진 헤더 뒤의 행이 이전 트라이얼에 붙지 않도록 초기화
                self.state = ParserState.AWAITING_TRIAL_HEADER
                self.current = None
                return self._skip(line, "malformed trial header")

            self.trials[trial.number] = trial
            self.current = trial
            self.state = ParserState.IN_TRIAL_BODY
            return LineAction.TRIAL_STARTED

        if self.state is ParserState.AWAITING_TRIAL_HEADER:
            return self._skip(line, "no current trial")

        if not line or ',' not in line:
            return self._skip(line, "not a row")

        measurement = self._parse_row(line)
        if measurement is None:
            return self._skip(line, "malformed row")

        self.current.measurements.append(measurement)
        return LineAction.MEASUREMENT_ADDED

    def feed_all(self, text: str) -> Dict[int, Trial]:
        for line in text.splitlines():
            self.feed(line)
        return self.trials

    def _skip(self, line: str, reason: str) -> LineAction:
        if line:
            self.skipped += 1
            logger.debug(f"Skipped line ({reason}): {line!r}")
        return LineAction.SKIPPED

    @staticmethod
    def _parse_header(line: str) -> Optional[Trial]:
        match = HEADER_PATTERN.match(line)
        if not match:
            return None

        number = int(match.group(1))
        if number <= 0:
            return None

        try:
            deadline = float(match.group(2))
            security_utility = float(match.group(3))
        except ValueError:
            # "1.2.3" 같은 값
            return None

        return Trial(number=number, deadline=deadline, security_utility=security_utility)

    @staticmethod
    def _parse_row(line: str) -> Optional[Measurement]:
        parts = [p.strip() for p in line.split(',')]
        if len(parts) != 4 or parts[0] == HEADER_TOKEN or not parts[0]:
            return None

        return Measurement(
            scheduler=parts[0],
            makespan=parse_float(parts[2]),
            utility=parse_float(parts[3])
        )


def parse_report(text: str) -> Dict[int, Trial]:
    """
    리포트 텍스트 전체 파싱

    Args:
        text: 업로드된 리포트 원문

    Returns:
        {트라이얼 번호: Trial} (빈 입력이면 빈 dict)
    """
    parser = ReportParser()
    trials = parser.feed_all(text or '')
    logger.info(
        f"Parsed {len(trials)} trials, "
        f"{sum(len(t.measurements) for t in trials.values())} measurements "
        f"({parser.skipped} lines skipped)"
    )
    return trials


def scheduler_names(trials: Dict[int, Trial]) -> List[str]:
    """전체 트라이얼에 등장한 스케줄러 이름 (정렬)"""
    names = set()
    for trial in trials.values():
        names.update(m.scheduler for m in trial.measurements)
    return sorted(names)


def max_trial_number(trials: Dict[int, Trial]) -> int:
    """가장 큰 트라이얼 번호 (없으면 0)"""
    return max(trials) if trials else 0
