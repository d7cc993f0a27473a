"""트라이얼 데이터 모델 (파서/뷰/리포트 공통)"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Measurement:
    """트라이얼 하나에서 스케줄러 하나의 측정값"""
    scheduler: str
    makespan: float  # 낮을수록 좋음 (파싱 실패 시 NaN)
    utility: float   # 높을수록 좋음 (파싱 실패 시 NaN)


@dataclass
class Trial:
    """벤치마크 실행 1회"""
    number: int
    deadline: float
    security_utility: float  # 최소 보안 유틸리티 임계값
    measurements: List[Measurement] = field(default_factory=list)

    def __repr__(self):
        return (f"Trial({self.number}, deadline={self.deadline}, "
                f"su={self.security_utility}, n={len(self.measurements)})")
