"""
시각화 상태

선택/색상/현재 트라이얼을 직렬화 가능한 불변 객체 하나로 관리.
상태 변경은 항상 새 객체를 반환 (뷰 생성 사이에 통째로 교체).
"""
import json
import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from config.settings import STORAGE_KEYS
from report.parser import scheduler_names
from report.trial import Trial
from state.storage import KeyValueStorage, StorageError
from view.palette import assign_colors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisualizerState:
    """UI 상태 (세션 간 유지되는 것은 selected/colors)"""
    selected: Dict[str, bool] = field(default_factory=dict)
    colors: Dict[str, str] = field(default_factory=dict)
    schedulers: List[str] = field(default_factory=list)  # 현재 데이터의 스케줄러
    selected_trial: int = 1

    def to_dict(self) -> Dict:
        return {
            'selected': dict(self.selected),
            'colors': dict(self.colors),
            'schedulers': list(self.schedulers),
            'selected_trial': self.selected_trial,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'VisualizerState':
        return cls(
            selected={str(k): bool(v) for k, v in data.get('selected', {}).items()},
            colors={str(k): str(v) for k, v in data.get('colors', {}).items()},
            schedulers=list(data.get('schedulers', [])),
            selected_trial=int(data.get('selected_trial', 1)),
        )


def register_schedulers(state: VisualizerState, trials: Dict[int, Trial]) -> VisualizerState:
    """
    새 데이터 반영

    - 처음 본 스케줄러: 선택 True, 팔레트 색상
    - 이미 아는 스케줄러: 선택/색상 유지
    - 현재 트라이얼이 없어졌으면 가장 작은 번호로 이동
    """
    names = scheduler_names(trials)

    selected = dict(state.selected)
    for name in names:
        selected.setdefault(name, True)

    selected_trial = state.selected_trial
    if trials and selected_trial not in trials:
        selected_trial = min(trials)

    return replace(
        state,
        selected=selected,
        colors=assign_colors(names, state.colors),
        schedulers=names,
        selected_trial=selected_trial,
    )


def toggle_scheduler(state: VisualizerState, name: str) -> VisualizerState:
    return set_scheduler_selected(state, name, not state.selected.get(name, True))


def set_scheduler_selected(state: VisualizerState, name: str, flag: bool) -> VisualizerState:
    selected = dict(state.selected)
    selected[name] = bool(flag)
    return replace(state, selected=selected)


def set_color(state: VisualizerState, name: str, color: str) -> VisualizerState:
    """사용자 색상 지정 (자동 배정보다 우선)"""
    colors = dict(state.colors)
    colors[name] = color
    return replace(state, colors=colors)


def select_trial(state: VisualizerState, trial_number: int) -> VisualizerState:
    return replace(state, selected_trial=int(trial_number))


def selected_schedulers(state: VisualizerState) -> List[str]:
    """현재 데이터 중 포함된 스케줄러 (정렬)"""
    return [s for s in state.schedulers if state.selected.get(s, True)]


# ========== 저장/복원 ==========

def _load_json(storage: KeyValueStorage, key: str) -> Optional[Dict]:
    raw = storage.get(key)
    if raw is None:
        return None
    value = json.loads(raw)
    if not isinstance(value, dict):
        raise ValueError(f"{key} is not a JSON object")
    return value


def load_state(storage: KeyValueStorage) -> VisualizerState:
    """
    저장된 선택/색상 복원

    저장된 값이 없거나 읽을 수 없으면 기본 상태.
    """
    try:
        selected = _load_json(storage, STORAGE_KEYS['selection']) or {}
        colors = _load_json(storage, STORAGE_KEYS['colors']) or {}
    except (StorageError, ValueError) as e:
        logger.warning(f"No usable stored preferences, using defaults: {e}")
        return VisualizerState()

    return VisualizerState.from_dict({'selected': selected, 'colors': colors})


def save_state(storage: KeyValueStorage, state: VisualizerState) -> bool:
    """
    선택/색상 저장

    Returns:
        실제로 저장했는지 (선택이 비어 있으면 저장 안 함)
    """
    if not state.selected:
        return False

    try:
        storage.set(STORAGE_KEYS['selection'], json.dumps(state.selected))
        storage.set(STORAGE_KEYS['colors'], json.dumps(state.colors))
    except StorageError as e:
        logger.error(f"Error saving preferences: {e}")
        return False
    return True
