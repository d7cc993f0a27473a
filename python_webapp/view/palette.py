"""스케줄러 색상 배정"""
from typing import Dict, Iterable, List, Optional

from config.settings import DEFAULT_COLORS, FALLBACK_COLOR


def assign_colors(
    names: Iterable[str],
    colors: Dict[str, str],
    palette: Optional[List[str]] = None
) -> Dict[str, str]:
    """
    새로 본 스케줄러에만 팔레트 색상 배정

    새 이름들을 이름순 정렬한 뒤 i번째에 palette[i % len(palette)]를 준다.
    이미 색상이 있는 이름은 건드리지 않음 (사용자 변경만 덮어씀).

    Returns:
        새 색상 dict (입력 dict는 수정하지 않음)
    """
    palette = palette or DEFAULT_COLORS
    result = dict(colors)
    new_names = sorted(set(n for n in names if n not in result))
    for idx, name in enumerate(new_names):
        result[name] = palette[idx % len(palette)]
    return result


def resolve_color(name: str, colors: Dict[str, str]) -> str:
    return colors.get(name) or FALLBACK_COLOR
