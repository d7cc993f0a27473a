"""
시각화 도구 설정

코드 곳곳의 하드코딩 값을 한 곳에 모음.
경로/로그 레벨은 환경 변수로 덮어쓸 수 있음.
"""
import os
from pathlib import Path

# 스케줄러 기본 색상 (처음 본 스케줄러에 순환 배정)
DEFAULT_COLORS = [
    '#E74C3C', '#3498DB', '#2ECC71', '#F39C12', '#9B59B6', '#1ABC9C',
    '#E67E22', '#34495E', '#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4',
    '#FECA57', '#FF9FF3', '#54A0FF', '#FD79A8', '#00B894', '#74B9FF'
]

# 색상이 없는 스케줄러 표시용
FALLBACK_COLOR = '#000000'

# utility 차이가 이 값 미만이면 makespan으로 순위 결정 (경험적 값)
UTILITY_EPSILON = 0.01

# 측정 행 헤더 (첫 필드가 이 값이면 건너뜀)
HEADER_TOKEN = 'SCHEDULER'

# 텍스트 리포트
REPORT_TITLE = 'SCHEDULER PERFORMANCE REPORT'
RULE_WIDTH = 80
NA_PLACEHOLDER = 'N/A'

# 저장소 키 (값은 JSON 문자열)
STORAGE_KEYS = {
    'selection': 'selected_schedulers',
    'colors': 'scheduler_colors',
}

STORAGE_PATH = Path(os.environ.get(
    'SCHEDVIZ_STORAGE_PATH',
    Path.home() / '.scheduler_visualizer' / 'preferences.json'
))

LOG_LEVEL = os.environ.get('SCHEDVIZ_LOG_LEVEL', 'INFO')

SAMPLE_REPORT_PATH = Path(__file__).resolve().parent.parent / 'sample_data' / 'sample_report.txt'
