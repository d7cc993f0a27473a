"""
텍스트 리포트 내보내기

형식 (트라이얼 번호 오름차순):
  SCHEDULER PERFORMANCE REPORT
  ================...
  TRIAL RUN <n>
  Deadline: <v>
  Min Security Utility: <v>
  ----------------...
  Rank | Scheduler | Makespan | Utility
  ----------------...
  1 | <name> | <makespan:.2f> | <utility:.2f>

표시 전용 형식이라 다시 파싱할 수 있을 필요는 없음.
"""
from typing import Dict, List

from config.settings import REPORT_TITLE, RULE_WIDTH
from report.trial import Trial
from view.builder import RankedEntry, build_comparison_view
from view.formatting import fmt_metric, fmt_number

TABLE_HEADER = 'Rank | Scheduler | Makespan | Utility'


def format_trial_table(entries: List[RankedEntry]) -> str:
    """순위 표 본문 (헤더 + 행)"""
    rule = '-' * RULE_WIDTH
    lines = [rule, TABLE_HEADER, rule]
    for e in entries:
        lines.append(
            f"{e.rank} | {e.scheduler} | {fmt_metric(e.makespan)} | {fmt_metric(e.utility)}"
        )
    return '\n'.join(lines) + '\n'


def export_text_report(trials: Dict[int, Trial], selection: Dict[str, bool]) -> str:
    """
    전체 트라이얼 텍스트 리포트

    Args:
        trials: 파싱 결과
        selection: {스케줄러: 포함 여부} (제외된 스케줄러는 표에서 빠짐)
    """
    text = f"{REPORT_TITLE}\n"
    text += '=' * RULE_WIDTH + '\n\n'

    for number in sorted(trials):
        trial = trials[number]
        entries = build_comparison_view(trials, selection, {}, number)

        text += f"TRIAL RUN {number}\n"
        text += f"Deadline: {fmt_number(trial.deadline)}\n"
        text += f"Min Security Utility: {fmt_number(trial.security_utility)}\n"
        text += format_trial_table(entries)
        text += '\n\n'

    return text
