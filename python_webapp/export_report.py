#!/usr/bin/env python3
"""
리포트 파일 → 텍스트 리포트 변환 (웹 UI 없이)

사용 예:
  python export_report.py results.csv -o scheduler_report.txt --exclude RoundRobin
"""

import argparse
import logging
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.log import setup_logging
from report.exporter import export_text_report
from report.parser import parse_report, scheduler_names

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="스케줄러 벤치마크 텍스트 리포트 생성")
    parser.add_argument("report", help="입력 리포트 파일 (TRIAL RUN 형식)")
    parser.add_argument("-o", "--output", help="출력 파일 (생략 시 표준 출력)")
    parser.add_argument(
        "--exclude", nargs="*", default=[], metavar="NAME",
        help="리포트에서 제외할 스케줄러"
    )
    parser.add_argument("--log-level", default=None, help="로그 레벨 (기본: SCHEDVIZ_LOG_LEVEL 또는 INFO)")
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        with open(args.report, encoding='utf-8', errors='replace') as f:
            text = f.read()
    except OSError as e:
        logger.error(f"Cannot read report: {e}")
        return 1

    trials = parse_report(text)
    if not trials:
        logger.warning("No trials found in input")

    unknown = set(args.exclude) - set(scheduler_names(trials))
    if unknown:
        logger.warning(f"Excluded schedulers not in report: {', '.join(sorted(unknown))}")

    selection = {name: False for name in args.exclude}
    output = export_text_report(trials, selection)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
        logger.info(f"Wrote {len(trials)} trials to {args.output}")
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
