"""
本地 crash 日志扫描
直接扫描本机的 crash report 目录，不经过 HTTP 服务
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from orchestrator.config import get_settings
from orchestrator.query_context import QueryContext
from orchestrator.scanner import ScanOrchestrator
from tools.filesystem_tool import FileSystemGateway

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scan local crash reports")
    parser.add_argument(
        "--uid", action="append", default=None,
        help="only scan crash reports of this uid (repeatable)"
    )
    parser.add_argument("--output", help="write rows to this JSON file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format=settings.LOG_FORMAT
    )

    args = build_arg_parser().parse_args(argv)

    scanner = ScanOrchestrator(
        fs_gateway=FileSystemGateway(encoding=settings.READ_ENCODING)
    )
    rows = scanner.scan(QueryContext.from_uids(args.uid))

    by_type = {}
    for row in rows:
        by_type[row['type']] = by_type.get(row['type'], 0) + 1
    logger.info(f"Collected {len(rows)} crash reports: {by_type}")

    payload = json.dumps(rows, indent=2, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(payload, encoding='utf-8')
        logger.info(f"Rows saved to: {args.output}")
    else:
        print(payload)

    return 0


if __name__ == "__main__":
    sys.exit(main())
