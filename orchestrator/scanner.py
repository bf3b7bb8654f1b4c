"""
扫描流程
决定扫描哪些目录，并驱动 定位 -> 解析 -> 汇总
"""
import os
import logging
from typing import Dict, List, Optional

from extractor.crash_file_locator import (
    CrashFileLocator,
    CrashReportType,
)
from extractor.crash_report_parser import CrashReport, CrashReportParser
from orchestrator.query_context import QueryContext
from tools.filesystem_tool import FileSystemGateway
from tools.user_tool import UserAccountGateway

logger = logging.getLogger(__name__)

# 系统级 crash 日志目录
DIAGNOSTIC_REPORTS_PATH = "/Library/Logs/DiagnosticReports"
# 用户移动设备 crash 日志目录（每个子目录对应一台设备）
MOBILE_DIAGNOSTIC_REPORTS_PATH = "/Library/Logs/CrashReporter/MobileDevice"


def _under_home(home: str, path: str) -> str:
    return os.path.join(home, path.lstrip('/'))


class RowAggregator:
    """结果汇总"""

    def __init__(self):
        self._rows: List[Dict[str, str]] = []

    def add(self, report: CrashReport, report_type: CrashReportType):
        row = dict(report)
        row['type'] = report_type.value
        self._rows.append(row)

    @property
    def rows(self) -> List[Dict[str, str]]:
        return list(self._rows)

    def __len__(self) -> int:
        return len(self._rows)


class ScanOrchestrator:
    """Crash 日志扫描器"""

    def __init__(
        self,
        fs_gateway: Optional[FileSystemGateway] = None,
        user_gateway: Optional[UserAccountGateway] = None,
        system_reports_path: str = DIAGNOSTIC_REPORTS_PATH
    ):
        self.fs_gateway = fs_gateway or FileSystemGateway()
        self.user_gateway = user_gateway or UserAccountGateway()
        self.system_reports_path = system_reports_path
        self.locator = CrashFileLocator(self.fs_gateway)
        self.parser = CrashReportParser(self.fs_gateway)

    def scan(self, context: Optional[QueryContext] = None) -> List[Dict[str, str]]:
        """
        执行一次完整扫描

        Args:
            context: 查询上下文，提供 uid 约束

        Returns:
            每个 crash 文件一行
        """
        context = context or QueryContext()
        uid_constraint = context.constraint('uid')
        aggregator = RowAggregator()

        # 系统日志只在 uid 约束不存在或为 0 时扫描
        if uid_constraint.not_exists_or_matches("0"):
            self._process_directory(
                self.system_reports_path, CrashReportType.APPLICATION, aggregator
            )

        # 用户日志总是扫描
        users = self.user_gateway.list_users(uid_constraint.values or None)
        for user in users:
            # 相对路径会落到当前工作目录
            if not os.path.isabs(user.directory):
                logger.debug(f"Skipping user {user.username}: no absolute home directory")
                continue

            self._process_directory(
                _under_home(user.directory, DIAGNOSTIC_REPORTS_PATH),
                CrashReportType.APPLICATION,
                aggregator
            )

            mobile_root = _under_home(user.directory, MOBILE_DIAGNOSTIC_REPORTS_PATH)
            for device_dir in self.fs_gateway.list_directories(mobile_root):
                self._process_directory(device_dir, CrashReportType.MOBILE, aggregator)

        logger.info(f"Scan completed: {len(aggregator)} crash reports from {len(users)} users")
        return aggregator.rows

    def _process_directory(
        self,
        directory: str,
        report_type: CrashReportType,
        aggregator: RowAggregator
    ):
        for ref in self.locator.locate(directory, report_type):
            aggregator.add(self.parser.parse_file(ref.path), ref.report_type)
