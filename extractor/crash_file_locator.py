"""
Crash 文件定位器
在目录中筛选待解析的 .crash 文件
"""
import os
import logging
from typing import List, Optional
from dataclasses import dataclass
from enum import Enum

from tools.filesystem_tool import FileSystemGateway

logger = logging.getLogger(__name__)


class CrashReportType(Enum):
    """Crash report 来源类型"""
    APPLICATION = "application"
    MOBILE = "mobile"


@dataclass
class CrashFileReference:
    """待解析的 crash 文件"""
    path: str
    report_type: CrashReportType


class CrashFileLocator:
    """Crash 文件定位器"""

    CRASH_EXTENSION = ".crash"
    EXCLUDED_SUBSTRING = "LowBattery"

    def __init__(self, fs_gateway: Optional[FileSystemGateway] = None):
        self.fs_gateway = fs_gateway or FileSystemGateway()

    def is_candidate(self, path: str) -> bool:
        """文件名以 .crash 结尾且不含 LowBattery"""
        name = os.path.basename(path)
        return (name.endswith(self.CRASH_EXTENSION)
                and self.EXCLUDED_SUBSTRING not in name)

    def locate(self, directory: str, report_type: CrashReportType) -> List[CrashFileReference]:
        """
        列出目录下的 crash 文件

        Args:
            directory: 要扫描的目录
            report_type: 结果的来源类型

        Returns:
            CrashFileReference 列表；目录不存在或不可读时为空
        """
        candidates = [
            CrashFileReference(path=path, report_type=report_type)
            for path in self.fs_gateway.list_files(directory)
            if self.is_candidate(path)
        ]

        if candidates:
            logger.info(f"Found {len(candidates)} crash reports in {directory}")
        return candidates
