"""
Crash Report 解析器
从 macOS crash reporter 生成的 .crash 文本中提取结构化字段
"""
import re
import logging
from typing import Dict, List, Optional
from enum import Enum

from tools.filesystem_tool import FileSystemGateway

logger = logging.getLogger(__name__)

# 解析结果：字段名 -> 字符串值，缺失的字段不出现
CrashReport = Dict[str, str]


class ScanState(Enum):
    """栈回溯捕获状态"""
    SCANNING = "scanning"                 # 普通逐行扫描
    AWAITING_MARKER = "awaiting_marker"   # 已读到 Crashed Thread，等待 "Thread N Crashed"


def split_tokens(text: str, delimiter: str) -> List[str]:
    """按分隔符切分，丢弃空片段后去除首尾空白"""
    return [piece.strip() for piece in text.split(delimiter) if piece]


class CrashReportParser:
    """Crash Report 解析器"""

    # 头部字段 -> 输出字段名
    CRASH_DUMP_KEYS = {
        'Process': 'pid',
        'Path': 'path',
        'Log Location': 'crash_path',
        'Identifier': 'identifier',
        'Version': 'version',
        'Parent Process': 'parent',
        'Responsible': 'responsible',
        'User ID': 'uid',
        'Date/Time': 'datetime',
        'Crashed Thread': 'crashed_thread',
        'Triggered by Thread': 'crashed_thread',
        'Exception Type': 'exception_type',
        'Exception Codes': 'exception_codes',
        'Exception Note': 'exception_notes',
        # 寄存器: x86_64 / arm64 (mobile)
        'rax': 'registers',
        'x0': 'registers',
    }

    REGISTER_KEYS = ('rax', 'x0')
    THREAD_KEYS = ('Crashed Thread', 'Triggered by Thread')
    PROCESS_KEYS = ('Process', 'Parent Process')

    CRASHED_THREAD_FORMAT = "Thread {} Crashed"
    PID_PATTERN = re.compile(r'\[\d+\]')

    def __init__(self, fs_gateway: Optional[FileSystemGateway] = None):
        self.fs_gateway = fs_gateway or FileSystemGateway()

    def parse_file(self, crash_path: str) -> CrashReport:
        """
        读取并解析一个 crash 文件

        读取失败时只返回 crash_path
        """
        report: CrashReport = {'crash_path': crash_path}

        read_result = self.fs_gateway.read_file(crash_path)
        if not read_result.success:
            return report

        return self.parse(read_result.content, crash_path)

    def parse(self, content: str, crash_path: str) -> CrashReport:
        """
        解析 crash report 文本

        Args:
            content: crash 文件全文
            crash_path: 来源文件路径

        Returns:
            字段字典，无法识别的行直接跳过
        """
        report: CrashReport = {'crash_path': crash_path}

        state = ScanState.SCANNING
        crashed_thread = None

        lines = split_tokens(content, '\n')
        i = 0
        while i < len(lines):
            line = lines[i]
            i += 1

            tokens = split_tokens(line, ':')
            if not tokens:
                continue
            key = tokens[0]

            # 崩溃线程的第一帧紧跟在 "Thread N Crashed" 之后
            if (state is ScanState.AWAITING_MARKER
                    and key == self.CRASHED_THREAD_FORMAT.format(crashed_thread)):
                if i < len(lines):
                    report['stack_trace'] = lines[i]
                    i += 1
                state = ScanState.SCANNING
                continue

            if key not in self.CRASH_DUMP_KEYS:
                continue
            field_name = self.CRASH_DUMP_KEYS[key]

            if key in self.REGISTER_KEYS:
                # 寄存器跨两行
                reg_str = line
                if i < len(lines):
                    reg_str = f"{line} {lines[i]}"
                    i += 1
                report[field_name] = self._normalize_registers(reg_str)

            elif key == 'Date/Time':
                # 时间中的冒号被切开了，重新拼回
                if len(tokens) >= 4:
                    report[field_name] = ':'.join(tokens[1:4])

            elif key in self.THREAD_KEYS:
                if len(tokens) < 2:
                    continue
                thread_tokens = split_tokens(tokens[1], ' ')
                if not thread_tokens:
                    continue
                crashed_thread = thread_tokens[0]
                report[field_name] = crashed_thread
                state = ScanState.AWAITING_MARKER

            elif key in self.PROCESS_KEYS:
                match = self.PID_PATTERN.search(line)
                if match:
                    report[field_name] = match.group(0)[1:-1]

            elif len(tokens) >= 2:
                report[field_name] = tokens[1]

        logger.debug(f"Parsed {len(report)} fields from {crash_path}")
        return report

    @staticmethod
    def _normalize_registers(reg_str: str) -> str:
        """压缩寄存器行的空白"""
        reg_str = reg_str.replace(': ', ':')
        while '   ' in reg_str:
            reg_str = reg_str.replace('   ', ' ')
        return reg_str
