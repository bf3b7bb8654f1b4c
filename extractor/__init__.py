"""
Crash Report Extractor Package

Provides tools for locating and parsing OS crash report files.
"""

from .crash_report_parser import CrashReportParser, ScanState, split_tokens
from .crash_file_locator import CrashFileLocator, CrashFileReference, CrashReportType

__all__ = [
    'CrashReportParser',
    'ScanState',
    'split_tokens',
    'CrashFileLocator',
    'CrashFileReference',
    'CrashReportType',
]
