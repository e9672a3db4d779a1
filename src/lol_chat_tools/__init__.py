"""
LoL Chat Tools - Python package for League of Legends chat log analysis

This package parses the plain-text chat/event logs of League of Legends
matches into structured reports and provides tools to export them as
JSON, Excel workbooks and timeline charts.
"""

__version__ = '1.0.0'

from .parser import NoTimestampError, ParsedLog, extract_timestamp, parse_log

__all__ = ['NoTimestampError', 'ParsedLog', 'extract_timestamp', 'parse_log']
