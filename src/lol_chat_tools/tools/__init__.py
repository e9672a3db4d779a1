"""
LoL Chat Tools - command-line tools

This package provides the command-line tools built on the chat log parser:
JSON conversion, Excel export and activity timeline plotting.
"""

from .chat_log_parser import ChatLogParserTool
from .report_to_excel import ReportExcelExporter
from .timeline_plotter import TimelinePlotter

__all__ = [
    'ChatLogParserTool',
    'ReportExcelExporter',
    'TimelinePlotter',
]
