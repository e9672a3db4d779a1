"""
League of Legends chat log parser.

Turns a plain-text chat/event log into a ParsedLog with the player roster,
kill events, objective and ping events, chat messages and system lines.
"""

from .extractors import NoTimestampError, classify_line, split_line
from .log_parser import ReportBuilder, extract_timestamp, kill_ranking, parse_log, timestamp_to_seconds
from .models import (
    ChatChannel,
    ChatMessage,
    KillEvent,
    ObjectiveEvent,
    ParsedLog,
    PlayerChampion,
    PlayerSummary,
    SystemLine,
)

__all__ = [
    'ChatChannel',
    'ChatMessage',
    'KillEvent',
    'NoTimestampError',
    'ObjectiveEvent',
    'ParsedLog',
    'PlayerChampion',
    'PlayerSummary',
    'ReportBuilder',
    'SystemLine',
    'classify_line',
    'extract_timestamp',
    'kill_ranking',
    'parse_log',
    'split_line',
    'timestamp_to_seconds',
]
