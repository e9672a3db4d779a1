"""
Chat log parsing and report aggregation.

``parse_log`` walks a log line by line, classifies each timestamped line
and folds the results into a ``ParsedLog``. Lines without a timestamp are
kept as system lines; nothing in a log makes the parse fail.
"""

import logging
from collections import Counter, defaultdict
from typing import Dict, List, Set, Tuple

from .extractors import (
    KIND_CHAT,
    KIND_GENERIC,
    KIND_KILL,
    KIND_OBJECTIVE,
    Classification,
    NoTimestampError,
    classify_line,
    split_line,
)
from .models import ParsedLog, PlayerSummary, SystemLine

logger = logging.getLogger(__name__)


class ReportBuilder:
    """
    Accumulates classified lines into a report.

    One builder belongs to one parse. Records are kept in the order they are
    added; the player roster is only sorted when the report is built.
    """

    def __init__(self):
        self._players: Dict[str, Set[str]] = defaultdict(set)
        self._kills = []
        self._events = []
        self._messages = []
        self._system = []
        self.line_count = 0
        self.dropped_count = 0

    def add_player(self, name: str, champion: str) -> None:
        """Record that a player was seen playing a champion."""
        self._players[name].add(champion)

    def add_system_line(self, text: str) -> None:
        self._system.append(SystemLine(text))

    def add_classification(self, classification: Classification) -> None:
        """
        Fold one classified line into the report.

        Args:
            classification: Result of the extractor cascade for the line
        """
        for participant in classification.participants:
            self.add_player(participant.player, participant.champion)

        if classification.kind == KIND_CHAT:
            self._messages.append(classification.record)
        elif classification.kind == KIND_KILL:
            self._kills.append(classification.record)
        elif classification.kind == KIND_OBJECTIVE:
            self._events.append(classification.record)
        else:
            self.dropped_count += 1

    def add_line(self, line: str) -> None:
        """
        Classify and add one raw log line. Blank lines are ignored.

        Args:
            line: Raw line, surrounding whitespace allowed
        """
        line = line.strip()
        if not line:
            return
        self.line_count += 1

        try:
            time, rest = split_line(line)
        except NoTimestampError:
            logger.debug(f"Line {self.line_count} has no timestamp, kept as system text")
            self.add_system_line(line)
            return

        classification = classify_line(time, rest)
        if classification.kind == KIND_GENERIC:
            logger.debug(f"Line {self.line_count}: unrecognised action dropped: {classification.action!r}")
        else:
            logger.debug(f"Line {self.line_count} classified as {classification.kind}")
        self.add_classification(classification)

    def build(self) -> ParsedLog:
        """
        Produce the final report.

        Returns:
            ParsedLog with players sorted by name and each player's champions
            sorted alphabetically
        """
        players = tuple(
            PlayerSummary(name=name, champions=tuple(sorted(champions)))
            for name, champions in sorted(self._players.items())
        )
        return ParsedLog(
            players=players,
            kills=tuple(self._kills),
            events=tuple(self._events),
            messages=tuple(self._messages),
            system=tuple(self._system),
        )


def parse_log(text: str) -> ParsedLog:
    """
    Parse a whole chat log into a report.

    Args:
        text: Full log contents

    Returns:
        The parsed report. This never fails; unparseable lines end up in
        ``system``.
    """
    builder = ReportBuilder()
    for line in text.split("\n"):
        builder.add_line(line)

    report = builder.build()
    logger.info(
        f"Parsed {builder.line_count} lines: {len(report.players)} players, "
        f"{len(report.kills)} kills, {len(report.events)} events, "
        f"{len(report.messages)} messages, {len(report.system)} system lines"
    )
    if builder.dropped_count:
        logger.debug(f"{builder.dropped_count} timestamped lines produced no record")
    return report


def extract_timestamp(line: str) -> str:
    """
    Return the clock string at the start of a log line.

    Args:
        line: A single log line, e.g. ``17:34 [Team] kozakSyla (Lux): hi``

    Returns:
        The clock string, e.g. ``17:34``

    Raises:
        NoTimestampError: If the line does not start with a clock string
            followed by a space
    """
    time, _ = split_line(line)
    return time


def timestamp_to_seconds(time: str) -> int:
    """
    Convert a clock string to seconds.

    Groups are read as base-60 digits, so ``13:05`` is 785 and ``1:00:00``
    is 3600. Values are not range checked.
    """
    seconds = 0
    for group in time.split(":"):
        seconds = seconds * 60 + int(group)
    return seconds


def kill_ranking(report: ParsedLog) -> List[Tuple[str, int]]:
    """
    Rank killers by number of kill announcements.

    Returns:
        List of (player, kills) sorted by kills descending, then by name
    """
    counts = Counter(kill.killer for kill in report.kills)
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))
