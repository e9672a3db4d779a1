"""
Data model for parsed League of Legends chat logs.

Every record is an immutable dataclass with a ``to_dict`` method producing
the JSON-ready shape written by the command-line tools.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Optional, Tuple


class ChatChannel(Enum):
    """Chat scope a message was sent to."""
    ALL = "all"
    TEAM = "team"
    PARTY = "party"
    PLAYER = "player"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["ChatChannel"]:
        """
        Map the text inside a bracketed channel tag to a channel.

        Args:
            tag: Bracket content without the brackets, e.g. ``All``

        Returns:
            The matching channel, or None when the tag is not a channel tag.
            Matching is exact and case-sensitive.
        """
        return _CHANNEL_TAGS.get(tag)


_CHANNEL_TAGS = {
    "All": ChatChannel.ALL,
    "Team": ChatChannel.TEAM,
    "Party": ChatChannel.PARTY,
}


@dataclass(frozen=True)
class PlayerChampion:
    """A player name paired with the champion they were seen playing."""
    player: str
    champion: str

    def __str__(self) -> str:
        return f"{self.player} ({self.champion})"


@dataclass(frozen=True)
class ChatMessage:
    """A single chat line."""
    time: str
    channel: ChatChannel
    player: str
    champion: str
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "channel": self.channel.value,
            "player": self.player,
            "champion": self.champion,
            "text": self.text,
        }


@dataclass(frozen=True)
class KillEvent:
    """
    A shutdown or first-blood announcement.

    Exactly one of ``is_shutdown`` and ``is_first_blood`` is set. Victim
    fields are only present on shutdowns.
    """
    time: str
    killer: str
    killer_champion: str
    victim: Optional[str] = None
    victim_champion: Optional[str] = None
    bounty: Optional[int] = None
    is_shutdown: bool = False
    is_first_blood: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "killer": self.killer,
            "killer_champion": self.killer_champion,
            "victim": self.victim,
            "victim_champion": self.victim_champion,
            "bounty": self.bounty,
            "is_shutdown": self.is_shutdown,
            "is_first_blood": self.is_first_blood,
        }


@dataclass(frozen=True)
class ObjectiveEvent:
    """An objective, ping, purchase or targeting line."""
    time: str
    description: str
    team: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "team": self.team,
            "description": self.description,
        }


@dataclass(frozen=True)
class PlayerSummary:
    """A player and every champion they were paired with, sorted."""
    name: str
    champions: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "champions": list(self.champions),
        }


@dataclass(frozen=True)
class SystemLine:
    """A line without a leading timestamp, kept verbatim (trimmed)."""
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class ParsedLog:
    """
    The structured report for one log.

    Attributes:
        players: Player roster sorted by name
        kills: Kill events in log order
        events: Objective and ping events in log order
        messages: Chat messages in log order
        system: Lines without a timestamp in log order
    """
    players: Tuple[PlayerSummary, ...] = field(default_factory=tuple)
    kills: Tuple[KillEvent, ...] = field(default_factory=tuple)
    events: Tuple[ObjectiveEvent, ...] = field(default_factory=tuple)
    messages: Tuple[ChatMessage, ...] = field(default_factory=tuple)
    system: Tuple[SystemLine, ...] = field(default_factory=tuple)

    def player(self, name: str) -> Optional[PlayerSummary]:
        """Look up a player summary by exact name."""
        for summary in self.players:
            if summary.name == name:
                return summary
        return None

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "players": [p.to_dict() for p in self.players],
            "kills": [k.to_dict() for k in self.kills],
            "events": [e.to_dict() for e in self.events],
            "messages": [m.to_dict() for m in self.messages],
            "system": [s.to_dict() for s in self.system],
        }
