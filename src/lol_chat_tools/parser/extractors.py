"""
Line classification and field extraction.

A timestamped line body is tried against each extractor in a fixed order
(chat, kill, objective/ping, generic player action) and the first match
wins. Extractors return None when a line does not have their shape; only
the timestamp splitter raises.
"""

import logging
import string
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from pyparsing import ParseException

from .grammar import LINE
from .models import ChatChannel, ChatMessage, KillEvent, ObjectiveEvent, PlayerChampion

logger = logging.getLogger(__name__)

SHUTDOWN_MARKER = " has shut down "
BOUNTY_MARKER = "Bonus Bounty:"
FIRST_BLOOD_SUFFIX = " has drawn first blood!"
TEAM_FEAT_MARKER = " has completed the "
TARGET_MARKER = " has targeted "
TARGET_SEPARATOR = " - ("

TEAM_NAMES = ("Enemy team", "Ally team", "Blue team", "Red team")

TACTICAL_MARKERS = (
    "has targeted",
    "purchased ",
    "is on rampage!",
    " is on the way",
    " is missing",
    " is retreating",
    " is in danger",
    " needs vision",
)

# Classification kinds, in the order they are attempted
KIND_CHAT = "chat"
KIND_KILL = "kill"
KIND_OBJECTIVE = "objective"
KIND_GENERIC = "generic"
KIND_UNRECOGNIZED = "unrecognized"

Record = Union[ChatMessage, KillEvent, ObjectiveEvent]


class NoTimestampError(ValueError):
    """Raised when a line does not start with a clock string and a space."""

    def __init__(self, line: str):
        super().__init__(f"No timestamp found in line: {line!r}")
        self.line = line


@dataclass(frozen=True)
class Classification:
    """
    Outcome of running the extractor cascade on one line body.

    Attributes:
        kind: Which extractor matched (one of the KIND_* constants)
        record: The chat message, kill or objective event, if any
        participants: Player/champion pairs seen on the line
        action: Dropped action text of a generic player line
    """
    kind: str
    record: Optional[Record] = None
    participants: Tuple[PlayerChampion, ...] = ()
    action: Optional[str] = None


def split_line(line: str) -> Tuple[str, str]:
    """
    Split a log line into its clock string and the rest of the line.

    Args:
        line: A single log line

    Returns:
        Tuple of (time, rest) where rest is everything after the first space

    Raises:
        NoTimestampError: If the line does not start with a clock string
            followed by a space
    """
    try:
        result = LINE.parse_string(line.strip(), parse_all=True)
    except ParseException as e:
        raise NoTimestampError(line.strip()) from e
    return result["time"], result.get("body", "")


def parse_player_with_champion(text: str) -> Optional[Tuple[PlayerChampion, str]]:
    """
    Parse a leading ``player (champion)`` pair.

    The player is the text before the first ``(`` and the champion the text
    up to the next ``)``, both trimmed. Champion names may contain spaces.

    Args:
        text: Text starting with the pair

    Returns:
        Tuple of (pair, remainder after the closing paren), or None when
        either name is missing or empty
    """
    open_idx = text.find("(")
    if open_idx == -1:
        return None
    close_idx = text.find(")", open_idx + 1)
    if close_idx == -1:
        return None

    player = text[:open_idx].strip()
    champion = text[open_idx + 1:close_idx].strip()
    if not player or not champion:
        return None
    return PlayerChampion(player, champion), text[close_idx + 1:]


def extract_chat_message(time: str, rest: str) -> Optional[ChatMessage]:
    """
    Recognise ``[Channel] player (champion): text`` or ``player (champion): text``.

    An unknown bracket tag fails extraction rather than falling back to the
    player channel.
    """
    channel = ChatChannel.PLAYER
    after_tag = rest
    if rest.startswith("["):
        close_idx = rest.find("]")
        if close_idx == -1:
            return None
        channel = ChatChannel.from_tag(rest[1:close_idx])
        if channel is None:
            return None
        after_tag = rest[close_idx + 1:]

    parsed = parse_player_with_champion(after_tag)
    if parsed is None:
        return None
    speaker, remainder = parsed

    remainder = remainder.lstrip()
    if not remainder.startswith(":"):
        return None

    return ChatMessage(
        time=time,
        channel=channel,
        player=speaker.player,
        champion=speaker.champion,
        text=remainder[1:].lstrip(),
    )


def _parse_bounty(text: str) -> Optional[int]:
    digits = ""
    for char in text.strip():
        if char not in string.digits:
            break
        digits += char
    return int(digits) if digits else None


def _extract_shutdown(time: str, rest: str) -> Optional[KillEvent]:
    killer_side, separator, victim_side = rest.partition(SHUTDOWN_MARKER)
    if not separator:
        return None

    killer = parse_player_with_champion(killer_side)
    if killer is None:
        return None

    victim_text, bang, bounty_text = victim_side.partition("!")
    if not bang:
        return None
    victim = parse_player_with_champion(victim_text)
    if victim is None:
        return None

    marker_idx = bounty_text.find(BOUNTY_MARKER)
    if marker_idx == -1:
        return None
    bounty = _parse_bounty(bounty_text[marker_idx + len(BOUNTY_MARKER):])

    return KillEvent(
        time=time,
        killer=killer[0].player,
        killer_champion=killer[0].champion,
        victim=victim[0].player,
        victim_champion=victim[0].champion,
        bounty=bounty,
        is_shutdown=True,
    )


def _extract_first_blood(time: str, rest: str) -> Optional[KillEvent]:
    if not rest.endswith(FIRST_BLOOD_SUFFIX):
        return None
    killer = parse_player_with_champion(rest[:-len(FIRST_BLOOD_SUFFIX)])
    if killer is None:
        return None
    return KillEvent(
        time=time,
        killer=killer[0].player,
        killer_champion=killer[0].champion,
        is_first_blood=True,
    )


def extract_kill_event(time: str, rest: str) -> Optional[KillEvent]:
    """
    Recognise a shutdown or a first-blood announcement.

    Shutdowns are tried first. A shutdown without the bounty marker is not a
    kill event; a marker without digits gives ``bounty=None``.
    """
    if SHUTDOWN_MARKER in rest:
        return _extract_shutdown(time, rest)
    return _extract_first_blood(time, rest)


def _team_of(text: str) -> Optional[str]:
    for team in TEAM_NAMES:
        if text.startswith(team):
            return team
    return None


def extract_objective_event(time: str, rest: str) -> Optional[ObjectiveEvent]:
    """
    Recognise team objectives, targeting, purchases and map pings.

    Team attribution is best effort: a ``has completed the`` line that does
    not start with a known team name still yields an event with no team.
    """
    description = rest.strip()
    if TEAM_FEAT_MARKER in rest:
        return ObjectiveEvent(time=time, team=_team_of(rest), description=description)
    if any(marker in rest for marker in TACTICAL_MARKERS):
        return ObjectiveEvent(time=time, description=description)
    return None


def parse_target_player(text: str) -> Optional[PlayerChampion]:
    """
    Parse the target of ``... has targeted <name> - (<champion>)``.

    Returns:
        The targeted player and champion, or None when the line is not a
        player-targeting line
    """
    marker_idx = text.find(TARGET_MARKER)
    if marker_idx == -1:
        return None
    target_text = text[marker_idx + len(TARGET_MARKER):]

    separator_idx = target_text.find(TARGET_SEPARATOR)
    if separator_idx == -1:
        return None
    champion_text = target_text[separator_idx + len(TARGET_SEPARATOR):]
    close_idx = champion_text.find(")")
    if close_idx == -1:
        return None

    target = target_text[:separator_idx].strip()
    champion = champion_text[:close_idx].strip()
    if not target or not champion:
        return None
    return PlayerChampion(target, champion)


def objective_participants(rest: str) -> List[PlayerChampion]:
    """Players named on an objective or ping line: the leading pair and the target."""
    participants = []
    leading = parse_player_with_champion(rest)
    if leading is not None:
        participants.append(leading[0])
    target = parse_target_player(rest)
    if target is not None:
        participants.append(target)
    return participants


def classify_line(time: str, rest: str) -> Classification:
    """
    Run the extractor cascade on the body of a timestamped line.

    Args:
        time: Clock string of the line
        rest: Line text after the timestamp

    Returns:
        A Classification describing the first extractor that matched
    """
    message = extract_chat_message(time, rest)
    if message is not None:
        return Classification(
            kind=KIND_CHAT,
            record=message,
            participants=(PlayerChampion(message.player, message.champion),),
        )

    kill = extract_kill_event(time, rest)
    if kill is not None:
        participants = [PlayerChampion(kill.killer, kill.killer_champion)]
        if kill.is_shutdown:
            participants.append(PlayerChampion(kill.victim, kill.victim_champion))
        return Classification(kind=KIND_KILL, record=kill, participants=tuple(participants))

    event = extract_objective_event(time, rest)
    if event is not None:
        return Classification(
            kind=KIND_OBJECTIVE,
            record=event,
            participants=tuple(objective_participants(rest)),
        )

    generic = parse_player_with_champion(rest)
    if generic is not None:
        actor, action = generic
        return Classification(kind=KIND_GENERIC, participants=(actor,), action=action.strip())

    return Classification(kind=KIND_UNRECOGNIZED)
