"""
Line grammar for League of Legends chat logs.

A log line is ``<time> <body>``: a colon-separated clock string, one space
and the remainder of the line. ``LINE`` is what the parser uses to split a
line. The remaining rules describe the shapes a body can take (chat,
kills, objectives, pings, generic player actions). The extractors in
``extractors.py`` recognise the same shapes procedurally; these rules are
kept as the reference description and are checked against the extractors
by the test-suite.

Usage:
    from lol_chat_tools.parser.grammar import parse_rule, classify_body

    parse_rule('player_with_champion', 'BorysBulba (Tahm Kench)')
    classify_body('[All] piwkobb (Yone): hello')   # -> 'chat_message'
"""

import re
from typing import Dict, List, Tuple

from pyparsing import (
    Group,
    Keyword,
    Literal,
    MatchFirst,
    OneOrMore,
    Opt,
    ParseException,
    ParserElement,
    ParseResults,
    Regex,
    StringEnd,
    Suppress,
    White,
    one_of,
    original_text_for,
)

__all__ = ['LINE', 'RULES', 'BODY_ALTERNATIVES', 'parse_rule', 'matches_rule', 'classify_body']


def _full(*alternatives: ParserElement) -> ParserElement:
    # Each alternative must consume the whole input, so a partial match
    # falls through to the next one instead of failing the whole rule.
    return MatchFirst([alt + StringEnd() for alt in alternatives])


# Clock and line
time = Regex(r"[0-9]+(?::[0-9]+)+").set_name("time")
body = Regex(r".*", flags=re.DOTALL).leave_whitespace().set_name("body")
LINE = (time("time") + White(" ", exact=1).leave_whitespace().suppress() + body("body")).parse_with_tabs()

# Names
word = Regex(r"[\w'.&\-]+").set_name("word")
_name_token = Regex(r"(?!-\s)[^\s()\[\]:]+")
player_name = original_text_for(OneOrMore(_name_token)).set_name("player_name")
champion_name = original_text_for(OneOrMore(word)).set_name("champion_name")
name_phrase = original_text_for(OneOrMore(word)).set_name("name_phrase")
player_with_champion = Group(
    player_name("player") + Suppress("(") + champion_name("champion") + Suppress(")")
).set_name("player_with_champion")

# Numbers
number = Regex(r"\d+").set_name("number")
percentage = Regex(r"\d+").set_name("percentage")

# Chat
channel_tag = one_of(["[All]", "[Team]", "[Party]"]).set_name("channel_tag")
chat_text = Regex(r".*").set_name("chat_text")
channel_chat_message = (
    channel_tag("channel") + player_with_champion("speaker") + Suppress(":") + chat_text("text")
)
bare_chat_message = player_with_champion("speaker") + Suppress(":") + chat_text("text")
chat_message = _full(channel_chat_message, bare_chat_message)

# Kills
shutdown_bounty = (
    Suppress("(") + Suppress(Literal("Bonus Bounty:")) + number("bounty") + Suppress("G") + Suppress(")")
)
kill_shutdown_event = (
    player_with_champion("killer")
    + Suppress(Literal("has shut down"))
    + player_with_champion("victim")
    + Suppress("!")
    + Opt(shutdown_bounty)
)
kill_first_blood_event = player_with_champion("killer") + Suppress(Literal("has drawn first blood!"))
kill_event = _full(kill_shutdown_event, kill_first_blood_event)

# Objectives and pings
team_name = one_of(["Enemy team", "Ally team", "Blue team", "Red team"]).set_name("team_name")
team_feat_event = (
    team_name("team") + Suppress(Literal("has completed the")) + name_phrase("feat") + Suppress("!")
)
purchase_event = player_with_champion("player") + Suppress(Keyword("purchased")) + name_phrase("item")
target_player_event = (
    player_with_champion("player")
    + Suppress(Literal("has targeted"))
    + player_name("target")
    + Suppress(Literal("- ("))
    + champion_name("target_champion")
    + Suppress(")")
)
target_objective_event = (
    player_with_champion("player")
    + Suppress(Literal("has targeted"))
    + Opt(Suppress(Keyword("the")))
    + name_phrase("objective")
    + Suppress("(")
    + percentage("percentage")
    + Suppress("%")
    + Suppress(")")
)
rampage_event = player_with_champion("player") + Suppress(Literal("is on rampage!"))
ping_on_the_way_event = player_with_champion("player") + Suppress(Literal("is on the way"))
ping_phrase = one_of(["is on the way", "is missing", "is retreating", "is in danger", "needs vision"])
ping_event = player_with_champion("player") + ping_phrase("ping")
objective_event = _full(
    team_feat_event,
    target_player_event,
    target_objective_event,
    purchase_event,
    rampage_event,
    ping_event,
)

# Fallbacks
generic_tail = Regex(r".+").set_name("generic_tail")
generic_player_event = player_with_champion("player") + generic_tail("action")
generic_text = Regex(r".+").set_name("generic_text")

# Order matters: the first alternative that matches the whole body wins.
BODY_ALTERNATIVES: List[Tuple[str, ParserElement]] = [
    ('chat_message', chat_message),
    ('kill_event', kill_event),
    ('objective_event', objective_event),
    ('generic_player_event', generic_player_event),
    ('generic_text', generic_text),
]
line_body = _full(*(element for _, element in BODY_ALTERNATIVES))

RULES: Dict[str, ParserElement] = {
    'time': time,
    'line': LINE,
    'line_body': line_body,
    'word': word,
    'player_name': player_name,
    'champion_name': champion_name,
    'name_phrase': name_phrase,
    'player_with_champion': player_with_champion,
    'number': number,
    'percentage': percentage,
    'channel_tag': channel_tag,
    'chat_text': chat_text,
    'channel_chat_message': channel_chat_message,
    'bare_chat_message': bare_chat_message,
    'chat_message': chat_message,
    'shutdown_bounty': shutdown_bounty,
    'kill_shutdown_event': kill_shutdown_event,
    'kill_first_blood_event': kill_first_blood_event,
    'kill_event': kill_event,
    'team_name': team_name,
    'team_feat_event': team_feat_event,
    'purchase_event': purchase_event,
    'target_player_event': target_player_event,
    'target_objective_event': target_objective_event,
    'rampage_event': rampage_event,
    'ping_on_the_way_event': ping_on_the_way_event,
    'ping_event': ping_event,
    'objective_event': objective_event,
    'generic_tail': generic_tail,
    'generic_player_event': generic_player_event,
    'generic_text': generic_text,
}


def parse_rule(rule_name: str, text: str) -> ParseResults:
    """
    Parse text against a single named rule.

    Args:
        rule_name: Key into RULES
        text: Text that must match the rule in full

    Returns:
        The pyparsing results for the match

    Raises:
        KeyError: If the rule name is unknown
        ParseException: If the text does not match the rule
    """
    return RULES[rule_name].parse_string(text, parse_all=True)


def matches_rule(rule_name: str, text: str) -> bool:
    """Return True when text matches the named rule in full."""
    try:
        parse_rule(rule_name, text)
    except ParseException:
        return False
    return True


def classify_body(body_text: str) -> str:
    """
    Name the first line-body alternative that matches the whole body.

    Args:
        body_text: Line text after the timestamp

    Returns:
        One of the names in BODY_ALTERNATIVES

    Raises:
        ParseException: If the body is empty
    """
    for name, _ in BODY_ALTERNATIVES:
        if matches_rule(name, body_text):
            return name
    raise ParseException(body_text, 0, "empty line body")
