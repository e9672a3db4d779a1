#!/usr/bin/env python3
"""Tests for the line extractors and the classification cascade."""

import pytest

from lol_chat_tools import parse_log
from lol_chat_tools.parser import ChatChannel, PlayerChampion
from lol_chat_tools.parser.extractors import (
    KIND_CHAT,
    KIND_GENERIC,
    KIND_KILL,
    KIND_OBJECTIVE,
    KIND_UNRECOGNIZED,
    classify_line,
    extract_chat_message,
    extract_kill_event,
    extract_objective_event,
    objective_participants,
    parse_player_with_champion,
    parse_target_player,
)


# Player/champion pairs

def test_pair_returns_untrimmed_remainder():
    pair, remainder = parse_player_with_champion("BorysBulba (Tahm Kench)! (Bonus Bounty: 149G)")
    assert pair == PlayerChampion("BorysBulba", "Tahm Kench")
    assert remainder == "! (Bonus Bounty: 149G)"


def test_pair_trims_names():
    pair, remainder = parse_player_with_champion("  kozakSyla  (  Lux ) rest")
    assert pair == PlayerChampion("kozakSyla", "Lux")
    assert remainder == " rest"


@pytest.mark.parametrize("text", [
    "no parens here",
    "(Lux) missing player",
    "kozakSyla () missing champion",
    "kozakSyla (   ) blank champion",
    "kozakSyla (Lux",
    "kozakSyla )Lux(",
])
def test_pair_rejects_incomplete_text(text):
    assert parse_player_with_champion(text) is None


@pytest.mark.parametrize("pair", [
    PlayerChampion("BorysBulba", "Tahm Kench"),
    PlayerChampion("kozakSyla", "Lux"),
    PlayerChampion("Riot Phreak", "Cho'Gath"),
    PlayerChampion("uskin432", "Nunu & Willump"),
])
def test_pair_reparses_its_own_format(pair):
    parsed, remainder = parse_player_with_champion(str(pair))
    assert parsed == pair
    assert remainder == ""


# Chat messages

@pytest.mark.parametrize("rest, channel", [
    ("[All] piwkobb (Yone): hello", ChatChannel.ALL),
    ("[Team] piwkobb (Yone): hello", ChatChannel.TEAM),
    ("[Party] piwkobb (Yone): hello", ChatChannel.PARTY),
    ("piwkobb (Yone): hello", ChatChannel.PLAYER),
])
def test_chat_channels(rest, channel):
    message = extract_chat_message("16:53", rest)
    assert message.channel == channel
    assert message.player == "piwkobb"
    assert message.champion == "Yone"
    assert message.text == "hello"
    assert message.time == "16:53"


@pytest.mark.parametrize("rest", [
    "[Global] piwkobb (Yone): hello",
    "[all] piwkobb (Yone): hello",
    "[All piwkobb (Yone): hello",
    "[All] no pair here: hello",
    "[Team] kozakSyla (Lux) has drawn first blood!",
    "kozakSyla (Lux) is on rampage!",
])
def test_chat_rejects_malformed_lines(rest):
    assert extract_chat_message("00:00", rest) is None


def test_chat_text_may_be_empty():
    assert extract_chat_message("01:00", "kozakSyla (Lux):").text == ""


def test_chat_text_keeps_inner_colons_and_parens():
    message = extract_chat_message("01:00", "[All] kozakSyla (Lux):   gg: ez (jk)")
    assert message.text == "gg: ez (jk)"


# Kills

def test_shutdown_with_bounty():
    kill = extract_kill_event(
        "13:05", "Golf4f (Mel) has shut down BorysBulba (Tahm Kench)! (Bonus Bounty: 149G)"
    )
    assert kill.killer == "Golf4f"
    assert kill.killer_champion == "Mel"
    assert kill.victim == "BorysBulba"
    assert kill.victim_champion == "Tahm Kench"
    assert kill.bounty == 149
    assert kill.is_shutdown and not kill.is_first_blood


def test_shutdown_without_bounty_digits():
    kill = extract_kill_event("13:05", "Golf4f (Mel) has shut down BorysBulba (Tahm Kench)! (Bonus Bounty: G)")
    assert kill.is_shutdown
    assert kill.bounty is None


@pytest.mark.parametrize("rest", [
    "Golf4f (Mel) has shut down BorysBulba (Tahm Kench)!",
    "Golf4f (Mel) has shut down BorysBulba (Tahm Kench) (Bonus Bounty: 149G)",
    "Somebody has shut down BorysBulba (Tahm Kench)! (Bonus Bounty: 149G)",
    "Golf4f (Mel) has shut down somebody! (Bonus Bounty: 149G)",
])
def test_incomplete_shutdown_is_not_a_kill(rest):
    assert extract_kill_event("13:05", rest) is None


def test_first_blood():
    kill = extract_kill_event("00:52", "kozakSyla (Lux) has drawn first blood!")
    assert kill.killer == "kozakSyla"
    assert kill.killer_champion == "Lux"
    assert kill.is_first_blood and not kill.is_shutdown
    assert kill.victim is None
    assert kill.victim_champion is None
    assert kill.bounty is None


def test_first_blood_needs_a_killer_pair():
    assert extract_kill_event("00:52", "Somebody has drawn first blood!") is None


# Objectives and pings

@pytest.mark.parametrize("team", ["Enemy team", "Ally team", "Blue team", "Red team"])
def test_team_feats(team):
    event = extract_objective_event("02:24", f"{team} has completed the Feat of Warfare!")
    assert event.team == team
    assert event.description == f"{team} has completed the Feat of Warfare!"


def test_team_feat_without_known_team():
    event = extract_objective_event("02:24", "Purple team has completed the Feat of Warfare!")
    assert event is not None
    assert event.team is None


@pytest.mark.parametrize("rest", [
    "piwkobb (Yone) has targeted TheMiozl - (Renekton)",
    "kozakSyla (Lux) has targeted the Power Flower (33%)",
    "BorysBulba (Tahm Kench) purchased Control Ward",
    "kozakSyla (Lux) is on rampage!",
    "uskin432 (Warwick) is on the way",
    "uskin432 (Warwick) is missing",
    "uskin432 (Warwick) is retreating",
    "uskin432 (Warwick) is in danger",
    "uskin432 (Warwick) needs vision",
])
def test_tactical_markers(rest):
    event = extract_objective_event("10:00", rest)
    assert event.team is None
    assert event.description == rest


def test_unknown_action_is_not_an_objective():
    assert extract_objective_event("10:00", "kozakSyla (Lux) waved hello") is None


def test_target_player():
    assert parse_target_player("piwkobb (Yone) has targeted TheMiozl - (Renekton)") == \
        PlayerChampion("TheMiozl", "Renekton")


@pytest.mark.parametrize("rest", [
    "kozakSyla (Lux) has targeted the Power Flower (33%)",
    "piwkobb (Yone) has targeted TheMiozl - (Renekton",
    "piwkobb (Yone) has targeted  - (Renekton)",
    "piwkobb (Yone) purchased Control Ward",
])
def test_target_player_rejects_other_shapes(rest):
    assert parse_target_player(rest) is None


def test_objective_participants_for_targeting():
    assert objective_participants("piwkobb (Yone) has targeted TheMiozl - (Renekton)") == [
        PlayerChampion("piwkobb", "Yone"),
        PlayerChampion("TheMiozl", "Renekton"),
    ]


def test_objective_participants_on_team_feats():
    assert objective_participants("Enemy team has completed the Feat of Warfare!") == []
    assert objective_participants("Blue team (Baron) has completed the Feat of Warfare!") == [
        PlayerChampion("Blue team", "Baron"),
    ]


def test_team_feat_with_leading_pair_registers_it():
    parsed = parse_log("01:00 Blue team (Baron) has completed the Feat of Warfare!")
    assert parsed.events[0].team == "Blue team"
    assert [(p.name, p.champions) for p in parsed.players] == [("Blue team", ("Baron",))]


# Cascade

def test_chat_wins_over_kill_text():
    result = classify_line("01:00", "[All] kozakSyla (Lux): has drawn first blood!")
    assert result.kind == KIND_CHAT


def test_kill_wins_over_objective_text():
    result = classify_line(
        "13:05", "Golf4f (Mel) has shut down BorysBulba (Tahm Kench)! (Bonus Bounty: 149G)"
    )
    assert result.kind == KIND_KILL
    assert result.participants == (
        PlayerChampion("Golf4f", "Mel"),
        PlayerChampion("BorysBulba", "Tahm Kench"),
    )


def test_unknown_bracket_tag_falls_through():
    result = classify_line("01:00", "[Global] kozakSyla (Lux) is on rampage!")
    assert result.kind == KIND_OBJECTIVE


def test_generic_line_keeps_only_the_pair():
    result = classify_line("03:00", "piwkobb (Yone) did something weird")
    assert result.kind == KIND_GENERIC
    assert result.record is None
    assert result.participants == (PlayerChampion("piwkobb", "Yone"),)
    assert result.action == "did something weird"


def test_unrecognized_line():
    result = classify_line("03:00", "the game is paused")
    assert result.kind == KIND_UNRECOGNIZED
    assert result.participants == ()
