#!/usr/bin/env python3
"""Tests for report aggregation and whole-log parsing."""

import json

from lol_chat_tools import parse_log
from lol_chat_tools.parser import (
    ChatChannel,
    KillEvent,
    ParsedLog,
    PlayerSummary,
    ReportBuilder,
    SystemLine,
    kill_ranking,
)


def test_parses_sample_log(sample_log):
    parsed = parse_log(sample_log)

    assert [p.name for p in parsed.players] == [
        "BorysBulba", "Golf4f", "TheMiozl", "kozakSyla", "piwkobb", "uskin432",
    ]

    assert len(parsed.kills) == 2
    assert parsed.kills[0].is_first_blood
    assert parsed.kills[1].is_shutdown

    assert [e.time for e in parsed.events] == ["00:42", "02:24", "13:10", "14:46", "15:40", "18:32"]
    assert parsed.events[1].team == "Enemy team"
    assert "Feat of Warfare" in parsed.events[1].description
    assert "Power Flower" in parsed.events[-1].description

    assert [m.channel for m in parsed.messages] == [ChatChannel.PARTY, ChatChannel.ALL, ChatChannel.TEAM]
    assert parsed.messages[0].player == "piwkobb"
    assert parsed.messages[0].champion == "Yone"
    assert parsed.messages[1].text == "hello this is all chat msg"
    assert parsed.messages[2].player == "kozakSyla"

    assert parsed.system == (SystemLine("Type /help for a list of commands"),)


def test_first_blood_scenario():
    parsed = parse_log("00:52 kozakSyla (Lux) has drawn first blood!")
    assert parsed.kills == (
        KillEvent(time="00:52", killer="kozakSyla", killer_champion="Lux", is_first_blood=True),
    )


def test_shutdown_scenario():
    parsed = parse_log("13:05 Golf4f (Mel) has shut down BorysBulba (Tahm Kench)! (Bonus Bounty: 149G)")
    assert parsed.kills == (
        KillEvent(
            time="13:05",
            killer="Golf4f",
            killer_champion="Mel",
            victim="BorysBulba",
            victim_champion="Tahm Kench",
            bounty=149,
            is_shutdown=True,
        ),
    )


def test_all_chat_scenario():
    parsed = parse_log("16:53 [All] piwkobb (Yone): hello this is all chat msg")
    message = parsed.messages[0]
    assert message.channel == ChatChannel.ALL
    assert message.player == "piwkobb"
    assert message.champion == "Yone"
    assert message.text == "hello this is all chat msg"


def test_system_line_scenario():
    parsed = parse_log("   Type /help for a list of commands  \n")
    assert parsed.system == (SystemLine("Type /help for a list of commands"),)
    assert parsed.players == ()


def test_empty_and_blank_input():
    assert parse_log("") == ParsedLog()
    assert parse_log("\n   \n\r\n") == ParsedLog()


def test_windows_line_endings():
    parsed = parse_log("00:52 kozakSyla (Lux) has drawn first blood!\r\n16:53 [All] piwkobb (Yone): hi\r\n")
    assert len(parsed.kills) == 1
    assert parsed.messages[0].text == "hi"


def test_champions_accumulate_sorted_and_deduplicated():
    parsed = parse_log(
        "01:00 kozakSyla (Zyra) is on the way\n"
        "02:00 kozakSyla (Lux): first game on Lux\n"
        "03:00 kozakSyla (Zyra) is missing\n"
        "04:00 kozakSyla (Ahri) did something weird\n"
    )
    assert parsed.players == (PlayerSummary("kozakSyla", ("Ahri", "Lux", "Zyra")),)


def test_generic_lines_only_register_players():
    parsed = parse_log("05:00 piwkobb (Yone) did something weird")
    assert parsed.players == (PlayerSummary("piwkobb", ("Yone",)),)
    assert parsed.kills == ()
    assert parsed.events == ()
    assert parsed.messages == ()
    assert parsed.system == ()


def test_unrecognized_timestamped_line_contributes_nothing():
    assert parse_log("05:00 the game is paused") == ParsedLog()


def test_collections_keep_line_order():
    parsed = parse_log(
        "banner one\n"
        "00:10 a (A): first\n"
        "00:20 b (B) is missing\n"
        "banner two\n"
        "00:30 c (C) has drawn first blood!\n"
        "00:40 d (D): second\n"
        "00:50 e (E) is in danger\n"
    )
    assert [m.text for m in parsed.messages] == ["first", "second"]
    assert [e.time for e in parsed.events] == ["00:20", "00:50"]
    assert [s.text for s in parsed.system] == ["banner one", "banner two"]


def test_roster_is_independent_of_line_order(sample_log):
    lines = [line for line in sample_log.split("\n") if line.strip()]
    forward = parse_log("\n".join(lines))
    backward = parse_log("\n".join(reversed(lines)))
    assert forward.players == backward.players


def test_roster_covers_every_player_bearing_field(sample_log):
    parsed = parse_log(sample_log)
    roster = {p.name: set(p.champions) for p in parsed.players}

    for kill in parsed.kills:
        assert kill.killer_champion in roster[kill.killer]
        if kill.is_shutdown:
            assert kill.victim_champion in roster[kill.victim]
    for message in parsed.messages:
        assert message.champion in roster[message.player]
    assert roster["TheMiozl"] == {"Renekton"}


def test_kills_have_exactly_one_kind(sample_log):
    for kill in parse_log(sample_log).kills:
        assert kill.is_shutdown != kill.is_first_blood


def test_report_builder_directly():
    builder = ReportBuilder()
    builder.add_player("b", "Two")
    builder.add_player("a", "One")
    builder.add_player("b", "Two")
    builder.add_line("Welcome")
    builder.add_line("")
    report = builder.build()
    assert [p.name for p in report.players] == ["a", "b"]
    assert report.player("b").champions == ("Two",)
    assert report.player("c") is None
    assert builder.line_count == 1


def test_kill_ranking():
    parsed = parse_log(
        "01:00 b (B) has drawn first blood!\n"
        "02:00 a (A) has shut down b (B)! (Bonus Bounty: 100G)\n"
        "03:00 c (C) has shut down a (A)! (Bonus Bounty: 300G)\n"
        "04:00 c (C) has shut down b (B)! (Bonus Bounty: 150G)\n"
    )
    assert kill_ranking(parsed) == [("c", 2), ("a", 1), ("b", 1)]


def test_report_json_shape(sample_log):
    data = parse_log(sample_log).to_dict()

    assert set(data) == {"players", "kills", "events", "messages", "system"}
    assert data["players"][0] == {"name": "BorysBulba", "champions": ["Tahm Kench"]}
    assert data["kills"][0] == {
        "time": "00:52",
        "killer": "kozakSyla",
        "killer_champion": "Lux",
        "victim": None,
        "victim_champion": None,
        "bounty": None,
        "is_shutdown": False,
        "is_first_blood": True,
    }
    assert data["events"][0] == {"time": "00:42", "team": None, "description": "uskin432 (Warwick) is on the way"}
    assert [m["channel"] for m in data["messages"]] == ["party", "all", "team"]
    assert data["system"] == [{"text": "Type /help for a list of commands"}]

    # Round-trips through the json module unchanged
    assert json.loads(json.dumps(data)) == data
