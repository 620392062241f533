"""Tests for the turn block reader and the command writer."""

import pytest

from greencircle.constants import CardType
from greencircle.errors import ProtocolError
from greencircle.io.protocol import (
    format_action,
    parse_cards,
    parse_player,
    parse_release_move,
    read_turn,
)
from greencircle.model.application import Application

RELEASE_TURN = """\
RELEASE
2
APP 0 3 0 0 0 0 0 0 0
APP 7 0 2 2 0 0 0 0 0
0 1 0 2
4 0 1 0
4
HAND 1 0 0 0 0 0 0 0 1 0
DISCARD 0 0 1 0 0 0 0 0 0 0
OPPONENT_CARDS 0 0 0 0 0 0 0 0 0 0
DRAW 0 0 0 0 3
3
RANDOM
WAIT
RELEASE 0
"""


def _lines(text):
    return iter(text.splitlines(keepends=True))


# ── Full turn ────────────────────────────────────────────────────────

class TestReadTurn:
    def test_reads_all_sections(self):
        state = read_turn(_lines(RELEASE_TURN))
        assert state.phase == "RELEASE"
        assert list(state.applications) == [0, 7]
        assert state.applications[7].resources == (0, 2, 2, 0, 0, 0, 0, 0)

        assert state.me.location == 0
        assert state.me.score == 1
        assert state.me.permanent_architecture_study == 2
        assert state.opponent.location == 4
        assert state.opponent.permanent_daily_routine == 1

        assert state.me.hand[CardType.TRAINING] == 1
        assert state.me.hand.bonus == 1
        assert state.me.discard[CardType.DAILY_ROUTINE] == 1
        assert state.me.draw[CardType.ARCHITECTURE_STUDY] == 3
        assert state.me.automated.counts == (0,) * 10

        assert state.moves == ["RANDOM", "WAIT", "RELEASE 0"]

    def test_release_moves_become_candidates(self):
        state = read_turn(_lines(RELEASE_TURN))
        assert len(state.release_candidates) == 1
        c = state.release_candidates[0]
        assert c.app.id == 0
        # 3 - 2*1 = 1, one bonus cancels it
        assert c.technical_debt_cost == 0
        assert c.missing_resources[0] == 2

    def test_clean_end_of_input(self):
        assert read_turn(_lines("")) is None

    def test_trailing_blank_lines_end_input(self):
        lines = _lines(RELEASE_TURN + "\n  \n")
        assert read_turn(lines).phase == "RELEASE"
        assert read_turn(lines) is None

    def test_blank_line_between_turns(self):
        lines = _lines(RELEASE_TURN + "\n" + RELEASE_TURN)
        assert read_turn(lines).phase == "RELEASE"
        assert read_turn(lines).phase == "RELEASE"

    def test_consecutive_turns(self):
        lines = _lines(RELEASE_TURN + RELEASE_TURN.replace("RELEASE\n", "MOVE\n", 1))
        assert read_turn(lines).phase == "RELEASE"
        assert read_turn(lines).phase == "MOVE"
        assert read_turn(lines) is None

    def test_truncated_turn(self):
        text = "\n".join(RELEASE_TURN.splitlines()[:5]) + "\n"
        with pytest.raises(ProtocolError, match="input ended"):
            read_turn(_lines(text))

    def test_bad_count(self):
        with pytest.raises(ProtocolError):
            read_turn(_lines("MOVE\ntwo\n"))

    def test_release_of_unknown_application(self):
        text = RELEASE_TURN.replace("RELEASE 0\n", "RELEASE 99\n")
        with pytest.raises(ProtocolError, match="unknown application"):
            read_turn(_lines(text))


# ── Sections ─────────────────────────────────────────────────────────

class TestApplicationLine:
    def test_parses(self):
        app = Application.from_line("APP 5 1 2 3 4 5 6 7 8")
        assert app.id == 5
        assert app.resources == (1, 2, 3, 4, 5, 6, 7, 8)

    @pytest.mark.parametrize("line", [
        "APP 5 1 2 3",
        "APP 5 1 2 3 4 5 6 7 8 9",
        "APP x 1 2 3 4 5 6 7 8",
        "APP 5 1 2 3 4 5 6 7 z",
        "PPA 5 1 2 3 4 5 6 7 8",
    ])
    def test_malformed(self, line):
        with pytest.raises(ProtocolError):
            Application.from_line(line)

    def test_describe(self):
        app = Application.from_line("APP 3 2 0 0 0 0 0 0 1")
        text = app.describe()
        assert text.startswith("(3) 2 TRAIN, 0 CODIN")
        assert text.endswith("1 REFAC")


class TestPlayerLine:
    def test_parses_negative_location(self):
        p = parse_player("-1 0 0 0")
        assert p.location == -1

    @pytest.mark.parametrize("line", ["1 2 3", "1 2 3 4 5", "1 a 3 4"])
    def test_malformed(self, line):
        with pytest.raises(ProtocolError):
            parse_player(line)


class TestCardsLine:
    def test_short_line_padded_with_zeros(self):
        location, hand = parse_cards("HAND 1 2")
        assert location == "HAND"
        assert hand.counts == (1, 2, 0, 0, 0, 0, 0, 0, 0, 0)

    def test_too_many_counts(self):
        with pytest.raises(ProtocolError):
            parse_cards("HAND " + " ".join(["1"] * 11))

    def test_non_numeric(self):
        with pytest.raises(ProtocolError):
            parse_cards("DRAW 1 two")

    def test_negative_count(self):
        with pytest.raises(ProtocolError, match="negative card count"):
            parse_cards("HAND 1 -2 0")


class TestReleaseMove:
    def test_other_moves_ignored(self):
        assert parse_release_move("MOVE 3", {}) is None
        assert parse_release_move("WAIT", {}) is None

    def test_release_id(self):
        apps = {4: Application.of(4, [0] * 8)}
        assert parse_release_move("RELEASE 4", apps) == 4

    def test_release_without_id(self):
        with pytest.raises(ProtocolError):
            parse_release_move("RELEASE", {})


# ── Output ───────────────────────────────────────────────────────────

class TestFormatAction:
    @pytest.mark.parametrize("action,expected", [
        (("move", (CardType.CODE_REVIEW,)), "MOVE 6"),
        (("give", (CardType.BONUS,)), "GIVE 8"),
        (("release", (17,)), "RELEASE 17"),
        (("play", (CardType.ARCHITECTURE_STUDY,)), "ARCHITECTURE_STUDY"),
        (("play", (CardType.REFACTORING,)), "REFACTORING"),
        (("wait", None), "WAIT"),
        (("random", None), "RANDOM"),
    ])
    def test_commands(self, action, expected):
        assert format_action(action) == expected

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            format_action(("teleport", None))
