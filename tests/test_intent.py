"""Tests for command parsing."""

from __future__ import annotations

import pytest

from scriptoria.engine import Action, VERB_ALIASES, parse_command, strip_particle


class TestParseCommand:
    """Tests for parse_command."""

    @pytest.mark.parametrize(
        ("verb", "action"),
        [
            ("look", Action.LOOK),
            ("examine", Action.LOOK),
            ("search", Action.SEARCH),
            ("move", Action.MOVE),
            ("go", Action.MOVE),
            ("travel", Action.MOVE),
            ("pick", Action.PICK_UP),
            ("take", Action.PICK_UP),
            ("get", Action.PICK_UP),
            ("attack", Action.ATTACK),
            ("fight", Action.ATTACK),
            ("talk", Action.TALK),
            ("speak", Action.TALK),
            ("inventory", Action.INVENTORY),
            ("inv", Action.INVENTORY),
            ("status", Action.STATUS),
            ("health", Action.STATUS),
            ("help", Action.HELP),
            ("locations", Action.LOCATIONS),
        ],
    )
    def test_verb_aliases(self, verb, action):
        assert parse_command(verb).action == action
        assert VERB_ALIASES[verb] == action

    def test_lowercases_and_trims(self):
        parsed = parse_command("  GO Ancient RUINS  ")
        assert parsed.action == Action.MOVE
        assert parsed.verb == "go"
        assert parsed.argument == "ancient ruins"
        assert parsed.original_input == "  GO Ancient RUINS  "

    def test_argument_rejoined_with_single_spaces(self):
        assert parse_command("attack goblin warrior").argument == "goblin warrior"

    def test_no_argument(self):
        assert parse_command("look").argument == ""

    def test_unknown_verb(self):
        parsed = parse_command("dance wildly")
        assert parsed.action == Action.UNKNOWN
        assert parsed.verb == "dance"
        assert parsed.argument == "wildly"

    def test_empty_input_is_unknown(self):
        assert parse_command("").action == Action.UNKNOWN

    def test_pick_up_drops_particle(self):
        assert parse_command("pick up health potion").argument == "health potion"
        assert parse_command("pick up").argument == ""

    def test_go_to_drops_particle(self):
        assert parse_command("go to the ruins").argument == "the ruins"

    def test_talk_to_and_with(self):
        assert parse_command("talk to hermit").argument == "hermit"
        assert parse_command("speak with hermit").argument == "hermit"

    def test_particle_only_stripped_as_whole_word(self):
        assert parse_command("take upper key").argument == "upper key"

    def test_attack_keeps_argument(self):
        assert parse_command("attack to").argument == "to"


class TestStripParticle:
    """Tests for strip_particle."""

    def test_unlisted_action_untouched(self):
        assert strip_particle(Action.SEARCH, "up high") == "up high"

    def test_only_first_particle_removed(self):
        assert strip_particle(Action.PICK_UP, "up up") == "up"
