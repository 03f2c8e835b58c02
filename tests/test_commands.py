"""
Tests for the command language.

Core claims:
    - parse() converts to 0-based and validates before anything runs
    - every rejection is an InputError, so a session can report and go on
    - execute() drives the solver and returns False only for quit
"""

import pytest

from runelock.commands import Command, execute, parse
from runelock.core.errors import (
    CommandError, InputError, SlotOutOfRange, UnknownNodeError, ValueOutOfRange,
)
from runelock.core.tree import ROOT
from runelock.puzzles.rune_lock import make_open_lock
from runelock.solver import FactualSolver


# ── parse ────────────────────────────────────────────────────────────────────

class TestParse:
    @pytest.mark.parametrize("text, expected", [
        ("assume 3 4",    Command("assume", (3, 3))),
        ("a 0 1",         Command("assume", (0, 0))),
        ("A 11 12",       Command("assume", (11, 11))),
        ("view 2",        Command("view", (2,))),
        ("explain F12",   Command("explain", (12,))),
        ("e 12 3",        Command("explain", (12, 3))),
        ("tp 5",          Command("tryslot", (5,))),
        ("tryposition 5", Command("tryslot", (5,))),
        ("ta 1",          Command("tryvalue", (0,))),
        ("tryactivation 12", Command("tryvalue", (11,))),
        ("b",             Command("back")),
        ("t",             Command("tree")),
        ("dump",          Command("dump")),
        ("?",             Command("help")),
        ("exit",          Command("quit")),
    ])
    def test_accepted(self, text, expected):
        assert parse(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "fly 1", "a 1", "b 1", "a x 1", "e 1 -1"])
    def test_command_errors(self, text):
        with pytest.raises(CommandError):
            parse(text)

    def test_slot_range(self):
        with pytest.raises(SlotOutOfRange):
            parse("a 12 1")

    @pytest.mark.parametrize("text", ["a 0 0", "a 0 13", "ta 0"])
    def test_value_range(self, text):
        with pytest.raises(ValueOutOfRange):
            parse(text)

    def test_every_rejection_is_input_error(self):
        for text in ("fly", "a 12 1", "a 0 13"):
            with pytest.raises(InputError):
                parse(text)


# ── execute ──────────────────────────────────────────────────────────────────

class TestExecute:
    def test_quit(self):
        assert execute(FactualSolver(make_open_lock()), parse("q")) is False

    def test_assume_reports_node(self, capsys):
        solver = FactualSolver(make_open_lock())
        assert execute(solver, parse("a 3 4"))
        assert "Node 1: [ ] Assume 3 = #4 -> alive" in capsys.readouterr().out

    def test_try_slot_lists_branches(self, capsys):
        solver = FactualSolver(make_open_lock())
        execute(solver, parse("tp 0"))
        out = capsys.readouterr().out
        assert "(12) [ ] Assume 0 = #12 -> alive" in out
        assert solver.current == ROOT

    def test_try_settled_line(self, capsys):
        solver = FactualSolver(make_open_lock())
        execute(solver, parse("a 0 1"))
        execute(solver, parse("ta 1"))
        assert "Nothing left to try for #1." in capsys.readouterr().out

    def test_explain(self, capsys):
        solver = FactualSolver(make_open_lock())
        execute(solver, parse("a 0 1"))
        execute(solver, parse("e F1 2"))
        out = capsys.readouterr().out
        assert "Explaining in node 1" in out
        assert "EXPLANATION of F1 (depth limit 2)" in out

    def test_view_and_back(self):
        solver = FactualSolver(make_open_lock())
        execute(solver, parse("a 0 1"))
        execute(solver, parse("b"))
        assert solver.current == ROOT
        execute(solver, parse("v 1"))
        assert solver.current == 1
        with pytest.raises(UnknownNodeError):
            execute(solver, parse("v 9"))

    def test_dump_and_tree(self, capsys):
        solver = FactualSolver(make_open_lock())
        execute(solver, parse("a 0 1"))
        execute(solver, parse("d"))
        execute(solver, parse("t"))
        out = capsys.readouterr().out
        assert "Knowledge (23 facts logged)" in out
        assert "Assumption tree:" in out
