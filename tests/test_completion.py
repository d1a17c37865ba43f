"""Tests for command-name and argument tab completion."""

import pytest

from termcore.commands import CommandDefinition, CommandRegistry
from termcore.interface.completion import CompletionEngine, CompletionState


def _fixed(*words):
    def complete(partial, preceding, context, position):
        return list(words)
    return complete


@pytest.fixture
def registry():
    reg = CommandRegistry()
    for name in ("help", "hello", "about", "exit"):
        reg.register(CommandDefinition(name=name))
    return reg


@pytest.fixture
def engine(registry):
    return CompletionEngine(registry, context="ctx")


class TestCompletionState:
    def test_empty_is_inactive(self):
        assert not CompletionState.empty().active

    def test_advanced_wraps(self):
        state = CompletionState(candidates=("a", "b"), index=1, key="k", original_input="x")
        nxt = state.advanced()
        assert nxt.index == 0
        assert nxt.current == "a"
        # original is untouched
        assert state.index == 1


class TestCommandNameCompletion:
    def test_cycles_through_matches_in_registry_order(self, engine):
        assert engine.complete("he") == "help"
        assert engine.complete("help") == "hello"
        assert engine.complete("hello") == "help"

    def test_single_match_completes_and_ends_cycle(self, engine):
        assert engine.complete("ab") == "about"
        assert not engine.active

    def test_case_insensitive_prefix(self, engine):
        assert engine.complete("EX") == "exit"

    def test_no_match_is_noop(self, engine):
        assert engine.complete("zz") is None
        assert not engine.active

    def test_empty_input_is_noop(self, engine):
        assert engine.complete("") is None

    def test_cycle_keeps_original_input(self, engine):
        engine.complete("he")
        assert engine.state.original_input == "he"
        engine.complete("help")
        assert engine.state.original_input == "he"
        assert engine.state.candidates == ("help", "hello")

    def test_reset_starts_fresh(self, engine):
        engine.complete("he")
        engine.complete("help")
        engine.reset()
        assert engine.complete("he") == "help"

    def test_new_partial_starts_new_cycle(self, engine, registry):
        registry.register(CommandDefinition(name="helm"))
        engine.complete("he")
        engine.reset()
        assert engine.complete("hel") == "help"
        assert engine.state.key == ("command", "hel")
        assert engine.state.index == 0


class TestArgumentCompletion:
    def test_handler_receives_context(self, registry, engine):
        calls = []

        def complete(partial, preceding, context, position):
            calls.append((partial, preceding, context, position))
            return []

        registry.register(CommandDefinition(name="deploy", tab_complete=complete))
        assert engine.complete("deploy prod eu-west ap") is None
        assert calls == [("ap", ["prod", "eu-west"], "ctx", 3)]

    def test_trailing_space_completes_next_argument(self, registry, engine):
        calls = []

        def complete(partial, preceding, context, position):
            calls.append((partial, preceding, position))
            return ["one"]

        registry.register(CommandDefinition(name="pick", tab_complete=complete))
        assert engine.complete("pick ") == "pick one"
        assert calls == [("", [], 1)]

    def test_single_candidate_replaces_last_token(self, registry, engine):
        registry.register(CommandDefinition(name="open", tab_complete=_fixed("readme.md")))
        assert engine.complete("open docs rea") == "open docs readme.md"
        assert not engine.active

    def test_multiple_candidates_cycle_then_repeat(self, registry, engine):
        registry.register(CommandDefinition(name="pick", tab_complete=_fixed("a", "b", "c")))
        seen = [engine.complete("pick x")]
        for _ in range(3):
            seen.append(engine.complete(seen[-1]))
        assert seen == ["pick a", "pick b", "pick c", "pick a"]

    def test_changed_partial_resets_cycle(self, registry, engine):
        registry.register(CommandDefinition(name="pick", tab_complete=_fixed("a", "b", "c")))
        engine.complete("pick x")
        engine.complete("pick a")
        assert engine.state.index == 1
        engine.reset()
        assert engine.complete("pick y") == "pick a"
        assert engine.state.key == ("argument", "pick", 1, "y")
        assert engine.state.index == 0

    def test_command_name_is_case_insensitive(self, registry, engine):
        registry.register(CommandDefinition(name="pick", tab_complete=_fixed("only")))
        assert engine.complete("PICK o") == "PICK only"

    def test_unknown_command_is_noop(self, engine):
        assert engine.complete("nothing here") is None

    def test_command_without_completer_is_noop(self, engine):
        assert engine.complete("help ab") is None

    @pytest.mark.parametrize("result", [None, [], ()])
    def test_empty_result_is_noop(self, registry, engine, result):
        registry.register(CommandDefinition(
            name="pick", tab_complete=lambda *a: result))
        assert engine.complete("pick x") is None

    def test_generator_result_accepted(self, registry, engine):
        registry.register(CommandDefinition(
            name="pick", tab_complete=lambda *a: (w for w in ("aa", "ab"))))
        assert engine.complete("pick a") == "pick aa"
        assert engine.complete("pick aa") == "pick ab"

    def test_handler_error_is_contained(self, registry, engine):
        def broken(partial, preceding, context, position):
            raise RuntimeError("completer exploded")

        registry.register(CommandDefinition(name="pick", tab_complete=broken))
        assert engine.complete("pick x") is None
        assert not engine.active

    def test_handler_error_keeps_active_cycle(self, registry, engine):
        state = {"fail": False}

        def flaky(partial, preceding, context, position):
            if state["fail"]:
                raise RuntimeError("later failure")
            return ["a", "b"]

        registry.register(CommandDefinition(name="pick", tab_complete=flaky))
        engine.complete("pick x")
        before = engine.state
        state["fail"] = True
        assert engine.complete("pick a") is None
        assert engine.state == before
