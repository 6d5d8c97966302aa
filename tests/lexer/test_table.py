"""Tests for the arithmetic transition table."""

import pytest

from exprcheck.lexer import ArithmeticAutomaton
from exprcheck.lexer.states import (
    DOT,
    EOF_SYMBOL,
    ERROR_STATE,
    FRACTION,
    IDENTIFIER,
    INTEGER,
    SKIP_VALUE,
    START,
    WHITESPACE,
)
from exprcheck.tokens import TokenType


@pytest.fixture
def automaton() -> ArithmeticAutomaton:
    return ArithmeticAutomaton()


def walk(automaton: ArithmeticAutomaton, text: str) -> int:
    """Feed ``text`` from the start state and return the state reached."""
    state = automaton.start_state
    for symbol in text.encode("ascii"):
        state = automaton.next(state, symbol)
        if state == ERROR_STATE:
            break
    return state


class TestDeclaredProperties:
    """Static properties of the automaton."""

    def test_start_state(self, automaton: ArithmeticAutomaton) -> None:
        assert automaton.start_state == START
        assert automaton.start_state in automaton.states

    def test_error_state_not_declared(self, automaton: ArithmeticAutomaton) -> None:
        assert ERROR_STATE not in automaton.states

    def test_final_states_subset(self, automaton: ArithmeticAutomaton) -> None:
        assert automaton.final_states <= automaton.states

    def test_start_and_dot_not_final(self, automaton: ArithmeticAutomaton) -> None:
        assert START not in automaton.final_states
        assert DOT not in automaton.final_states

    def test_alphabet_is_bytes(self, automaton: ArithmeticAutomaton) -> None:
        assert automaton.alphabet == range(0, 256)

    def test_every_transition_lands_in_declared_states(
        self, automaton: ArithmeticAutomaton
    ) -> None:
        """Total and deterministic: one successor, always known or ERROR."""
        for state in automaton.states:
            for symbol in automaton.alphabet:
                successor = automaton.next(state, symbol)
                assert successor == ERROR_STATE or successor in automaton.states


class TestTransitions:
    """Transition families of the lexicon."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("7", INTEGER),
            ("123", INTEGER),
            ("12.", DOT),
            ("12.5", FRACTION),
            ("0.125", FRACTION),
            ("x", IDENTIFIER),
            ("Rate", IDENTIFIER),
            (" ", WHITESPACE),
            ("\t\r\n ", WHITESPACE),
        ],
    )
    def test_walks(self, automaton: ArithmeticAutomaton, text: str, expected: int) -> None:
        assert walk(automaton, text) == expected

    @pytest.mark.parametrize("text", ["1.2.", ".5", "x1", "1x", "+-", "((", "&", "_"])
    def test_dead_ends(self, automaton: ArithmeticAutomaton, text: str) -> None:
        assert walk(automaton, text) == ERROR_STATE

    def test_identifiers_take_no_digits(self, automaton: ArithmeticAutomaton) -> None:
        assert automaton.next(IDENTIFIER, ord("1")) == ERROR_STATE

    def test_eof_always_errors(self, automaton: ArithmeticAutomaton) -> None:
        for state in automaton.states:
            assert automaton.next(state, EOF_SYMBOL) == ERROR_STATE

    @pytest.mark.parametrize("char", list("+-*/^()"))
    def test_punctuation_is_single_character(
        self, automaton: ArithmeticAutomaton, char: str
    ) -> None:
        state = automaton.next(START, ord(char))
        assert state in automaton.final_states
        for follow in "+-*/^()1a ":
            assert automaton.next(state, ord(follow)) == ERROR_STATE


class TestValues:
    """Token-kind tags of final states."""

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("42", TokenType.FLOAT),
            ("4.2", TokenType.FLOAT),
            ("abc", TokenType.VARIABLE),
            ("+", TokenType.PLUS),
            ("-", TokenType.MINUS),
            ("*", TokenType.TIMES),
            ("/", TokenType.DIVIDE),
            ("^", TokenType.POW),
            ("(", TokenType.LPAREN),
            (")", TokenType.RPAREN),
        ],
    )
    def test_final_state_kinds(
        self, automaton: ArithmeticAutomaton, text: str, kind: TokenType
    ) -> None:
        assert automaton.value(walk(automaton, text)) == kind

    def test_whitespace_is_skipped(self, automaton: ArithmeticAutomaton) -> None:
        assert automaton.value(WHITESPACE) == SKIP_VALUE

    def test_value_defined_for_every_state(self, automaton: ArithmeticAutomaton) -> None:
        for state in automaton.states:
            automaton.value(state)


class TestPreconditions:
    """Contract violations are programming errors."""

    def test_unknown_state(self, automaton: ArithmeticAutomaton) -> None:
        with pytest.raises(AssertionError):
            automaton.next(99, ord("1"))

    def test_symbol_outside_alphabet(self, automaton: ArithmeticAutomaton) -> None:
        with pytest.raises(AssertionError):
            automaton.next(START, 256)

    def test_value_of_error_state(self, automaton: ArithmeticAutomaton) -> None:
        with pytest.raises(AssertionError):
            automaton.value(ERROR_STATE)

    def test_shared_between_scanners(self, automaton: ArithmeticAutomaton) -> None:
        from exprcheck.lexer import Scanner

        first = Scanner.from_source("1+2", automaton=automaton)
        second = Scanner.from_source("a*b", automaton=automaton)
        assert [t.value for t in first.tokenize()] == ["1", "+", "2"]
        assert [t.value for t in second.tokenize()] == ["a", "*", "b"]
