"""Protocols for exprcheck.

Defines the contract between the scanner and the finite-state machine that
describes a lexicon. Any object with these members can drive a Scanner;
``ArithmeticAutomaton`` is the one shipped implementation.
"""

from __future__ import annotations

from typing import Protocol


class Automaton(Protocol):
    """A deterministic finite-state machine over byte symbols.

    Attributes:
        states: Every state the machine can be in (never includes 0)
        alphabet: Valid symbol codes
        start_state: State each lexeme starts from
        final_states: States at which a complete lexeme may end

    Thread Safety:
        Implementations must be immutable after construction so a single
        instance can serve many scanners.

    """

    @property
    def states(self) -> frozenset[int]: ...

    @property
    def alphabet(self) -> range: ...

    @property
    def start_state(self) -> int: ...

    @property
    def final_states(self) -> frozenset[int]: ...

    def next(self, state: int, symbol: int) -> int:
        """Return the successor of ``state`` on ``symbol``.

        Returns ``ERROR_STATE`` for the end-of-stream sentinel and for any
        pair without a registered transition.
        """
        ...

    def value(self, state: int) -> int:
        """Return the token-kind tag of ``state``.

        Only meaningful for final states.
        """
        ...
