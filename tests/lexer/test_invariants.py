"""Property-based tests for scanner invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from exprcheck.lexer import Scanner
from exprcheck.tokens import TokenType

numbers = st.from_regex(r"[0-9]+(\.[0-9]+)?", fullmatch=True)
identifiers = st.from_regex(r"[A-Za-z]+", fullmatch=True)
operators = st.sampled_from(list("+-*/^()"))
lexemes = st.one_of(numbers, identifiers, operators)
gaps = st.text(alphabet=" \t\r\n", min_size=1, max_size=4)
margins = st.text(alphabet=" \t\r\n", max_size=4)


@st.composite
def spaced_sources(draw: st.DrawFn) -> tuple[str, list[str]]:
    """Lexemes joined by non-empty whitespace runs, with optional margins."""
    words = draw(st.lists(lexemes, max_size=20))
    parts = [draw(margins)]
    for i, word in enumerate(words):
        if i:
            parts.append(draw(gaps))
        parts.append(word)
    parts.append(draw(margins))
    return "".join(parts), words


class TestSingleLexemeInputs:
    """Inputs that form exactly one lexeme."""

    @given(numbers)
    @settings(max_examples=200)
    def test_number_is_one_float(self, source: str) -> None:
        tokens = list(Scanner.from_source(source).tokenize())
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.FLOAT
        assert tokens[0].value == source

    @given(identifiers)
    @settings(max_examples=200)
    def test_letters_are_one_variable(self, source: str) -> None:
        tokens = list(Scanner.from_source(source).tokenize())
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.VARIABLE
        assert tokens[0].value == source

    @given(numbers, margins, margins)
    def test_surrounding_whitespace_is_ignored(self, source: str, left: str, right: str) -> None:
        tokens = list(Scanner.from_source(left + source + right).tokenize())
        assert [t.value for t in tokens] == [source]


class TestWhitespaceInvariants:
    """Whitespace separates tokens and never alters them."""

    @given(spaced_sources())
    @settings(max_examples=200)
    def test_lexemes_survive_whitespace(self, case: tuple[str, list[str]]) -> None:
        source, words = case
        assert [t.value for t in Scanner.from_source(source).tokenize()] == words

    @given(spaced_sources())
    @settings(max_examples=200)
    def test_positions_point_at_lexemes(self, case: tuple[str, list[str]]) -> None:
        """Every token's (line, column) addresses its lexeme in the source."""
        source, _ = case
        lines = source.split("\n")
        for token in Scanner.from_source(source).tokenize():
            line = lines[token.lineno - 1]
            start = token.col - 1
            assert line[start : start + len(token.value)] == token.value

    @given(spaced_sources())
    @settings(max_examples=100)
    def test_concatenation_equals_stripped_source(self, case: tuple[str, list[str]]) -> None:
        source, _ = case
        stripped = "".join(c for c in source if c not in " \t\r\n")
        assert "".join(t.value for t in Scanner.from_source(source).tokenize()) == stripped

    @given(spaced_sources())
    def test_positions_strictly_increase(self, case: tuple[str, list[str]]) -> None:
        source, _ = case
        starts = [(t.lineno, t.col) for t in Scanner.from_source(source).tokenize()]
        assert starts == sorted(starts)
        assert len(set(starts)) == len(starts)
