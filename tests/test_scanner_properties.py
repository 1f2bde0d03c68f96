"""Property-based tests for scanner invariants using Hypothesis.

These check that the guarantees of the comment scanner hold for arbitrary
input, not only for the hand-picked scenarios in test_scanner.py.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from commentstrip import Obfuscator, obfuscate

_OBF = Obfuscator()

# Characters that can change scanner state, mixed with ordinary ones.
_C_ALPHABET = "/*\"'\\\n ab;{}"
_LITERAL_BODY = st.text(alphabet="/*'\n ab;{}", max_size=60)


class TestTotality:
    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_never_raises_and_never_grows(self, source: str) -> None:
        result = _OBF.scan(source)
        assert len(result.text) <= len(source)
        assert result.consumed == len(source)

    @given(st.text(alphabet=_C_ALPHABET, max_size=300))
    @settings(max_examples=300)
    def test_special_character_soup(self, source: str) -> None:
        out = obfuscate(source)
        assert len(out) <= len(source)


class TestPreservation:
    @given(st.text(max_size=500).filter(lambda s: not any(c in s for c in "/\"'")))
    @settings(max_examples=200)
    def test_identity_without_comment_or_quote_characters(self, source: str) -> None:
        assert obfuscate(source) == source

    @given(st.sampled_from(['"', "'"]), _LITERAL_BODY)
    @settings(max_examples=200)
    def test_literal_is_reproduced_exactly(self, quote: str, body: str) -> None:
        body = body.replace(quote, "")
        literal = f"{quote}{body}{quote}"
        source = f"x = {literal}; // trailing\n"
        assert obfuscate(source) == f"x = {literal}; \n"

    @given(st.text(alphabet="/\n ab;{}", max_size=300))
    @settings(max_examples=200)
    def test_line_count_preserved_without_block_comments(self, source: str) -> None:
        assert obfuscate(source).count("\n") == source.count("\n")


class TestDeterminism:
    @given(st.text(alphabet=_C_ALPHABET, max_size=200), st.text(alphabet=_C_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_previous_call_does_not_affect_next(self, first: str, second: str) -> None:
        expected = Obfuscator().obfuscate(second)
        _OBF.obfuscate(first)
        assert _OBF.obfuscate(second) == expected
