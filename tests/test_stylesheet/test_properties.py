"""Property-based tests for the scanners and the categorizer."""

import re
import string

from hypothesis import given
from hypothesis import strategies as st

from elementary.stylesheet import categorize_tokens, extract_classes, extract_tokens

CLASS_NAME_RE = re.compile(r"\.[a-z][a-z0-9-]*")
TOKEN_NAME_RE = re.compile(r"--[a-z][a-z0-9-]*")

# Text biased toward CSS punctuation so matches actually occur.
css_text = st.text(
    alphabet=string.ascii_lowercase + string.digits + "-.:;{}() \n\r\t#",
    max_size=400,
)

token_name = st.from_regex(r"--[a-z]{1,3}-[a-z0-9]{1,6}", fullmatch=True)


class TestClassProperties:
    @given(css_text)
    def test_sorted_and_unique(self, text):
        classes = extract_classes(text)
        assert classes == sorted(set(classes))

    @given(css_text)
    def test_each_class_starts_a_line(self, text):
        lines = text.splitlines()
        for cls in extract_classes(text):
            assert CLASS_NAME_RE.fullmatch(cls)
            assert any(line.startswith(cls) for line in lines)


class TestTokenProperties:
    @given(css_text)
    def test_sorted_unique_two_hyphens(self, text):
        tokens = extract_tokens(text)
        assert tokens == sorted(set(tokens))
        for token in tokens:
            assert TOKEN_NAME_RE.fullmatch(token)
            assert token.startswith("--") and not token.startswith("---")


class TestCategorizeProperties:
    @given(st.lists(token_name, unique=True))
    def test_exact_partition(self, tokens):
        buckets = categorize_tokens(tokens)
        flattened = [token for members in buckets.values() for token in members]
        assert sorted(flattened) == sorted(tokens)
        assert len(flattened) == len(tokens)

    @given(st.lists(token_name, unique=True))
    def test_bucket_order_matches_input(self, tokens):
        position = {token: i for i, token in enumerate(tokens)}
        for members in categorize_tokens(tokens).values():
            indexes = [position[token] for token in members]
            assert indexes == sorted(indexes)
