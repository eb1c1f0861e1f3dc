from hypothesis import given
from hypothesis import strategies as st

from algodrills.strings import is_palindrome, normalize


def test_is_palindrome_examples():
    assert is_palindrome("A man, a plan, a canal: Panama")
    assert not is_palindrome("race a car")
    assert is_palindrome("")


def test_normalize_strips_punctuation_and_case():
    assert normalize("A man, a plan") == "amanaplan"


def test_normalize_drops_non_ascii():
    assert normalize("é1") == "1"


@given(st.text())
def test_text_plus_reverse_is_palindrome(text):
    assert is_palindrome(text + text[::-1])


@given(st.text())
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


@given(st.text())
def test_normalize_output_is_lower_alnum(text):
    cleaned = normalize(text)
    assert all(ch.isascii() and ch.isalnum() and not ch.isupper() for ch in cleaned)