"""Tokenizing and counting words in raw text."""

import re
import unicodedata
from collections import Counter
from collections.abc import Iterator

from nltk.tokenize import RegexpTokenizer

# Word runs (optionally joined by ASCII or typographic hyphens and
# apostrophes) or punctuation runs
TOKEN_PATTERN = r"\w+(?:[-'\u2010\u2011\u2019]\w+)*|[^\w\s]+"

# Anything that is not a word character, like hyphens, commas, full stops
NON_WORD = re.compile(r"\W")

WordCount = dict[str, int]

_tokenizer = RegexpTokenizer(TOKEN_PATTERN)


def tokenize(text: str) -> list[str]:
    """Split text into word-like and punctuation-like tokens.

    Whitespace is discarded. Hyphenated and apostrophe words stay whole,
    so ``"well-known, known"`` gives ``["well-known", ",", "known"]``.

    Args:
        text: Raw input text.

    Returns:
        Tokens in the order they appear.
    """
    return _tokenizer.tokenize(text)


def is_word(token: str) -> bool:
    """Check if a token consists only of word characters."""
    return bool(token) and NON_WORD.search(token) is None


def fold(token: str) -> str:
    """Lower-case a word token, keeping only word characters.

    Lower-casing can add combining marks (``"İ"`` becomes ``"i"`` plus
    U+0307); those are removed after NFC normalization.
    """
    return NON_WORD.sub("", unicodedata.normalize("NFC", token.lower()))


def iter_words(text: str) -> Iterator[str]:
    """Yield every qualifying word of the text, lower-cased.

    Tokens containing any non-word character are dropped whole; they are
    never split into or merged with neighbouring words.
    """
    for token in tokenize(text):
        if is_word(token):
            yield fold(token)


def count_words(text: str) -> WordCount:
    """Return a map of lower-cased word to number of occurrences.

    Args:
        text: Raw input text. Empty or punctuation-only text is fine.

    Returns:
        One entry per distinct word. Empty if the text has no words.
    """
    return dict(Counter(iter_words(text)))
