# =============================================================================
# core/text_ops.py  —  Deterministic text tools
# =============================================================================
#
# Plain string functions, no backend, no I/O.  Each one has exactly one
# edge case worth knowing about, documented in its docstring:
#   - empty/blank input returns empty output (or 0 / False / [])
#   - repeat() with times <= 0 returns ""
#   - contains() is case-insensitive
#
# tools/text_tools.py registers every function in TEXT_TOOLS as an MCP tool
# under its own name.
# =============================================================================

from typing import Optional

VOWELS = "aeiouAEIOU"


def echo(message: str) -> str:
    """Echoes the message back to the client."""
    return f"Echo: {message}"


def reverse_echo(message: str) -> str:
    """Echoes the message back in reverse."""
    return message[::-1]


def yell(message: str) -> str:
    """Echoes the message back in capital letters."""
    return message.upper()


def word_count(message: str) -> int:
    """Counts the number of words in the message (0 for blank input)."""
    return len(message.split())


def repeat(message: str, times: int) -> str:
    """Repeats the message N times, separated by spaces ("" when times <= 0)."""
    if times <= 0:
        return ""
    return " ".join([message] * times)


def is_palindrome(message: str) -> bool:
    """Checks if the message is a palindrome, ignoring case, spaces and punctuation."""
    cleaned = [c.lower() for c in message if c.isalnum()]
    return cleaned == cleaned[::-1]


def title_case(message: str) -> str:
    """Converts the message to Title Case (blank input is returned unchanged)."""
    if not message.strip():
        return message
    return " ".join(word[0].upper() + word[1:].lower() for word in message.split(" ") if word)


def char_count(message: str) -> int:
    """Counts the characters in the message, excluding whitespace."""
    return sum(1 for c in message if not c.isspace())


def extract_digits(message: str) -> str:
    """Extracts all digits from the message as a string."""
    return "".join(c for c in message if c.isdigit())


def longest_word(message: str) -> str:
    """Finds the longest word in the message (the first one on ties, "" if blank)."""
    words = message.split()
    if not words:
        return ""
    return max(words, key=len)


def vowel_count(message: str) -> int:
    """Counts the number of vowels in the message."""
    return sum(1 for c in message if c in VOWELS)


def replace(message: str, old_value: str, new_value: str) -> str:
    """Replaces all occurrences of a substring (no-op if message or old_value is empty)."""
    if not message or not old_value:
        return message
    return message.replace(old_value, new_value)


def to_lower_case(message: str) -> str:
    """Converts the message to lowercase."""
    return message.lower()


def to_upper_case(message: str) -> str:
    """Converts the message to uppercase."""
    return message.upper()


def trim(message: str) -> str:
    """Trims leading and trailing whitespace from the message."""
    return message.strip()


def contains(message: str, substring: str) -> bool:
    """Checks, case-insensitively, if the message contains a substring (False if either is empty)."""
    if not message or not substring:
        return False
    return substring.casefold() in message.casefold()


def split_into_words(message: str) -> list[str]:
    """Splits the message into a list of words ([] for blank input)."""
    return message.split()


def join_words(words: Optional[list[str]] = None) -> str:
    """Joins a list of words into a single string with spaces."""
    if not words:
        return ""
    return " ".join(words)


TEXT_TOOLS = [
    echo,
    reverse_echo,
    yell,
    word_count,
    repeat,
    is_palindrome,
    title_case,
    char_count,
    extract_digits,
    longest_word,
    vowel_count,
    replace,
    to_lower_case,
    to_upper_case,
    trim,
    contains,
    split_into_words,
    join_words,
]
