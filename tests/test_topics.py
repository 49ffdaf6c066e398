"""
Topic extraction tests.

Run with: pytest tests/test_topics.py -v
"""
import pytest

from analysis.topics import extract_topic


@pytest.mark.parametrize("question, topic", [
    ("What is a closure in JavaScript?", "A closure in JavaScript"),
    ("Explain the event loop in Node.js?", "Event loop in Node.js"),
    ("What are the SOLID principles?", "SOLID principles"),
    ("describe   hoisting", "Hoisting"),
    ("Implement binary search? Bonus: iteratively.", "Binary search"),
    ("The CAP theorem", "CAP theorem"),
    ("recursion", "Recursion"),
])
def test_extract_topic(question, topic):
    assert extract_topic(question) == topic


def test_only_one_instruction_word_is_stripped():
    assert extract_topic("Explain describe the thing?") == "Describe the thing"


def test_linking_verb_kept_after_non_interrogative_word():
    assert extract_topic("Explain is-a relationships") == "Is-a relationships"


def test_instruction_word_needs_following_whitespace():
    # "Whatever" starts with "what" but is not the word "what"
    assert extract_topic("Whatever happened?") == "Whatever happened"
    assert extract_topic("Design") == "Design"


def test_text_after_question_mark_is_dropped():
    assert extract_topic("  How   does GC work? Follow-up: generations?  ") == "Does GC work"


def test_long_topic_is_truncated():
    topic = extract_topic("Describe " + "x" * 100)
    assert topic == "X" + "x" * 79 + "..."
    assert len(topic) == 83


def test_exactly_80_characters_is_not_truncated():
    assert extract_topic("a" * 80) == "A" + "a" * 79


@pytest.mark.parametrize("question", ["", "   ", "?", "  ? trailing"])
def test_empty_question_gives_empty_topic(question):
    assert extract_topic(question) == ""
