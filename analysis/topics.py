"""
Topic extraction from question text.
"""
import re

TOPIC_MAX_LENGTH = 80

INSTRUCTION_WORDS = (
    "explain", "describe", "what", "how", "why", "implement", "design",
    "write", "build", "create", "demonstrate", "show", "tell", "discuss",
    "compare", "analyze", "list", "name", "define",
)

INTERROGATIVE_WORDS = ("what", "how", "why")

_INSTRUCTION_RE = re.compile(
    r"^(" + "|".join(INSTRUCTION_WORDS) + r")\s+", re.IGNORECASE
)
_LINKING_VERB_RE = re.compile(r"^(?:is|are)\s+", re.IGNORECASE)
_ARTICLE_RE = re.compile(r"^the\s+", re.IGNORECASE)


def extract_topic(question_text: str) -> str:
    """
    Derive a short topic label from a question.

    "Explain the event loop in Node.js?" -> "Event loop in Node.js"
    "What is a closure in JavaScript?"   -> "A closure in JavaScript"

    Steps run in a fixed order: cut at the first "?", drop one leading
    instruction word (plus "is"/"are" after what/how/why), drop a leading
    "the", capitalize, cap the length.
    """
    topic = (question_text or "").split("?", 1)[0].strip()

    match = _INSTRUCTION_RE.match(topic)
    if match:
        topic = topic[match.end():]
        if match.group(1).lower() in INTERROGATIVE_WORDS:
            topic = _LINKING_VERB_RE.sub("", topic, count=1)

    topic = _ARTICLE_RE.sub("", topic, count=1)

    topic = topic[:1].upper() + topic[1:]

    if len(topic) > TOPIC_MAX_LENGTH:
        topic = topic[:TOPIC_MAX_LENGTH] + "..."

    return topic
