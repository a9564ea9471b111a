"""User-facing reply texts built from the catalog's topics."""

from typing import Optional, Sequence

import catalog

ASK_EXAMPLE = "Ask me for an example of a SSML element."


def topic_list(topics: Optional[Sequence[str]] = None) -> str:
    """Enumerate every topic once, in catalog order, ending with "and"."""
    names = list(catalog.topics() if topics is None else topics)
    if not names:
        raise ValueError("topic_list needs at least one topic")
    if len(names) == 1:
        return f"You can ask me about {names[0]}."
    return f"You can ask me about {', '.join(names[:-1])}, and {names[-1]}."


def did_not_understand() -> str:
    return f"Sorry, I didn't understand you. {ASK_EXAMPLE}"


def welcome() -> str:
    return f'Welcome! {ASK_EXAMPLE} You can say "give me an example of the prosody element".'


def lead_in(topic: str) -> str:
    return f"Ok, here's an SSML example of {topic}."
