"""Word-level alignment between two single-line strings."""

from __future__ import annotations

import difflib
import re
from dataclasses import dataclass
from enum import StrEnum

WORD_TOKEN_PATTERN = re.compile(r"\w+|\s+|[^\w\s]")


class WordOp(StrEnum):
    """Operation applied to one run of tokens."""

    EQUAL = "equal"
    DELETED = "deleted"
    INSERTED = "inserted"


@dataclass(frozen=True, slots=True)
class WordChange:
    """Run of text tagged with the operation that produced it."""

    op: WordOp
    text: str


def tokenize_words(text: str) -> list[str]:
    """Split text into word runs, whitespace runs and single punctuation marks."""
    return WORD_TOKEN_PATTERN.findall(text)


def diff_words(old: str, new: str) -> tuple[WordChange, ...]:
    """Align two strings token by token.

    Replaying the ``equal`` and ``deleted`` changes in order rebuilds ``old``;
    replaying ``equal`` and ``inserted`` rebuilds ``new``. Within a replaced
    region the deleted run always precedes the inserted run.
    """
    old_tokens = tokenize_words(old)
    new_tokens = tokenize_words(new)
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)

    changes: list[WordChange] = []
    for tag, old_start, old_end, new_start, new_end in matcher.get_opcodes():
        if tag == "equal":
            _append_change(changes, WordOp.EQUAL, "".join(old_tokens[old_start:old_end]))
            continue
        if old_end > old_start:
            _append_change(changes, WordOp.DELETED, "".join(old_tokens[old_start:old_end]))
        if new_end > new_start:
            _append_change(changes, WordOp.INSERTED, "".join(new_tokens[new_start:new_end]))
    return tuple(changes)


def _append_change(changes: list[WordChange], op: WordOp, text: str) -> None:
    """Append a change, merging it into the previous one when ops match."""
    if not text:
        return
    if changes and changes[-1].op is op:
        changes[-1] = WordChange(op=op, text=changes[-1].text + text)
        return
    changes.append(WordChange(op=op, text=text))
