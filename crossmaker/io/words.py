"""Collect and normalize the words handed to the solver."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from ..core.constants import MAX_WORD_LENGTH, MIN_WORD_LENGTH
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

WORD_RE = re.compile(r"[^A-Za-z]")


def clean_word(text: str) -> str:
    """Return a normalized uppercase ASCII representation of ``text``."""

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", text.strip())
    letters = "".join(char for char in decomposed if char.isalpha())
    return WORD_RE.sub("", letters).upper()


@dataclass
class WordCollection:
    """Words ready for the solver plus the entries that were refused."""

    words: List[str] = field(default_factory=list)
    rejected: List[Tuple[str, str]] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return bool(self.words) and not self.rejected


def collect_words(
    entries: Iterable[str],
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
) -> WordCollection:
    """Normalize ``entries``, drop blanks and duplicates, refuse bad lengths."""

    collection = WordCollection()
    seen = set()
    for entry in entries:
        word = clean_word(entry)
        if not word:
            continue
        if len(word) < min_length:
            collection.rejected.append(
                (entry, f"Word has to have more than {min_length - 1} characters.")
            )
            continue
        if len(word) > max_length:
            collection.rejected.append(
                (entry, f"Word has to have at most {max_length} characters.")
            )
            continue
        if word in seen:
            collection.duplicates.append(word)
            continue
        seen.add(word)
        collection.words.append(word)

    if collection.rejected:
        LOGGER.warning("Refused %d word(s): %s", len(collection.rejected),
                       ", ".join(entry for entry, _ in collection.rejected))
    if collection.duplicates:
        LOGGER.info("Dropped duplicate word(s): %s", ", ".join(collection.duplicates))
    return collection


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


__all__ = ["WordCollection", "clean_word", "collect_words", "parse_words_file"]
