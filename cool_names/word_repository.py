"""Word sources for name generation.

A repository holds two read-only word collections (adjectives and nouns)
loaded once at construction and shared by every request afterwards.
"""
import random
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Union, runtime_checkable

from loguru import logger

from .errors import LoadError, NoAdjectivesAvailable, NoNounsAvailable
from .word_types import Adjective, Noun


@runtime_checkable
class WordRepository(Protocol):
    def get_random_adjective(self) -> Adjective:
        ...

    def get_random_noun(self) -> Noun:
        ...

    def adjectives_count(self) -> int:
        ...

    def nouns_count(self) -> int:
        ...


def clean_words(words: Iterable[str]) -> List[str]:
    return [word.strip() for word in words if word.strip()]


def parse_words(text: str) -> List[str]:
    """One word per line; blank and whitespace-only lines are dropped."""
    return clean_words(text.splitlines())


def load_words(path: Union[str, Path]) -> List[str]:
    try:
        with open(path, 'r', encoding='utf-8-sig') as file:
            content = file.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Failed to read file: {e}") from e

    return parse_words(content)


class InMemoryWordRepository:
    def __init__(self, adjectives: Iterable[str], nouns: Iterable[str], rng: Optional[random.Random] = None):
        if isinstance(adjectives, str) or isinstance(nouns, str):
            raise TypeError("adjectives and nouns must be collections of words, not a single string")

        self._adjectives: Sequence[str] = tuple(clean_words(adjectives))
        self._nouns: Sequence[str] = tuple(clean_words(nouns))
        self._rng = rng or random.Random()

        if not self._adjectives:
            raise NoAdjectivesAvailable()

        if not self._nouns:
            raise NoNounsAvailable()

    def get_random_adjective(self) -> Adjective:
        if not self._adjectives:
            raise NoAdjectivesAvailable()

        return Adjective(self._rng.choice(self._adjectives))

    def get_random_noun(self) -> Noun:
        if not self._nouns:
            raise NoNounsAvailable()

        return Noun(self._rng.choice(self._nouns))

    def adjectives_count(self) -> int:
        return len(self._adjectives)

    def nouns_count(self) -> int:
        return len(self._nouns)


class FileWordRepository(InMemoryWordRepository):
    """Loads adjectives and nouns from two newline-delimited text files."""

    def __init__(self, adjectives_path: Union[str, Path], nouns_path: Union[str, Path], rng: Optional[random.Random] = None):
        adjectives = load_words(adjectives_path)
        nouns = load_words(nouns_path)

        super().__init__(adjectives, nouns, rng=rng)

        self.adjectives_path = Path(adjectives_path)
        self.nouns_path = Path(nouns_path)

        logger.info(f"Loaded {self.adjectives_count()} adjectives from {self.adjectives_path}")
        logger.info(f"Loaded {self.nouns_count()} nouns from {self.nouns_path}")
