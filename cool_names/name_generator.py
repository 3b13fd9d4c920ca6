from typing import Protocol, runtime_checkable

from .word_repository import WordRepository
from .word_types import CoolName


@runtime_checkable
class NameGenerator(Protocol):
    def generate(self) -> CoolName:
        ...


class NameGeneratorService:
    def __init__(self, repository: WordRepository):
        self.repository = repository

    def generate(self) -> CoolName:
        adjective = self.repository.get_random_adjective()
        noun = self.repository.get_random_noun()

        return CoolName(adjective=adjective, noun=noun)
