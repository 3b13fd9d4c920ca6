from pydantic import BaseModel, ConfigDict


class Word(BaseModel):
    model_config = ConfigDict(frozen=True)
    value: str

    def __init__(self, value: str, **data):
        super().__init__(value=value, **data)

    def as_str(self) -> str:
        return self.value

    def __str__(self):
        return self.value


class Adjective(Word):
    pass


class Noun(Word):
    pass


class CoolName(BaseModel):
    model_config = ConfigDict(frozen=True)
    adjective: Adjective
    noun: Noun

    def __str__(self):
        return f"{self.adjective}-{self.noun}"
