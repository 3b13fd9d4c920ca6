class DomainError(Exception):
    """Base class for failures while loading words or generating a name."""

    message = "Name generation failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)

    def __str__(self):
        return self.args[0]


class NoAdjectivesAvailable(DomainError):
    message = "No adjectives available"


class NoNounsAvailable(DomainError):
    message = "No nouns available"


class LoadError(DomainError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to load words: {detail}")
