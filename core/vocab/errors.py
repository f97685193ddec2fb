"""
Exceptions raised by the learning-state core.
"""


class LabError(Exception):
    """Base class for application errors."""


class NoActiveSessionError(LabError):
    """An operation needed an open story but none is active."""

    def __init__(self, action: str = "continue"):
        super().__init__(f"No active story session: cannot {action}")
        self.action = action


class StoryGenerationError(LabError):
    """The passage generator failed or returned nothing usable."""


class GenerationInProgressError(LabError):
    """A story request is already outstanding."""


class EmptyVocabularyError(LabError):
    """There are no known or learning words to seed a story with."""


class ResetNotConfirmedError(LabError):
    """A full reset was requested without explicit confirmation."""
