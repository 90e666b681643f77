# /dog_adoption/services/errors.py

"""
Exceptions raised by the dog data pipeline.

Data errors (DataUnavailable, DecodeFailure) are turned into an error
Resource by the DogListService. State errors (InvalidState and its
IndexOutOfRange subclass) propagate to the caller.
"""


class DogAdoptionError(Exception):
    """Base class for all errors raised by this package."""


class DogDataError(DogAdoptionError):
    """The dog list could not be produced."""


class DataUnavailable(DogDataError):
    """The bundled dogs asset is missing or could not be read."""


class DecodeFailure(DogDataError):
    """The bundled dogs asset is not a valid list of dog records."""


class InvalidState(DogAdoptionError):
    """An operation was attempted in a state that does not allow it."""


class IndexOutOfRange(InvalidState, IndexError):
    """A position does not refer to a dog in the loaded list."""

    def __init__(self, position: int, size: int):
        self.position = position
        self.size = size
        super().__init__(f"Position {position} is out of range for a list of {size} dogs.")
