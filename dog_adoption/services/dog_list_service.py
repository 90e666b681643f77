# /dog_adoption/services/dog_list_service.py

import logging
from typing import Callable, List, Optional, Tuple

from ..models.dog_model import AdoptionReport, Dog
from ..models.resource_model import Resource, ResourceStatus
from .dog_repository import DogRepository
from .errors import IndexOutOfRange, InvalidState
from .live_state import LiveState, Observer

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Uncaught exception happens"

DogListResource = Resource[List[Dog]]


class DogListService:
    """
    Owns the list of dogs and its observable Resource state.

    Every load() publishes loading and then exactly one of success or error.
    Adoption never mutates a published snapshot: it builds a new tuple with
    the one dog replaced and publishes a fresh list copy of it.
    """

    def __init__(self, repository: DogRepository):
        self.repository = repository
        self._state: LiveState[DogListResource] = LiveState()
        self._dogs: Tuple[Dog, ...] = ()

    # --- Read Access ---
    @property
    def resource(self) -> Optional[DogListResource]:
        return self._state.value

    @property
    def dogs(self) -> Tuple[Dog, ...]:
        return self._dogs

    def observe(self, observer: Observer) -> Callable[[], None]:
        return self._state.observe(observer)

    # --- Loading ---
    async def load(self) -> DogListResource:
        """
        Fetches the dogs through the repository and publishes the outcome.
        Overlapping calls are not cancelled; whichever finishes last decides
        the final state.
        """
        self._state.publish(DogListResource.loading())
        try:
            dogs = await self.repository.fetch_all()
        except Exception as e:
            logger.exception("Failed to load dogs")
            self._dogs = ()
            result = DogListResource.error(str(e) or FALLBACK_ERROR_MESSAGE)
        else:
            self._dogs = tuple(dogs)
            logger.info("Loaded %d dogs", len(self._dogs))
            result = DogListResource.success(list(self._dogs))
        self._state.publish(result)
        return result

    # --- Adoption ---
    def get_dog(self, position: int) -> Dog:
        self._check_position(position)
        return self._dogs[position]

    def mark_adopted(self, position: int) -> DogListResource:
        self._check_position(position)
        dogs: List[Dog] = list(self._dogs)
        dogs[position] = dogs[position].as_adopted()
        self._dogs = tuple(dogs)
        logger.info("Marked dog %d (%s) as adopted", position, self._dogs[position].name)
        result = DogListResource.success(list(self._dogs))
        self._state.publish(result)
        return result

    def apply_adoption_report(self, report: AdoptionReport) -> Optional[DogListResource]:
        """
        Applies the result handed back by a detail view. A report with
        adopted=False changes nothing; dogs cannot be un-adopted.
        """
        if not report.adopted:
            logger.debug("Ignoring non-adoption report for position %d", report.position)
            return None
        return self.mark_adopted(report.position)

    def _check_position(self, position: int) -> None:
        current = self._state.value
        if current is None or current.status != ResourceStatus.SUCCESS:
            state = current.status.value if current is not None else "unset"
            raise InvalidState(f"Dogs must be loaded successfully first (current state: {state}).")
        if not 0 <= position < len(self._dogs):
            raise IndexOutOfRange(position, len(self._dogs))
