# /dog_adoption/services/dog_detail_service.py

import logging

from ..models.dog_model import AdoptionReport, Dog, DogDetailView
from .errors import InvalidState

logger = logging.getLogger(__name__)


class DogDetailSession:
    """
    The state behind one dog's detail view: a copy of the dog, the position
    it was opened from, and whether the adoption confirmation is showing.
    Each session owns its own dialog flag.
    """

    def __init__(self, dog: Dog, position: int):
        self.dog = dog
        self.position = position
        self.show_confirm_dialog = False

    @property
    def adopt_button_label(self) -> str:
        return "Adopted" if self.dog.adopted else "Adopt"

    @property
    def adopt_button_enabled(self) -> bool:
        return not self.dog.adopted

    def request_adoption(self) -> None:
        # The adopt button is disabled once the dog is adopted.
        if not self.adopt_button_enabled:
            return
        self.show_confirm_dialog = True

    def confirm_adoption(self) -> None:
        if not self.show_confirm_dialog:
            raise InvalidState("Adoption can only be confirmed while the confirmation dialog is showing.")
        self.show_confirm_dialog = False
        self.dog = self.dog.as_adopted()
        logger.debug("Adoption confirmed for %s at position %d", self.dog.name, self.position)

    def dismiss_dialog(self) -> None:
        self.show_confirm_dialog = False

    def close(self) -> AdoptionReport:
        """Ends the session and reports the outcome back to the list."""
        self.show_confirm_dialog = False
        return AdoptionReport(position=self.position, adopted=self.dog.adopted)

    def to_view(self) -> DogDetailView:
        return DogDetailView(
            position=self.position,
            dog=self.dog,
            adopt_button_label=self.adopt_button_label,
            adopt_button_enabled=self.adopt_button_enabled,
        )
