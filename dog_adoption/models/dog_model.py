# /dog_adoption/models/dog_model.py

# --- Core Imports ---
from pydantic import BaseModel, ConfigDict, Field, StrictBool


class Dog(BaseModel):
    """
    A single adoptable dog as it appears in the bundled dogs.json asset.
    Dogs carry no explicit primary key; their identity is their position
    in the loaded list.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The dog's display name.")
    avatar: str = Field(..., description="Name of the image resource, without extension.")
    introduction: str = Field(..., description="A short introduction shown on the detail view.")
    adopted: StrictBool = Field(default=False, description="Whether the dog has been adopted.")

    def as_adopted(self) -> "Dog":
        """Returns a copy of this dog with the adopted flag set."""
        return self.model_copy(update={"adopted": True})


class AdoptionReport(BaseModel):
    """
    The result a detail view hands back to the list: which position it was
    opened for and whether the dog ended up adopted.
    """
    position: int
    adopted: bool


class DogDetailView(BaseModel):
    """Response model for a single dog's detail view."""
    position: int
    dog: Dog
    adopt_button_label: str
    adopt_button_enabled: bool
