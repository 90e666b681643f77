# /dog_adoption/models/resource_model.py

# --- Core Imports ---
from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class ResourceStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    LOADING = "loading"


class Resource(BaseModel, Generic[T]):
    """
    The state of one asynchronous fetch. Exactly one of three shapes is valid:

    - loading: no data, no message
    - success: data present, no message
    - error:   non-empty message, no data
    """
    model_config = ConfigDict(frozen=True)

    status: ResourceStatus
    data: Optional[T] = None
    message: Optional[str] = None

    @model_validator(mode="after")
    def _check_shape(self) -> "Resource[T]":
        if self.status == ResourceStatus.LOADING:
            if self.data is not None or self.message is not None:
                raise ValueError("A loading resource carries neither data nor a message.")
        elif self.status == ResourceStatus.SUCCESS:
            if self.data is None or self.message is not None:
                raise ValueError("A success resource carries data and no message.")
        elif not self.message or self.data is not None:
            raise ValueError("An error resource carries a non-empty message and no data.")
        return self

    # --- Factories ---
    @classmethod
    def success(cls, data: T) -> "Resource[T]":
        return cls(status=ResourceStatus.SUCCESS, data=data)

    @classmethod
    def error(cls, message: str) -> "Resource[T]":
        return cls(status=ResourceStatus.ERROR, message=message)

    @classmethod
    def loading(cls) -> "Resource[T]":
        return cls(status=ResourceStatus.LOADING)

    @property
    def is_terminal(self) -> bool:
        return self.status != ResourceStatus.LOADING
