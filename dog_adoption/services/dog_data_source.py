# /dog_adoption/services/dog_data_source.py

import json
import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from .. import config
from ..models.dog_model import Dog
from .errors import DataUnavailable, DecodeFailure

logger = logging.getLogger(__name__)

_DOG_LIST_ADAPTER = TypeAdapter(List[Dog])


class DogDataSource:
    """
    Reads the bundled dogs.json document and decodes it into Dog records,
    keeping document order.

    A read or decode failure raises; it is never reported as an empty list,
    so "no dogs" and "could not read dogs" stay distinguishable.
    """

    def __init__(self, asset_path: Optional[str] = None):
        self.asset_path = asset_path or config.DOGS_ASSET_PATH

    def fetch_all(self) -> List[Dog]:
        raw_text = self._read_asset()
        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError as e:
            raise DecodeFailure(f"{config.DOGS_ASSET_NAME} is not valid JSON: {e}") from e

        if not isinstance(payload, list):
            raise DecodeFailure(
                f"{config.DOGS_ASSET_NAME} must contain a JSON array, got {type(payload).__name__}."
            )

        try:
            dogs = _DOG_LIST_ADAPTER.validate_python(payload)
        except ValidationError as e:
            raise DecodeFailure(
                f"{config.DOGS_ASSET_NAME} contains invalid dog records: {e.error_count()} error(s). {e}"
            ) from e

        logger.debug("Decoded %d dogs from %s", len(dogs), self.asset_path)
        return dogs

    def _read_asset(self) -> str:
        try:
            with open(self.asset_path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as e:
            raise DataUnavailable(f"Could not find the dogs asset at {self.asset_path}.") from e
        except (OSError, UnicodeDecodeError) as e:
            raise DataUnavailable(f"Could not read the dogs asset at {self.asset_path}: {e}") from e
