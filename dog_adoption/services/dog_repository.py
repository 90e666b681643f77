# /dog_adoption/services/dog_repository.py

import asyncio
from typing import List

from ..models.dog_model import Dog
from .dog_data_source import DogDataSource


class DogRepository:
    """
    The seam between the list service and wherever dogs come from. It only
    moves the blocking read off the event loop; errors propagate unchanged.
    """

    def __init__(self, data_source: DogDataSource):
        self.data_source = data_source

    async def fetch_all(self) -> List[Dog]:
        return await asyncio.to_thread(self.data_source.fetch_all)
