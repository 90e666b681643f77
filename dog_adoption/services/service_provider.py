# /dog_adoption/services/service_provider.py

from typing import Optional

from .dog_data_source import DogDataSource
from .dog_list_service import DogListService
from .dog_repository import DogRepository


def provide_data_source(asset_path: Optional[str] = None) -> DogDataSource:
    return DogDataSource(asset_path)


def provide_repository(asset_path: Optional[str] = None) -> DogRepository:
    return DogRepository(provide_data_source(asset_path))


def provide_dog_list_service(asset_path: Optional[str] = None) -> DogListService:
    return DogListService(provide_repository(asset_path))
