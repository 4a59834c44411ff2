from typing import List, Optional
from fastapi import APIRouter, Depends
from ...common.breeds import Breed
from ...context import AppContext, get_context
from ..models import Dog
from ..service import DogService

router = APIRouter()

def get_dog_service(context: AppContext = Depends(get_context)) -> DogService:
    """Dependency: DogService from the app context."""
    return context.dog_service

@router.get("/dog-breeds", response_model=List[Breed])
async def get_all_breeds(service: DogService = Depends(get_dog_service)):
    """All dog breeds, ordered by name."""
    return await service.get_all_breeds()

@router.get("/dog-breeds/{breed_id}", response_model=Optional[Breed])
async def get_breed(breed_id: int, service: DogService = Depends(get_dog_service)):
    """One dog breed; null when the ID is unknown."""
    return await service.get_breed_by_id(breed_id)

@router.get("/dogs", response_model=List[Dog])
async def get_all_dogs(service: DogService = Depends(get_dog_service)):
    return await service.get_all_dogs()

@router.get("/dogs/{dog_id}", response_model=Optional[Dog])
async def get_dog(dog_id: int, service: DogService = Depends(get_dog_service)):
    return await service.get_dog_by_id(dog_id)
