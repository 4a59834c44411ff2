from typing import List, Optional
from fastapi import APIRouter, Depends
from ...common.breeds import Breed
from ...context import AppContext, get_context
from ..models import Cat
from ..service import CatService

router = APIRouter()

def get_cat_service(context: AppContext = Depends(get_context)) -> CatService:
    """Dependency: CatService from the app context."""
    return context.cat_service

@router.get("/cat-breeds", response_model=List[Breed])
async def get_all_breeds(service: CatService = Depends(get_cat_service)):
    """All cat breeds, ordered by name."""
    return await service.get_all_breeds()

@router.get("/cat-breeds/{breed_id}", response_model=Optional[Breed])
async def get_breed(breed_id: int, service: CatService = Depends(get_cat_service)):
    """One cat breed; null when the ID is unknown."""
    return await service.get_breed_by_id(breed_id)

@router.get("/cats", response_model=List[Cat])
async def get_all_cats(service: CatService = Depends(get_cat_service)):
    return await service.get_all_cats()

@router.get("/cats/{cat_id}", response_model=Optional[Cat])
async def get_cat(cat_id: int, service: CatService = Depends(get_cat_service)):
    return await service.get_cat_by_id(cat_id)
