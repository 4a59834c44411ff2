from typing import List, Optional
from fastapi import APIRouter, Depends
from ...context import AppContext, get_context
from ..models import Breeder
from ..service import BreederService

router = APIRouter()

def get_breeder_service(context: AppContext = Depends(get_context)) -> BreederService:
    """Dependency: BreederService from the app context."""
    return context.breeder_service

@router.get("/breeders", response_model=List[Breeder])
async def get_all_breeders(service: BreederService = Depends(get_breeder_service)):
    """All breeders, ordered by name."""
    return await service.get_all_breeders()

@router.get("/breeders/{breeder_id}", response_model=Optional[Breeder])
async def get_breeder(breeder_id: int, service: BreederService = Depends(get_breeder_service)):
    """One breeder; null when the ID is unknown."""
    return await service.get_breeder_by_id(breeder_id)
