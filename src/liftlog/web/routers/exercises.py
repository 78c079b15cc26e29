"""Exercise catalog routes."""

from fastapi import APIRouter, Depends

from ...models.exercises import Exercise
from ...models.users import Identity
from ...services import CatalogService
from ...store.base import RowStore
from ..deps import get_identity, get_store
from ..schemas import ExerciseIn

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("")
async def list_exercises(
    search: str | None = None,
    muscle_group: str | None = None,
    difficulty: str | None = None,
    equipment: str | None = None,
    store: RowStore = Depends(get_store),
):
    """Catalog ordered by name; query params narrow it ("all" means no filter)."""
    return await CatalogService(store).browse(
        search, muscle_group=muscle_group, difficulty=difficulty, equipment=equipment
    )


@router.post("", status_code=201)
async def create_exercise(
    body: ExerciseIn,
    store: RowStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    exercise = Exercise(**body.model_dump())
    return await CatalogService(store).create_exercise(exercise, identity)
