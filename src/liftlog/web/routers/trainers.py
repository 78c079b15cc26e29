"""Trainer persona routes."""

from fastapi import APIRouter, Depends

from ...models.trainers import TrainerProfile
from ...services import TrainerService
from ...store.base import RowStore
from ..deps import get_store
from ..schemas import TrainerIn

router = APIRouter(prefix="/trainers", tags=["trainers"])


@router.get("")
async def list_trainers(active_only: bool = False, store: RowStore = Depends(get_store)):
    return await TrainerService(store).list_trainers(active_only=active_only)


@router.post("", status_code=201)
async def create_trainer(body: TrainerIn, store: RowStore = Depends(get_store)):
    return await TrainerService(store).create(TrainerProfile(**body.model_dump()))


@router.get("/{trainer_id}")
async def get_trainer(trainer_id: int, store: RowStore = Depends(get_store)):
    return await TrainerService(store).get(trainer_id)


@router.delete("/{trainer_id}", status_code=204)
async def delete_trainer(trainer_id: int, store: RowStore = Depends(get_store)):
    await TrainerService(store).delete(trainer_id)
