"""AI workout routes."""

from fastapi import APIRouter, Depends, Request

from ...ai import PlanGenerator, unknown_exercises
from ...db import AIWorkoutRepository
from ...errors import NotFoundError
from ...models.trainers import WorkoutRequest
from ...services import CatalogService, TrainerService
from ...store.base import RowStore
from ..deps import get_store
from ..schemas import GenerateIn, QuestionIn

router = APIRouter(prefix="/ai", tags=["ai"])


def get_generator(request: Request, store: RowStore = Depends(get_store)) -> PlanGenerator:
    """Plan generator, using a completion function from app state when one is set."""
    completion = getattr(request.app.state, "completion", None)
    return PlanGenerator(store, completion=completion)


@router.get("")
async def list_generated(trainer_id: int | None = None, store: RowStore = Depends(get_store)):
    return await AIWorkoutRepository(store).list_all(trainer_id)


@router.post("", status_code=201)
async def generate(
    body: GenerateIn,
    store: RowStore = Depends(get_store),
    generator: PlanGenerator = Depends(get_generator),
):
    trainer = await TrainerService(store).get(body.trainer_id)
    catalog = await CatalogService(store).list_exercises()
    request = WorkoutRequest(**body.model_dump(exclude={"trainer_id"}))
    result = await generator.generate_and_store(trainer, request, catalog)
    return {
        "workout": result.stored,
        "plan": result.plan,
        "unknown_exercises": unknown_exercises(result.plan, catalog),
    }


@router.get("/{workout_id}")
async def get_generated(workout_id: int, store: RowStore = Depends(get_store)):
    workout = await AIWorkoutRepository(store).get(workout_id)
    if workout is None:
        raise NotFoundError(f"Generated workout {workout_id} not found")
    return workout


@router.post("/ask")
async def ask(
    body: QuestionIn,
    store: RowStore = Depends(get_store),
    generator: PlanGenerator = Depends(get_generator),
):
    trainer = await TrainerService(store).get(body.trainer_id)
    answer = await generator.ask_trainer(trainer, body.question)
    return {"trainer": trainer.name, "answer": answer}
