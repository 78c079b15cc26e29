"""Trainer persona management."""

import structlog

from ..db.repositories import TrainerRepository
from ..errors import NotFoundError, ValidationError
from ..models.trainers import TrainerProfile
from ..store.base import RowStore

logger = structlog.get_logger(__name__)


class TrainerService:
    """Create, list and delete trainer personas."""

    def __init__(self, store: RowStore):
        self.trainers = TrainerRepository(store)

    async def list_trainers(self, active_only: bool = False) -> list[TrainerProfile]:
        return await self.trainers.list_all(active_only=active_only)

    async def get(self, trainer_id: int) -> TrainerProfile:
        trainer = await self.trainers.get(trainer_id)
        if trainer is None:
            raise NotFoundError(f"Trainer {trainer_id} not found")
        return trainer

    async def create(self, trainer: TrainerProfile) -> TrainerProfile:
        for field_name in ("name", "philosophy", "training_style"):
            value = getattr(trainer, field_name).strip()
            if not value:
                raise ValidationError(f"Trainer {field_name.replace('_', ' ')} is required")
            setattr(trainer, field_name, value)
        if trainer.rest_time_preference < 0:
            raise ValidationError("Rest time cannot be negative")

        created = await self.trainers.create(trainer)
        logger.info("trainer_created", trainer_id=created.id, name=created.name)
        return created

    async def delete(self, trainer_id: int) -> None:
        deleted = await self.trainers.delete(trainer_id)
        if not deleted:
            raise NotFoundError(f"Trainer {trainer_id} not found")
