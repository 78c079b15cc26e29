"""Workout template routes."""

from fastapi import APIRouter, Depends

from ...errors import ValidationError
from ...models.users import Identity
from ...services import SessionRecorder, TemplateBuilder, TemplateService
from ...store.base import RowStore
from ..deps import get_identity, get_store
from ..schemas import TemplateIn, TemplateRunIn

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("")
async def list_templates(store: RowStore = Depends(get_store)):
    """Templates with exercise counts, favorites first, then newest."""
    return await TemplateService(store).list_templates()


@router.post("", status_code=201)
async def create_template(
    body: TemplateIn,
    store: RowStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    builder = TemplateBuilder(store)
    for item in body.exercises:
        row = builder.add(item.selection())
        builder.update(row.temp_id, "sets", item.sets)
        builder.update(row.temp_id, "reps_min", item.reps_min)
        builder.update(row.temp_id, "reps_max", item.reps_max)
        builder.update(row.temp_id, "target_weight", item.target_weight)
        builder.update(row.temp_id, "notes", item.notes)
    return await builder.save(body.name, body.description, identity)


@router.get("/{template_id}")
async def get_template(template_id: int, store: RowStore = Depends(get_store)):
    return await TemplateService(store).get_template(template_id)


@router.post("/{template_id}/favorite")
async def toggle_favorite(
    template_id: int,
    store: RowStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    is_favorite = await TemplateService(store).toggle_favorite(template_id)
    return {"id": template_id, "is_favorite": is_favorite}


@router.delete("/{template_id}", status_code=204)
async def delete_template(
    template_id: int,
    store: RowStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    await TemplateService(store).delete_template(template_id)


@router.get("/{template_id}/start")
async def start_template(template_id: int, store: RowStore = Depends(get_store)):
    """The session draft a template run starts from: every set pending."""
    recorder = SessionRecorder(store)
    template = await recorder.load_from_template(template_id)
    return {"template": template, "rows": recorder.rows, "summary": recorder.summary}


@router.post("/{template_id}/start", status_code=201)
async def finish_template_run(
    template_id: int,
    body: TemplateRunIn,
    store: RowStore = Depends(get_store),
    identity: Identity = Depends(get_identity),
):
    """Save a completed template run.

    Each entry in `rows` addresses a template row by position and reports
    the actual weight, reps and completion of its sets.
    """
    recorder = SessionRecorder(store)
    await recorder.load_from_template(template_id)
    rows = recorder.rows
    for executed in body.rows:
        if not 0 <= executed.order_index < len(rows):
            raise ValidationError(f"Template has no exercise at position {executed.order_index}")
        temp_id = rows[executed.order_index].temp_id
        for set_index, done in enumerate(executed.sets):
            if done.weight is not None:
                recorder.set_actual_weight(temp_id, set_index, done.weight)
            if done.reps is not None:
                recorder.set_actual_reps(temp_id, set_index, done.reps)
            if done.completed:
                recorder.toggle_set(temp_id, set_index)
    return await recorder.save(mood=body.mood, notes=body.notes, identity=identity)
