"""
Brew day process tracking.

Mash schedule, brew day steps, process dates, notes and the packaged
yield of a batch. Like the lifecycle helpers these are copy operations on
frozen recipes: every function takes the current time from the caller and
returns a new Recipe.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from brewcraft_common.exceptions import NotFoundError, ValidationError
from brewcraft_common.models import BrewingStep, MashStep, Recipe, YieldEntry, YieldType


PROCESS_DATES = ("brew_date", "yeast_pitch_date", "bottling_date")


@dataclass(frozen=True)
class MashPreset:
    """A common mash rest."""

    name: str
    temperature: float
    duration: float
    description: str


MASH_PRESETS: tuple[MashPreset, ...] = (
    MashPreset(
        "Single Infusion", 152, 60,
        "Balanced conversion to fermentable and non-fermentable sugars; medium body.",
    ),
    MashPreset(
        "Mash Out", 168, 10,
        "Stops enzyme activity and eases lautering.",
    ),
    MashPreset(
        "Protein Rest", 122, 20,
        "Breaks down proteins for head retention and clarity in undermodified malts.",
    ),
    MashPreset(
        "Beta Amylase Rest", 145, 30,
        "More fermentable sugars for a drier, lighter-bodied beer.",
    ),
    MashPreset(
        "Alpha Amylase Rest", 158, 30,
        "More unfermentable sugars for fuller body and sweetness.",
    ),
)


def _new_id() -> str:
    return str(uuid.uuid4())


def _touch(recipe: Recipe, now: datetime, **changes: Any) -> Recipe:
    return recipe.model_copy(update={**changes, "updated_at": now})


def _yield_type(value: YieldType | str) -> YieldType:
    try:
        return YieldType(value)
    except ValueError as e:
        types = ", ".join(t.value for t in YieldType)
        raise ValidationError(f"Unknown yield type '{value}'. Use one of: {types}") from e


def get_mash_preset(name: str) -> MashPreset:
    """
    Look up a mash preset by name, ignoring case.

    Raises:
        ValidationError: If there is no preset with this name
    """
    wanted = name.strip().lower()
    preset = next((p for p in MASH_PRESETS if p.name.lower() == wanted), None)
    if preset is None:
        names = ", ".join(p.name for p in MASH_PRESETS)
        raise ValidationError(f"Unknown mash preset '{name}'. Use one of: {names}")
    return preset


# Mash schedule

def add_mash_step(
    recipe: Recipe,
    name: str,
    temperature: float,
    duration: float,
    now: datetime,
    step_id: str | None = None,
) -> Recipe:
    """Append a rest to the mash schedule."""
    step = MashStep(id=step_id or _new_id(), name=name, temperature=temperature, duration=duration)
    return _touch(recipe, now, mash_steps=[*recipe.mash_steps, step])


def add_mash_preset(
    recipe: Recipe,
    preset_name: str,
    now: datetime,
    step_id: str | None = None,
) -> Recipe:
    preset = get_mash_preset(preset_name)
    return add_mash_step(recipe, preset.name, preset.temperature, preset.duration, now, step_id)


def update_mash_step(recipe: Recipe, step_id: str, now: datetime, **changes: Any) -> Recipe:
    """
    Change the name, temperature or duration of a mash rest.

    Raises:
        NotFoundError: If the recipe has no rest with this id
    """
    if not any(s.id == step_id for s in recipe.mash_steps):
        raise NotFoundError(f"Mash step '{step_id}' not found")
    steps = [
        MashStep.model_validate({**s.model_dump(), **changes, "id": s.id}) if s.id == step_id else s
        for s in recipe.mash_steps
    ]
    return _touch(recipe, now, mash_steps=steps)


def remove_mash_step(recipe: Recipe, step_id: str, now: datetime) -> Recipe:
    if not any(s.id == step_id for s in recipe.mash_steps):
        raise NotFoundError(f"Mash step '{step_id}' not found")
    return _touch(recipe, now, mash_steps=[s for s in recipe.mash_steps if s.id != step_id])


def total_mash_minutes(recipe: Recipe) -> float:
    return sum(s.duration for s in recipe.mash_steps)


# Brew day steps

def add_brewing_step(
    recipe: Recipe,
    name: str,
    now: datetime,
    duration: float = 0,
    temperature: float | None = None,
    notes: str = "",
    step_id: str | None = None,
) -> Recipe:
    step = BrewingStep(
        id=step_id or _new_id(),
        name=name,
        duration=duration,
        temperature=temperature,
        notes=notes,
    )
    return _touch(recipe, now, steps=[*recipe.steps, step])


def complete_brewing_step(
    recipe: Recipe,
    step_id: str,
    now: datetime,
    completed: bool = True,
) -> Recipe:
    """
    Mark a brew day step done (timestamped now) or not done.

    Raises:
        NotFoundError: If the recipe has no step with this id
    """
    if not any(s.id == step_id for s in recipe.steps):
        raise NotFoundError(f"Brewing step '{step_id}' not found")
    steps = [
        s.model_copy(update={"completed": completed, "timestamp": now if completed else None})
        if s.id == step_id
        else s
        for s in recipe.steps
    ]
    return _touch(recipe, now, steps=steps)


def remove_brewing_step(recipe: Recipe, step_id: str, now: datetime) -> Recipe:
    if not any(s.id == step_id for s in recipe.steps):
        raise NotFoundError(f"Brewing step '{step_id}' not found")
    return _touch(recipe, now, steps=[s for s in recipe.steps if s.id != step_id])


# Dates and notes

def set_process_dates(recipe: Recipe, now: datetime, **dates: datetime | None) -> Recipe:
    """
    Set or clear brew, yeast pitch and bottling dates.

    Only the dates passed are changed; passing None clears one.

    Raises:
        ValidationError: For a name other than brew_date, yeast_pitch_date or bottling_date
    """
    unknown = sorted(set(dates) - set(PROCESS_DATES))
    if unknown:
        raise ValidationError(f"Unknown process dates: {', '.join(unknown)}")
    return _touch(recipe, now, **dates)


def set_process_notes(recipe: Recipe, notes: str, now: datetime) -> Recipe:
    return _touch(recipe, now, process_notes=notes or None)


# Final yield

def set_yield(
    recipe: Recipe,
    yield_type: YieldType | str,
    amount: float,
    now: datetime,
    entry_id: str | None = None,
) -> Recipe:
    """
    Record how much of one package type a batch filled.

    A recipe holds at most one entry per package type; setting a type
    again replaces its amount.
    """
    yield_type = _yield_type(yield_type)
    existing = next((e for e in recipe.final_yield if e.type == yield_type), None)
    entry = YieldEntry(
        id=existing.id if existing else (entry_id or _new_id()),
        type=yield_type,
        amount=amount,
    )
    if existing:
        entries = [entry if e.type == yield_type else e for e in recipe.final_yield]
    else:
        entries = [*recipe.final_yield, entry]
    return _touch(recipe, now, final_yield=entries)


def remove_yield(recipe: Recipe, yield_type: YieldType | str, now: datetime) -> Recipe:
    yield_type = _yield_type(yield_type)
    if not any(e.type == yield_type for e in recipe.final_yield):
        raise NotFoundError(f"No {yield_type.value} yield recorded")
    return _touch(recipe, now, final_yield=[e for e in recipe.final_yield if e.type != yield_type])
