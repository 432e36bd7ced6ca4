from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime, timezone

import pytest

from stockwise.application.errors import ConflictError, NotFound, ValidationError
from stockwise.application.use_cases.livestock import (
    add_activity_log,
    add_important_date,
    create_livestock,
    get_livestock,
    list_livestock,
    update_livestock,
)
from stockwise.application.use_cases.pens import create_pen, list_eligible_pens
from stockwise.domain.models.activity_log import ActivityType
from stockwise.domain.models.livestock import (
    BatchLivestock,
    Gender,
    IndividualLivestock,
    LivestockCategory,
)


def cow_input(pen_id: str | None = None) -> create_livestock.CreateLivestockInput:
    return create_livestock.CreateLivestockInput(
        category=LivestockCategory.MEGA,
        tag="COW-001",
        breed="Holstein",
        birth_date=date(2022, 6, 15),
        gender=Gender.FEMALE,
        pen_id=pen_id,
    )


@pytest.mark.asyncio
async def test_register_cow_into_new_pen_restricts_it(farm):
    pen = await create_pen.execute(farm, create_pen.CreatePenInput(name="Pen A"))

    animal = await create_livestock.execute(farm, cow_input(pen.id))

    assert isinstance(animal, IndividualLivestock)
    assert animal.activity_logs == [] and animal.important_dates == []
    assert farm.get_pen_by_id(pen.id).allowed_category == LivestockCategory.MEGA


@pytest.mark.asyncio
async def test_restricted_pen_not_offered_to_mini_stock(farm):
    pen = await create_pen.execute(farm, create_pen.CreatePenInput(name="Pen A"))
    await create_livestock.execute(farm, cow_input(pen.id))

    eligible = await list_eligible_pens.execute(farm, "Mini Stock")

    assert pen.id not in [p.id for p in eligible]


@pytest.mark.asyncio
async def test_batch_requires_quantity_and_rejects_gender(farm):
    with pytest.raises(ValidationError):
        await create_livestock.execute(
            farm,
            create_livestock.CreateLivestockInput(
                category=LivestockCategory.MINI, tag="CHIX", breed="Broiler"
            ),
        )
    with pytest.raises(ValidationError):
        await create_livestock.execute(
            farm,
            create_livestock.CreateLivestockInput(
                category=LivestockCategory.MINI,
                tag="CHIX",
                breed="Broiler",
                quantity=10,
                gender=Gender.MALE,
            ),
        )
    assert farm.livestock == []


@pytest.mark.asyncio
async def test_individual_requires_birth_date_and_no_quantity(farm):
    payload = cow_input()
    payload.birth_date = None
    with pytest.raises(ValidationError):
        await create_livestock.execute(farm, payload)
    payload = cow_input()
    payload.quantity = 2
    with pytest.raises(ValidationError):
        await create_livestock.execute(farm, payload)


@pytest.mark.asyncio
async def test_blank_pen_reference_means_unassigned(farm):
    animal = await create_livestock.execute(farm, cow_input(pen_id=""))
    assert animal.pen_id is None


@pytest.mark.asyncio
async def test_update_switches_variant_and_keeps_history(farm):
    animal = await create_livestock.execute(farm, cow_input())
    await add_activity_log.execute(
        farm,
        animal.id,
        add_activity_log.AddActivityLogInput(
            date=datetime(2024, 1, 2), type=ActivityType.FEEDING, description="Hay"
        ),
    )

    updated = await update_livestock.execute(
        farm,
        animal.id,
        update_livestock.UpdateLivestockInput(
            category=LivestockCategory.MINI, tag="CHIX-9", breed="Layer", quantity=12
        ),
    )

    assert isinstance(updated, BatchLivestock)
    assert updated.id == animal.id
    assert len(updated.activity_logs) == 1
    # naive timestamps are taken as UTC
    assert updated.activity_logs[0].date.tzinfo is not None


@pytest.mark.asyncio
async def test_update_into_incompatible_pen_conflicts(farm):
    pen = await create_pen.execute(
        farm,
        create_pen.CreatePenInput(name="Coop", allowed_category=LivestockCategory.MINI),
    )
    animal = await create_livestock.execute(farm, cow_input())
    with pytest.raises(ConflictError):
        await update_livestock.execute(
            farm, animal.id, update_livestock.UpdateLivestockInput(**asdict(cow_input(pen.id)))
        )


@pytest.mark.asyncio
async def test_missing_livestock_is_not_found(farm):
    with pytest.raises(NotFound):
        await get_livestock.execute(farm, "missing")
    with pytest.raises(NotFound):
        await update_livestock.execute(
            farm, "missing", update_livestock.UpdateLivestockInput(**asdict(cow_input()))
        )
    with pytest.raises(NotFound):
        await add_important_date.execute(
            farm,
            "missing",
            add_important_date.AddImportantDateInput(
                date=datetime(2025, 1, 1, tzinfo=timezone.utc), event_name="Weaning"
            ),
        )


@pytest.mark.asyncio
async def test_blank_log_description_is_rejected(farm):
    animal = await create_livestock.execute(farm, cow_input())
    with pytest.raises(ValidationError):
        await add_activity_log.execute(
            farm,
            animal.id,
            add_activity_log.AddActivityLogInput(
                date=datetime(2024, 1, 2), type=ActivityType.OTHER, description="   "
            ),
        )


@pytest.mark.asyncio
async def test_list_filters_by_pen_category_and_text(farm):
    pen = await create_pen.execute(farm, create_pen.CreatePenInput(name="Pen A"))
    await create_livestock.execute(farm, cow_input(pen.id))
    await create_livestock.execute(
        farm,
        create_livestock.CreateLivestockInput(
            category=LivestockCategory.MICRO, tag="HIVE-1", breed="Italian Bee", quantity=1
        ),
    )

    assert len(await list_livestock.execute(farm)) == 2
    assert [x.tag for x in await list_livestock.execute(farm, pen_id=pen.id)] == ["COW-001"]
    in_micro = await list_livestock.execute(farm, category=LivestockCategory.MICRO)
    assert [x.tag for x in in_micro] == ["HIVE-1"]
    assert [x.tag for x in await list_livestock.execute(farm, search="bee")] == ["HIVE-1"]
