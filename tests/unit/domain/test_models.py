from __future__ import annotations

from datetime import date

import pytest

from stockwise.domain.models.livestock import (
    BatchLivestock,
    Gender,
    IndividualLivestock,
    LivestockCategory,
)
from stockwise.domain.models.pen import Pen


def make_cow(pen_id: str | None = None) -> IndividualLivestock:
    return IndividualLivestock.create(
        category=LivestockCategory.MEGA,
        tag="COW-001",
        breed="Holstein",
        birth_date=date(2022, 6, 15),
        gender=Gender.FEMALE,
        pen_id=pen_id,
    )


def make_chicks(pen_id: str | None = None) -> BatchLivestock:
    return BatchLivestock.create(
        category=LivestockCategory.MINI,
        tag="CHIX-B1-001",
        breed="Broiler",
        quantity=40,
        pen_id=pen_id,
    )


def test_category_variant_split():
    assert LivestockCategory.MEGA.is_individual
    assert LivestockCategory.MID.is_individual
    assert LivestockCategory.MINI.is_batch
    assert LivestockCategory.MICRO.is_batch


def test_individual_rejects_batch_category():
    with pytest.raises(ValueError):
        IndividualLivestock.create(
            category=LivestockCategory.MICRO,
            tag="BEE-1",
            breed="Italian",
            birth_date=date(2024, 1, 1),
        )


def test_batch_rejects_individual_category_and_zero_quantity():
    with pytest.raises(ValueError):
        BatchLivestock.create(
            category=LivestockCategory.MID, tag="X", breed="Merino", quantity=3
        )
    with pytest.raises(ValueError):
        BatchLivestock.create(
            category=LivestockCategory.MINI, tag="X", breed="Broiler", quantity=0
        )


def test_variants_carry_only_their_own_fields():
    cow = make_cow()
    chicks = make_chicks()
    assert cow.gender == Gender.FEMALE
    assert not hasattr(cow, "quantity")
    assert chicks.quantity == 40
    assert not hasattr(chicks, "gender")
    assert chicks.birth_date is None
    assert cow.activity_logs == [] and cow.important_dates == []
    assert cow.display_name == "Holstein COW-001"


def test_restricted_pen_accepts_only_its_category():
    pen = Pen.create("Pen A", allowed_category=LivestockCategory.MEGA)
    assert pen.accepts(LivestockCategory.MEGA, [])
    for other in (LivestockCategory.MID, LivestockCategory.MINI, LivestockCategory.MICRO):
        assert not pen.accepts(other, [])


def test_flexible_pen_checks_occupants():
    pen = Pen.create("Pen B")
    assert pen.is_flexible
    assert pen.accepts(LivestockCategory.MINI, [])
    occupants = [make_cow(pen.id)]
    assert pen.accepts(LivestockCategory.MEGA, occupants)
    assert not pen.accepts(LivestockCategory.MINI, occupants)
