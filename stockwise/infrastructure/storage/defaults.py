from __future__ import annotations

from datetime import date, datetime, timezone

from stockwise.domain.models.activity_log import ActivityLog, ActivityType
from stockwise.domain.models.important_date import ImportantDate
from stockwise.domain.models.livestock import (
    Gender,
    IndividualLivestock,
    Livestock,
    LivestockCategory,
)
from stockwise.domain.models.pen import Pen


def _utc(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def default_pens() -> list[Pen]:
    return [
        # Flexible: the seeded occupants already keep other categories out
        Pen(id="pen1", name="Pen A", description="Main pasture"),
        Pen(id="pen2", name="Pen B", description="Holding pen"),
    ]


def default_livestock() -> list[Livestock]:
    return [
        IndividualLivestock(
            id="lvstk1",
            category=LivestockCategory.MEGA,
            tag="COW-001",
            breed="Holstein",
            birth_date=date(2022, 6, 15),
            gender=Gender.FEMALE,
            pen_id="pen1",
            health_records="Generally healthy. Vaccinated for BVD.",
            image_url="https://placehold.co/100x100.png",
            image_hint="cow farm",
            activity_logs=[
                ActivityLog(
                    id="act2",
                    date=_utc(2023, 12, 5),
                    type=ActivityType.FEEDING,
                    description="Standard feed mix.",
                ),
                ActivityLog(
                    id="act1",
                    date=_utc(2023, 11, 1),
                    type=ActivityType.VACCINATION,
                    description="Annual booster shots.",
                ),
            ],
            important_dates=[
                ImportantDate(id="impD1", date=_utc(2024, 3, 1), event_name="Expected Calving"),
            ],
        ),
        IndividualLivestock(
            id="lvstk2",
            category=LivestockCategory.MID,
            tag="SHEEP-003",
            breed="Merino",
            birth_date=date(2023, 2, 20),
            gender=Gender.MALE,
            pen_id="pen2",
            health_records="Dewormed on schedule.",
            image_url="https://placehold.co/100x100.png",
            image_hint="sheep field",
            activity_logs=[
                ActivityLog(
                    id="act3",
                    date=_utc(2023, 10, 15),
                    type=ActivityType.MEDICATION,
                    description="Deworming.",
                ),
            ],
            important_dates=[
                ImportantDate(id="impD2", date=_utc(2024, 5, 10), event_name="Shearing Season"),
            ],
        ),
    ]
