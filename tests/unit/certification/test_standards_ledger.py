"""Standards ledger: full-record replacement, score recompute, authorization and range gates."""

import pytest

from ecostay.domain.exceptions import (
    AccommodationNotFoundError,
    InvalidInputError,
    NotAuthorizedError,
)

AUDITOR = "auditor-1"
STRANGER = "stranger"


async def test_owner_update_returns_truncated_mean(ledger):
    accommodation_id = await ledger.register()
    score = await ledger.update(accommodation_id, 80, 80, 80, 20, 2, 50)
    assert score == 65
    standards = await ledger.standards.get_standards(accommodation_id)
    assert standards.overall_sustainability_score == 65
    assert standards.carbon_footprint == 2
    assert standards.last_updated == 20


async def test_update_is_idempotent_except_timestamp(ledger):
    accommodation_id = await ledger.register()
    await ledger.update(accommodation_id, 90, 85, 70, 60, 3, 40, height=20)
    first = await ledger.standards.get_standards(accommodation_id)
    await ledger.update(accommodation_id, 90, 85, 70, 60, 3, 40, height=25)
    second = await ledger.standards.get_standards(accommodation_id)
    assert first.last_updated == 20
    assert second.last_updated == 25
    assert {**vars(first), "last_updated": 0} == {**vars(second), "last_updated": 0}


async def test_authorized_auditor_may_update(ledger):
    accommodation_id = await ledger.register()
    await ledger.authorize()
    assert await ledger.update(accommodation_id, 100, 100, 100, 100, 0, 100, principal=AUDITOR) == 100


async def test_stranger_cannot_update(ledger):
    accommodation_id = await ledger.register()
    with pytest.raises(NotAuthorizedError):
        await ledger.update(accommodation_id, 80, 80, 80, 20, 2, 50, principal=STRANGER)
    assert (await ledger.standards.get_standards(accommodation_id)).overall_sustainability_score == 0


async def test_missing_accommodation(ledger):
    with pytest.raises(AccommodationNotFoundError):
        await ledger.update(5, 80, 80, 80, 20, 2, 50)


@pytest.mark.parametrize(
    "metrics",
    [
        (101, 80, 80, 20, 2, 50),
        (80, 80, 80, 20, 11, 50),
        (80, 80, 80, 20, 2, 101),
    ],
)
async def test_out_of_range_metric_leaves_record_untouched(ledger, metrics):
    accommodation_id = await ledger.register()
    await ledger.update(accommodation_id, 50, 50, 50, 50, 5, 50)
    with pytest.raises(InvalidInputError):
        await ledger.update(accommodation_id, *metrics)
    standards = await ledger.standards.get_standards(accommodation_id)
    assert standards.energy_efficiency == 50
    assert standards.overall_sustainability_score == 50


async def test_inactive_accommodation_rejects_update(ledger):
    accommodation_id = await ledger.register()
    await ledger.suspend(accommodation_id)
    with pytest.raises(InvalidInputError) as exc_info:
        await ledger.update(accommodation_id, 80, 80, 80, 20, 2, 50)
    assert "inactive" in exc_info.value.message
