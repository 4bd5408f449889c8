"""Audit log: auditor gate, immutable pass/fail, sequential IDs, auditor counter."""

import dataclasses

import pytest

from ecostay.domain.exceptions import (
    AccommodationNotFoundError,
    InvalidInputError,
    NotAuthorizedError,
)

AUDITOR = "auditor-1"
OWNER = "hotel-owner"


async def test_conduct_audit_records_outcome_and_bumps_counter(ledger):
    accommodation_id = await ledger.register()
    await ledger.authorize()
    outcome = await ledger.audit(accommodation_id, 70, 70, 70, 1)
    assert outcome.audit_id == 1
    assert outcome.passed is True
    assert outcome.score == 70

    record = await ledger.audits.get_audit(1)
    assert record.accommodation_id == accommodation_id
    assert record.auditor == AUDITOR
    assert record.audited_at == 30
    assert record.is_passed is True
    assert (await ledger.registry.get_auditor(AUDITOR)).certification_count == 1


@pytest.mark.parametrize(
    "scores, issues, passed",
    [
        ((60, 60, 60), 3, True),
        ((60, 60, 59), 3, False),
        ((60, 60, 60), 4, False),
    ],
)
async def test_pass_boundaries_are_persisted(ledger, scores, issues, passed):
    accommodation_id = await ledger.register()
    await ledger.authorize()
    outcome = await ledger.audit(accommodation_id, *scores, issues)
    assert outcome.passed is passed
    assert (await ledger.audits.get_audit(outcome.audit_id)).is_passed is passed


async def test_audit_records_are_immutable(ledger):
    accommodation_id = await ledger.register()
    await ledger.authorize()
    await ledger.audit(accommodation_id)
    record = await ledger.audits.get_audit(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.is_passed = False  # type: ignore[misc]


async def test_owner_who_is_not_auditor_cannot_audit(ledger):
    accommodation_id = await ledger.register()
    with pytest.raises(NotAuthorizedError):
        await ledger.audit(accommodation_id, auditor=OWNER)
    assert await ledger.audits.next_audit_id() == 1


async def test_missing_accommodation(ledger):
    await ledger.authorize()
    with pytest.raises(AccommodationNotFoundError):
        await ledger.audit(9)


async def test_sub_score_over_100_rejected_without_consuming_id(ledger):
    accommodation_id = await ledger.register()
    await ledger.authorize()
    with pytest.raises(InvalidInputError):
        await ledger.audit(accommodation_id, 101, 70, 70)
    assert await ledger.audits.next_audit_id() == 1
    assert (await ledger.registry.get_auditor(AUDITOR)).certification_count == 0


async def test_inactive_accommodation_rejects_audit(ledger):
    accommodation_id = await ledger.register()
    await ledger.authorize()
    await ledger.suspend(accommodation_id)
    with pytest.raises(InvalidInputError):
        await ledger.audit(accommodation_id)


async def test_audit_ids_increase_by_one(ledger):
    accommodation_id = await ledger.register()
    await ledger.authorize()
    ids = [(await ledger.audit(accommodation_id)).audit_id for _ in range(3)]
    assert ids == [1, 2, 3]
    assert await ledger.audits.next_audit_id() == 4
