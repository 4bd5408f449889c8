"""Scoring rules: aggregate score formula, audit pass gate boundaries, level ladder boundaries."""

import pytest

from ecostay.domain.models.certification import Certification, CertificationLevel
from ecostay.domain.scoring import (
    audit_passed,
    audit_score,
    carbon_term,
    level_for_score,
    sustainability_score,
    truncated_mean,
)


def test_carbon_term_inverts_rating():
    assert carbon_term(0) == 100
    assert carbon_term(2) == 80
    assert carbon_term(10) == 0


def test_sustainability_score_is_truncated_mean_of_six_terms():
    # (80 + 80 + 80 + 20 + 80 + 50) / 6 = 65
    assert sustainability_score(80, 80, 80, 20, 2, 50) == 65


def test_sustainability_score_truncates_fraction():
    # (100 + 100 + 100 + 100 + 100 + 99) / 6 = 99.83
    assert sustainability_score(100, 100, 100, 100, 0, 99) == 99


def test_seeded_metrics_score_zero():
    assert sustainability_score(0, 0, 0, 0, 10, 0) == 0


def test_truncated_mean_rounds_toward_zero():
    assert truncated_mean(1, 2) == 1
    assert truncated_mean(-1, -2) == -1
    assert truncated_mean() == 0


@pytest.mark.parametrize(
    "scores, issues, expected",
    [
        ((60, 60, 60), 0, True),
        ((59, 60, 60), 0, False),  # mean 59.67
        ((59, 59, 59), 0, False),
        ((70, 70, 70), 3, True),
        ((70, 70, 70), 4, False),
        ((100, 100, 100), 4, False),
        ((0, 90, 90), 0, True),  # mean 60
    ],
)
def test_audit_pass_boundaries(scores, issues, expected):
    assert audit_passed(*scores, issues) is expected


def test_audit_score_is_truncated_mean():
    assert audit_score(70, 70, 70) == 70
    assert audit_score(90, 85, 80) == 85
    assert audit_score(60, 60, 61) == 60


@pytest.mark.parametrize(
    "score, level",
    [
        (100, CertificationLevel.PLATINUM),
        (90, CertificationLevel.PLATINUM),
        (89, CertificationLevel.GOLD),
        (80, CertificationLevel.GOLD),
        (79, CertificationLevel.SILVER),
        (70, CertificationLevel.SILVER),
        (69, CertificationLevel.BRONZE),
        (65, CertificationLevel.BRONZE),
        (0, CertificationLevel.BRONZE),
    ],
)
def test_level_thresholds_are_exact(score, level):
    assert level_for_score(score) == level


def test_certification_is_current_only_before_expiry():
    cert = Certification(
        accommodation_id=1,
        level=CertificationLevel.GOLD,
        score=85,
        issued_at=100,
        expires_at=200,
        is_valid=True,
        certified_by="auditor-1",
    )
    assert cert.is_current(199) is True
    assert cert.is_current(200) is False
    assert cert.is_current(500) is False


def test_certification_not_current_when_marked_invalid():
    cert = Certification(
        accommodation_id=1,
        level=CertificationLevel.GOLD,
        score=85,
        issued_at=100,
        expires_at=200,
        is_valid=False,
        certified_by="auditor-1",
    )
    assert cert.is_current(150) is False
