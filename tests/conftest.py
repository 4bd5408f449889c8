"""Shared fixtures: settings environment, in-memory service with a manually driven height."""

import logging
import os

# Settings are read at import time by ecostay.main; set required values first.
os.environ.setdefault("REGISTRY_OWNER", "registry-owner")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from ecostay.application.certification_service import CertificationService
from ecostay.core.height import ManualHeightSource
from ecostay.infrastructure.memory.state_store import InMemoryStateStore

REGISTRY_OWNER = "registry-owner"
OWNER = "hotel-owner"
AUDITOR = "auditor-1"
VALIDITY_BLOCKS = 52560


@pytest.fixture
def store():
    return InMemoryStateStore()


@pytest.fixture
def height():
    return ManualHeightSource(100)


@pytest.fixture
def service(store, height):
    return CertificationService(
        store=store,
        height_source=height,
        registry_owner=REGISTRY_OWNER,
        validity_blocks=VALIDITY_BLOCKS,
        logger=logging.getLogger("tests.certification"),
    )
