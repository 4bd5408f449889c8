# scripts/demo_lifecycle.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
import logging

from ecostay.application.certification_service import CertificationService
from ecostay.config.logging import configure_logging
from ecostay.config.settings import get_settings
from ecostay.core.height import ManualHeightSource
from ecostay.infrastructure.state_store_factory import create_state_store

OWNER = "demo-hotel-owner"
AUDITOR = "demo-auditor"


async def demo():
    settings = get_settings()
    configure_logging(settings.log_level)
    height = ManualHeightSource(1)
    service = CertificationService(
        store=await create_state_store(settings),
        height_source=height,
        registry_owner=settings.registry_owner,
        validity_blocks=settings.certification_validity_blocks,
        logger=logging.getLogger("ecostay.demo"),
    )

    accommodation_id = await service.register(
        OWNER, name="Demo Eco Lodge", location="Porto", category="guesthouse", capacity=12
    )
    await service.authorize_auditor(
        settings.registry_owner, auditor=AUDITOR, specialization="energy"
    )
    score = await service.update_standards(
        OWNER,
        accommodation_id=accommodation_id,
        energy_efficiency=80,
        water_conservation=80,
        waste_management=80,
        renewable_energy_percent=20,
        carbon_footprint=2,
        local_sourcing_percent=50,
    )
    print("Sustainability score:", score)

    height.advance(10)
    audit = await service.conduct_audit(
        AUDITOR,
        accommodation_id=accommodation_id,
        audit_type="annual",
        energy_score=70,
        water_score=70,
        waste_score=70,
        compliance_issues=1,
        recommendations="Install low-flow fixtures",
    )
    print("Audit:", audit)

    height.advance(10)
    outcome = await service.issue_certification(
        AUDITOR, accommodation_id=accommodation_id, audit_id=audit.audit_id
    )
    print("Certification:", outcome)
    print("Valid now:", await service.is_certification_valid(accommodation_id))

    height.set(outcome.expires_at)
    print("Valid at expiry:", await service.is_certification_valid(accommodation_id))
    await service.close()

asyncio.run(demo())
