# scripts/check_store.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
import uuid

from ecostay.config.settings import get_settings
from ecostay.infrastructure.state_store_factory import create_state_store


async def check():
    settings = get_settings()
    store = await create_state_store(settings)
    try:
        print("Backend:", settings.storage_backend)
        print("Ping:", await store.ping())

        check_key = f"store-check:{uuid.uuid4()}"
        await store.set_many({check_key: "ok"})
        print("Read back:", await store.get(check_key))
    finally:
        await store.close()

asyncio.run(check())
