#!/usr/bin/env python3
"""
Development seed data script.

Creates the default master data:
- the lists users start with
- the integrations the platform ships providers for
- a mapping of each list onto the integrations that feed it

Records that already exist are left untouched.

Usage:
    python scripts/seed.py
"""

import asyncio
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from masterdata.database import engine
from masterdata.schemas.integration import IntegrationCreate, IntegrationFilter
from masterdata.schemas.list import ListCreate, ListFilter
from masterdata.schemas.list_integration_mapping import ListIntegrationMappingCreate
from masterdata.services import (
    get_integration_service,
    get_list_integration_mapping_service,
    get_list_service,
)

DEFAULT_INTEGRATIONS = [
    {"name": "Spotify", "label": "Spotify", "popularity": 90},
    {"name": "Apple Music", "label": "Apple Music", "popularity": 85},
    {"name": "Goodreads", "label": "Goodreads", "popularity": 70},
    {"name": "Strava", "label": "Strava", "popularity": 65},
    {"name": "Apple Health", "label": "Apple Health", "popularity": 60},
    {"name": "Location Services", "label": "Places", "popularity": 55},
    {"name": "Contact List", "label": "Contacts", "popularity": 50},
    {"name": "Email Scraper", "label": "Email", "popularity": 40},
    {"name": "Plaid", "label": "Banking", "popularity": 30},
]

DEFAULT_LISTS = {
    "Music": ["Spotify", "Apple Music"],
    "Books": ["Goodreads"],
    "Activities": ["Strava", "Apple Health"],
    "Places": ["Location Services"],
    "Friends": ["Contact List"],
    "Subscriptions": ["Email Scraper", "Plaid"],
}


async def _find_id(service, filters, id_key: str) -> str | None:
    result = await service.find_all(filters)
    if result.status != 200 or not result.data.data:
        return None
    return getattr(result.data.data[0], id_key)


async def seed():
    integrations = get_integration_service()
    lists = get_list_service()
    mappings = get_list_integration_mapping_service()

    integration_ids = {}
    for data in DEFAULT_INTEGRATIONS:
        result = await integrations.create(IntegrationCreate(**data))
        print(f"  Integration {data['name']}: {result.status}")
        integration_ids[data["name"]] = await _find_id(
            integrations, IntegrationFilter(name=data["name"]), "integration_id"
        )

    for list_name, integration_names in DEFAULT_LISTS.items():
        result = await lists.create(ListCreate(name=list_name))
        print(f"  List {list_name}: {result.status}")
        list_id = await _find_id(lists, ListFilter(name=list_name), "list_id")
        if list_id is None:
            continue
        for integration_name in integration_names:
            integration_id = integration_ids.get(integration_name)
            if integration_id is None:
                continue
            result = await mappings.create(
                ListIntegrationMappingCreate(list_id=list_id, integration_id=integration_id)
            )
            print(f"    {list_name} <- {integration_name}: {result.status}")


async def main():
    print("Seeding master data...")
    try:
        await seed()
    finally:
        await engine.dispose()
    print("Done.")


if __name__ == "__main__":
    asyncio.run(main())
