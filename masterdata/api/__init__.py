"""API router aggregator."""

from fastapi import APIRouter

from masterdata.api import (
    integrations,
    item_categories,
    list_integration_mapping,
    lists,
    master_data,
)

api_router = APIRouter()

api_router.include_router(master_data.router, prefix="/master-data", tags=["Master Data"])
api_router.include_router(lists.router, prefix="/lists", tags=["Lists"])
api_router.include_router(item_categories.router, prefix="/item-categories", tags=["Item Categories"])
api_router.include_router(integrations.router, prefix="/integration", tags=["Integrations"])
api_router.include_router(
    list_integration_mapping.router,
    prefix="/listintegrationmapping",
    tags=["List Integration Mapping"],
)
