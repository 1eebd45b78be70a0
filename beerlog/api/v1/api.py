from fastapi import APIRouter

from beerlog.api.v1.endpoints import breweries, dev, health, users, visits

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(dev.router, prefix="/dev", tags=["dev"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(breweries.router, prefix="/breweries", tags=["breweries"])
api_router.include_router(visits.router, tags=["visits"])
