"""API v1 router aggregator.

All v1 endpoint routers are included here.
"""

from fastapi import APIRouter

from appdocs.api.v1 import applications

router = APIRouter()

router.include_router(
    applications.router, prefix="/applications", tags=["applications"]
)
