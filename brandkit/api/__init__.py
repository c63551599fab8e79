"""HTTP API router and endpoint organization."""

from fastapi import APIRouter

from brandkit.api.endpoints import (
    auth,
    colors,
    exports,
    members,
    projects,
    typography,
    uploads,
)

router = APIRouter(prefix="/api")

# Include domain-specific routers
router.include_router(auth.router, tags=["Auth"])
router.include_router(projects.router, prefix="/projects", tags=["Projects"])
router.include_router(colors.router, tags=["Colors"])
router.include_router(typography.router, tags=["Typography"])
router.include_router(members.router, tags=["Members"])
router.include_router(exports.router, tags=["Export"])
router.include_router(uploads.router, tags=["Uploads"])
