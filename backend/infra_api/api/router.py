from fastapi import APIRouter
from infra_api.api.routers import projects, imports, companies, assignments, stats

api_router = APIRouter(prefix="/api")
api_router.include_router(imports.router, prefix="/projects", tags=["imports"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(companies.router, prefix="/companies", tags=["companies"])
api_router.include_router(assignments.router, prefix="/assignments", tags=["assignments"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
