from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from musicopedia.common.settings import get_settings
from musicopedia.services.api.deps import require_admin_token
from musicopedia.services.api.routers import (
    group_memberships,
    groups,
    health,
    members,
    performers,
    solos,
    subunits,
)

cfg = get_settings()
dev = cfg.app_env.lower() == "development"


def create_app() -> FastAPI:
    app = FastAPI(
        title="Musicopedia API",
        version=cfg.app_version,
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    # Routers; mutating catalog calls pass through the admin token guard
    guarded = [Depends(require_admin_token)]
    app.include_router(performers.router, dependencies=guarded)
    app.include_router(solos.router, dependencies=guarded)
    app.include_router(groups.router, dependencies=guarded)
    app.include_router(members.router, dependencies=guarded)
    app.include_router(subunits.router, dependencies=guarded)
    app.include_router(group_memberships.router, dependencies=guarded)
    app.include_router(health.router)
    return app


app = create_app()
