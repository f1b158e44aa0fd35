# main.py
"""
Point d'entrée de l'API YBoard.
Enregistre tous les modules via leurs routers.

Architecture : modules verticaux (router / service / repository)
+ engine transversal sans accès DB.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from yboard.core.config import settings
from yboard.core.logging import setup_logging

from yboard.modules.auth.router          import router as auth_router
from yboard.modules.users.router         import router as users_router
from yboard.modules.teachers.router      import router as teachers_router
from yboard.modules.promos.router        import router as promos_router
from yboard.modules.courses.router       import router as modules_router
from yboard.modules.promo_modules.router import router as promo_modules_router
from yboard.modules.relations.router     import router as relations_router
from yboard.modules.overview.router      import router as overview_router
from yboard.modules.cv.router            import router as cv_router

VERSION = "1.0.0"

setup_logging(settings)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=VERSION,
    docs_url="/docs" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(teachers_router)
app.include_router(promos_router)
app.include_router(modules_router)
app.include_router(promo_modules_router)
app.include_router(relations_router)
app.include_router(overview_router)
app.include_router(cv_router)


@app.get("/health")
async def health():
    return {"status": "ok", "version": VERSION}
