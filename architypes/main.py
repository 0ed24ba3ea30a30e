# main.py
"""
Point d'entrée de l'API Architypes.
Enregistre tous les modules via leurs routers.

Architecture : modules verticaux (router → service → repository)
+ engine transversal pur (scoring, codec, signature).
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from architypes.core.config import settings

from architypes.modules.assessment.router import router as assessment_router
from architypes.modules.payment.router    import router as payment_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(assessment_router)
app.include_router(payment_router)


@app.get("/health")
async def health():
    return {"status": "ok", "version": "1.0.0"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "architypes.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
