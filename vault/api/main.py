from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vault.api.routes.videos import router as videos_router
from vault.config import settings

app = FastAPI(
    title="Video Vault API",
    description="Tracks watched videos and summarizes their transcripts",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(videos_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
