"""
FastAPI Application Entry Point.

This is the main entry point for the emotion analysis API.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.core.config import settings
from apps.core.log import configure_logging
from apps.emotion.router import router as emotion_router

configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="Emotion Analysis API",
    description="Scores survey response text for emotion and sentiment and stores the result.",
    version="0.1.0",
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include Routers
app.include_router(emotion_router)


@app.get("/health")
async def health():
    """Global health check."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
