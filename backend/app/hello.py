"""
Hello API - FastAPI application without a database.

Answers every GET / with a fixed payload and ignores DATABASE_URL.
"""
from fastapi import FastAPI

app = FastAPI(
    title="Hello API",
    description="Minimal service used to check the container setup.",
    version="0.1.0",
)


@app.get("/", tags=["Root"])
async def root():
    """Say hello."""
    return {"message": "ok"}
