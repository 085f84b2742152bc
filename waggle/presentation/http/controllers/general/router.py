"""General Router."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Health check")
async def health() -> dict:
    return {"status": "healthy", "service": "waggle-api"}
