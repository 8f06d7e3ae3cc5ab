from fastapi import APIRouter

from listfresh.schemas import HealthResponse
from listfresh.services.utils import now_utc

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=now_utc())
