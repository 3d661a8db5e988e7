from fastapi import APIRouter

from mock_api.domain.schemas import HealthOut

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="ok")
