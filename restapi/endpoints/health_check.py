"""Readiness endpoint reporting whether the credential store answers."""

from fastapi import APIRouter, Request, Response, status

from components.core import schemas
from components.core.database import DatabaseManager

SERVICE_NAME = "KodBank API"

router = APIRouter(prefix="/health_check", tags=["services"])


@router.get(
    "/",
    response_model=schemas.HealthCheck,
    responses={503: {"model": schemas.HealthCheck, "description": "Database unreachable"}},
)
async def health_check(request: Request, response: Response) -> schemas.HealthCheck:
    db_manager: DatabaseManager = request.app.state.db_manager
    if await db_manager.ping():
        return schemas.HealthCheck(service_name=SERVICE_NAME, status="healthy", database="ok")

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return schemas.HealthCheck(service_name=SERVICE_NAME, status="unhealthy", database="unreachable")
