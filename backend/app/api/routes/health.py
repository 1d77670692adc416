from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse

router = APIRouter()

SERVICE_NAME = "website-builder-backend"


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Website Builder Backend API is running!"


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint for load balancer.

    Returns 503 during graceful shutdown so the load balancer stops routing traffic.
    """
    if getattr(request.app.state, "shutting_down", False):
        return JSONResponse(
            status_code=503,
            content={"status": "shutting_down", "service": SERVICE_NAME},
        )
    return {"status": "healthy", "service": SERVICE_NAME}
