from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health(request: Request):
    """
    Liveness check: the API is up and answering.
    """
    settings = request.app.state.settings
    return {
        "status": "ok",
        "service": settings.PROJECT_NAME,
        "version": settings.APP_VERSION,
    }
