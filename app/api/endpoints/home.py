"""Root endpoint confirming the backend is up."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.core.constants import HOME_MESSAGE

router = APIRouter()


@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse, summary="Backend status")
async def home() -> str:
    return HOME_MESSAGE
