"""Hello endpoint for the Event Management API."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.core.constants import HELLO_MESSAGE

router = APIRouter()


@router.api_route("/hello", methods=["GET", "HEAD"], response_class=PlainTextResponse, summary="Hello")
async def hello() -> str:
    """Return a fixed greeting."""
    return HELLO_MESSAGE
