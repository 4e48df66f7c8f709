"""Welcome route — static greeting at the API root."""

from fastapi import APIRouter, Depends

from app.config import Settings, get_settings
from app.schemas.system import WelcomeMessage

router = APIRouter(prefix="/api", tags=["welcome"])


@router.get("", response_model=WelcomeMessage)
async def welcome(settings: Settings = Depends(get_settings)):
    """Return the configured welcome message."""
    return WelcomeMessage(message=settings.welcome_message)
