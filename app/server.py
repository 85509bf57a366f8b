"""uvicorn server that announces the launch only once the socket is listening."""

import logging
from typing import Optional

import uvicorn

from app.core.config import get_settings
from app.core.constants import shutdown_message, startup_message

logger = logging.getLogger(__name__)


class AppServer(uvicorn.Server):
    """
    uvicorn.Server with startup/shutdown confirmation lines.

    uvicorn runs the app lifespan before binding, so the success line is
    logged here, after the bind. A failed bind exits inside super().startup()
    and never reaches it.
    """

    def __init__(self, config: uvicorn.Config) -> None:
        super().__init__(config)
        self.announced = False

    async def startup(self, sockets: Optional[list] = None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        logger.info(startup_message(get_settings().APP_NAME))
        self.announced = True

    async def shutdown(self, sockets: Optional[list] = None) -> None:
        if self.announced:
            logger.info(shutdown_message(get_settings().APP_NAME))
        await super().shutdown(sockets=sockets)
