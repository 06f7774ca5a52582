"""FastAPI application: Conversation View."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from conversation.config import Settings, get_settings
from conversation.routes.conversation import router as conversation_router
from conversation.routes.drafts import router as drafts_router
from conversation.view import ConversationView

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One view, and so one store, per app instance; re-seeded every start
        app.state.view = ConversationView.from_settings(settings)
        logger.info("Conversation seeded with %d messages", len(app.state.view.store.messages))
        yield

    app = FastAPI(title="Conversation View", lifespan=lifespan)

    # API routes
    app.include_router(conversation_router, prefix="/api")
    app.include_router(drafts_router, prefix="/api")
    return app


app = create_app()
