#!/usr/bin/env python3
"""Conversation View: entry point."""

import uvicorn

from conversation.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "conversation.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
