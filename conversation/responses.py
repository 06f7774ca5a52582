"""JSON response helper shared by the routers."""

import json

from fastapi.responses import Response
from pydantic import BaseModel


def safe_json_response(data):
    """Return a JSON response that safely handles surrogate characters."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    body = json.dumps(data, ensure_ascii=False, default=str)
    # Pasted rich text can carry lone surrogates
    body_bytes = body.encode("utf-8", errors="replace")
    return Response(content=body_bytes, media_type="application/json")
