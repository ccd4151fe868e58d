from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        # Page routes serve HTML to guests and are left out of the schema
        api_routes = [route for route in app.routes if getattr(route, "include_in_schema", False)]
        app.openapi_schema = get_openapi(
            title="Guest Portal API",
            version="0.1.0",
            summary="Captive portal that authorizes guest devices on a UniFi controller",
            routes=api_routes,
        )
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Invalid JSON body", "type": "validation_error"},
                {"message": "Page '/missing.js' not found", "type": "not_found"},
            ]
        }
    }
