import logging

from fastapi import FastAPI
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .controllers import checkout

settings = get_settings()

# Lambda installs its own root handler; only configure when running locally
if not logging.getLogger().handlers:
    logging.basicConfig(level=settings.log_level)
else:
    logging.getLogger().setLevel(settings.log_level)

app = FastAPI(title="Checkout API")


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request, exc):
    """Render 405 as plain text; other HTTP errors keep the default JSON body."""
    if exc.status_code == 405:
        return PlainTextResponse("Method Not Allowed", status_code=405, headers=exc.headers)
    return await http_exception_handler(request, exc)


# Include routers
app.include_router(checkout.router, prefix="/api", tags=["checkout"])
