# handler.py
"""AWS Lambda entry point for the checkout API.

Mangum translates API Gateway (REST or HTTP API) events into ASGI
requests for the FastAPI app and converts the response back into
the ``{"statusCode", "headers", "body"}`` shape Lambda expects.
"""

from mangum import Mangum
from app.main import app

# No startup or shutdown work, so ASGI lifespan is off
handler = Mangum(app, lifespan="off")
