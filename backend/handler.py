"""
AWS Lambda entry point.

Mangum translates API Gateway (HTTP API v2) events into ASGI requests for
the FastAPI app and the responses back into gateway results.
"""

from mangum import Mangum

from api import app

# Lifespan events are not delivered under Lambda
handler = Mangum(app, lifespan="off")
