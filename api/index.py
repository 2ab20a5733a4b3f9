# api/index.py
# Serverless function entrypoint. The platform's ASGI runtime picks up `app`.
from prompt_relay.serverless import app

__all__ = ["app"]
