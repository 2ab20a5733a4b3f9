"""Serverless variant: the analyze route is the function's root path.

Platforms that route one URL to one function (Vercel's Python runtime and
similar) import ``app`` from here; no static files are served.
"""
from __future__ import annotations

from prompt_relay.main import create_app

app = create_app(route_path="/")
