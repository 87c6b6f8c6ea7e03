"""Health check endpoints."""

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, version: str = "", environment: str = "") -> None:
        self._version = version
        self._environment = environment

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health - liveness."""
        resp.media = {
            "status": "ok",
            "version": self._version,
            "environment": self._environment,
        }
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /api/health/ready - readiness (no external checks, state is in memory)."""
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
