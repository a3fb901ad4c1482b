from __future__ import annotations

from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from treino.core.errors import unhandled_error_handler

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "Authorization, X-CSRF-Token, X-Requested-With, Accept, Accept-Version, "
        "Content-Length, Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


class OpenCORSMiddleware(BaseHTTPMiddleware):
    """CORS aberto em todas as respostas; qualquer OPTIONS responde 200 sem corpo."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=CORS_HEADERS)

        try:
            response = await call_next(request)
        except Exception as exc:
            # o handler de Exception do app roda fora deste middleware;
            # sem isso o 500 sairia sem os cabeçalhos CORS
            response = await unhandled_error_handler(request, exc)
        response.headers.update(CORS_HEADERS)
        return response
