"""
Fixtures compartilhadas para testes de integração
Servidor Open-Meteo local (aiohttp TestServer) com resposta configurável
"""
import asyncio
import json
from typing import Any, Dict, List, Optional

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager


class FakeOpenMeteo:
    """
    Estado do servidor falso

    Atributos configuráveis pelo teste:
        payload: documento JSON retornado (ou None para usar `body`)
        body: corpo bruto (bytes)
        status: status HTTP
        delay: atraso antes de responder (segundos)
    """

    def __init__(self):
        self.payload: Optional[Dict[str, Any]] = None
        self.body: bytes = b''
        self.status: int = 200
        self.delay: float = 0.0
        self.requests: List[Dict[str, Any]] = []

    async def handle_forecast(self, request: web.Request) -> web.Response:
        self.requests.append({
            'query': dict(request.query),
            'headers': dict(request.headers)
        })
        if self.delay:
            await asyncio.sleep(self.delay)

        body = json.dumps(self.payload).encode('utf-8') if self.payload is not None else self.body
        return web.Response(body=body, status=self.status, content_type='application/json')

    async def handle_ip_lookup(self, request: web.Request) -> web.Response:
        return web.json_response({'status': 'success', 'lat': 52.52, 'lon': 13.405})


@pytest_asyncio.fixture
async def fake_openmeteo():
    """Servidor local com /v1/forecast e /json (geolocalização por IP)"""
    state = FakeOpenMeteo()
    app = web.Application()
    app.router.add_get('/v1/forecast', state.handle_forecast)
    app.router.add_get('/json', state.handle_ip_lookup)

    server = TestServer(app)
    await server.start_server()
    state.forecast_url = str(server.make_url('/v1/forecast'))
    state.ip_lookup_url = str(server.make_url('/json'))
    try:
        yield state
    finally:
        await server.close()


@pytest_asyncio.fixture
async def session_manager():
    """Gerenciador de sessão dedicado, fechado ao final do teste"""
    manager = AiohttpSessionManager()
    try:
        yield manager
    finally:
        await manager.cleanup()
