"""
Aiohttp Session Manager - Pool HTTP compartilhado entre as buscas
Uma ClientSession por event loop; buscas concorrentes dividem o mesmo pool
"""
import asyncio
from dataclasses import dataclass
from typing import Optional

import aiohttp

from domain.constants import API
from shared.config import settings
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def build_client_timeout(request_timeout: float, resource_timeout: float) -> aiohttp.ClientTimeout:
    """
    Traduz os dois timeouts da busca para aiohttp

    - request_timeout: conexão e intervalo máximo entre leituras do socket
    - resource_timeout: limite da transferência completa
    """
    return aiohttp.ClientTimeout(
        total=resource_timeout,
        sock_connect=request_timeout,
        sock_read=request_timeout
    )


@dataclass(frozen=True)
class SessionPoolConfig:
    """Parâmetros do pool de conexões e timeouts padrão da sessão"""
    request_timeout: float = API.REQUEST_TIMEOUT
    resource_timeout: float = API.RESOURCE_TIMEOUT
    limit: int = API.HTTP_CONNECTION_LIMIT
    limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST
    ttl_dns_cache: int = API.DNS_CACHE_TTL

    @classmethod
    def from_settings(cls) -> 'SessionPoolConfig':
        return cls(
            request_timeout=settings.REQUEST_TIMEOUT_SECONDS,
            resource_timeout=settings.RESOURCE_TIMEOUT_SECONDS,
            limit=settings.HTTP_CONNECTION_LIMIT,
            limit_per_host=settings.HTTP_CONNECTION_LIMIT_PER_HOST
        )


class AiohttpSessionManager:
    """
    Dono da ClientSession usada pelo cliente Open-Meteo e pela
    geolocalização por IP

    Características:
    - A sessão fica presa ao event loop em que foi criada; um loop novo
      (ex: cada asyncio.run da CLI) ganha uma sessão nova
    - Sessão fechada é recriada na próxima chamada
    - Só o pool é compartilhado: nenhuma busca guarda estado na sessão

    Uso:
        manager = get_aiohttp_session_manager()
        session = await manager.get_session()
        async with session.get(url, timeout=build_client_timeout(15, 60)) as response:
            body = await response.read()
        await manager.cleanup()
    """

    _instance: Optional['AiohttpSessionManager'] = None

    def __init__(self, config: Optional[SessionPoolConfig] = None):
        self.config = config or SessionPoolConfig()
        self._session: Optional[aiohttp.ClientSession] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @classmethod
    def get_instance(cls, config: Optional[SessionPoolConfig] = None) -> 'AiohttpSessionManager':
        """Singleton; `config` só vale na primeira criação"""
        if cls._instance is None:
            cls._instance = cls(config)
            logger.debug("Session manager created", limit=cls._instance.config.limit)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Descarta o singleton (testes). Chamar cleanup() antes, se houver sessão aberta."""
        cls._instance = None

    def _owns_live_session(self, loop: asyncio.AbstractEventLoop) -> bool:
        return self._session is not None and not self._session.closed and self._loop is loop

    async def get_session(self) -> aiohttp.ClientSession:
        """Sessão do event loop corrente (criada na primeira chamada)"""
        loop = asyncio.get_running_loop()
        if self._owns_live_session(loop):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info("Event loop changed, replacing HTTP session")
            await self.cleanup()

        self._session = aiohttp.ClientSession(
            timeout=build_client_timeout(self.config.request_timeout, self.config.resource_timeout),
            connector=aiohttp.TCPConnector(
                limit=self.config.limit,
                limit_per_host=self.config.limit_per_host,
                ttl_dns_cache=self.config.ttl_dns_cache
            )
        )
        self._loop = loop
        logger.debug(
            "HTTP session opened",
            limit=self.config.limit,
            limit_per_host=self.config.limit_per_host
        )
        return self._session

    async def cleanup(self) -> None:
        """Fecha a sessão e libera o pool (chamar ao encerrar o loop)"""
        session, self._session, self._loop = self._session, None, None
        if session is None or session.closed:
            return
        try:
            await session.close()
        except (aiohttp.ClientError, OSError, RuntimeError) as e:
            logger.warning("Error closing HTTP session", error=str(e))


def get_aiohttp_session_manager() -> AiohttpSessionManager:
    """Factory do singleton, com pool e timeouts lidos do ambiente"""
    return AiohttpSessionManager.get_instance(SessionPoolConfig.from_settings())
