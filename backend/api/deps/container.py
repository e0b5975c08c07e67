"""
Service container.

Long-lived service handles built once per process, lazily on first use, so
a missing credential only breaks the feature that needs it. The FastAPI
lifespan stores one container on app.state.services.

Dependencies: backend.configs, backend.boundary, backend.core.agentic_system
System role: Composition root for service handles
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from backend.application.services.persistence import PersistenceClient
from backend.boundary.auth import ClerkTokenVerifier
from backend.boundary.db.connection import get_async_engine, get_async_session_factory
from backend.boundary.sandbox import E2BSandboxClient
from backend.boundary.speech import WhisperTranscriber
from backend.boundary.storage import S3StorageClient
from backend.configs import Settings
from backend.core.agentic_system.agents import AgentDependencies
from backend.core.agentic_system.generation import (
    CodeGenerationClient,
    build_gemini_generator,
    build_openai_generator,
)

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Container for cached service instances."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker | None = None
        self._storage = None
        self._persistence = None
        self._codegen = None
        self._sandbox = None
        self._token_verifier = None
        self._transcriber = None

    @property
    def engine(self) -> AsyncEngine:
        """Get cached async engine."""
        if self._engine is None:
            self._engine = get_async_engine(self.settings.database.async_database_url)
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        if self._session_factory is None:
            self._session_factory = get_async_session_factory(self.engine)
        return self._session_factory

    @property
    def storage(self) -> S3StorageClient:
        """Get cached S3 storage client."""
        if self._storage is None:
            cfg = self.settings.storage
            self._storage = S3StorageClient(
                bucket=cfg.bucket,
                region=cfg.region,
                endpoint_url=cfg.endpoint_url,
                public_base_url=cfg.public_base_url,
            )
        return self._storage

    @property
    def persistence(self) -> PersistenceClient:
        if self._persistence is None:
            self._persistence = PersistenceClient(self.session_factory, self.storage)
        return self._persistence

    @property
    def codegen(self) -> CodeGenerationClient:
        """Get cached code-generation client (Gemini primary, OpenAI fallback)."""
        if self._codegen is None:
            self._codegen = CodeGenerationClient(
                primary=build_gemini_generator(self.settings.llm),
                secondary=build_openai_generator(self.settings.llm),
            )
        return self._codegen

    @property
    def sandbox(self) -> E2BSandboxClient:
        if self._sandbox is None:
            self._sandbox = E2BSandboxClient(self.settings.sandbox)
        return self._sandbox

    @property
    def token_verifier(self) -> ClerkTokenVerifier:
        if self._token_verifier is None:
            self._token_verifier = ClerkTokenVerifier(self.settings.auth)
        return self._token_verifier

    @property
    def transcriber(self) -> WhisperTranscriber:
        if self._transcriber is None:
            self._transcriber = WhisperTranscriber(
                api_key=self.settings.llm.openai_api_key,
                model=self.settings.llm.whisper_model,
            )
        return self._transcriber

    @property
    def agent_dependencies(self) -> AgentDependencies:
        return AgentDependencies(
            persistence=self.persistence,
            codegen=self.codegen,
            sandbox=self.sandbox,
            timeout=self.settings.sandbox.agent_timeout,
        )

    async def aclose(self) -> None:
        """Dispose the database engine if it was created."""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info(f"{__name__}:aclose - Database engine disposed")
        self._engine = None
        self._session_factory = None
        self._persistence = None
