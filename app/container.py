"""Dependency Injection container - initialized at app startup."""

from pathlib import Path

from loguru import logger

from app.repositories.effects import EffectRepository, EffectStore, JsonEffectRepository
from app.repositories.submissions import (
    JsonSubmissionRepository,
    SubmissionRepository,
    SubmissionStore,
)
from app.services.admin import AdminAuth
from app.services.effects import EffectService
from app.services.stats import StatsService
from app.services.submissions import SubmissionService
from app.services.voting import VotingService
from settings import (
    ADMIN_PASSWORD,
    DATA_DIR,
    DB_PATH,
    SESSION_SECRET,
    SESSION_TTL,
    STORAGE_BACKEND,
)

BACKENDS = ("duckdb", "json")


def build_stores(
    backend: str,
    db_path: str | None = None,
    data_dir: Path | str | None = None,
) -> tuple[EffectStore, SubmissionStore]:
    """Effect and submission stores for a backend name."""
    if backend == "duckdb":
        path = db_path or DB_PATH
        return EffectRepository(path), SubmissionRepository(path)
    if backend == "json":
        directory = data_dir or DATA_DIR
        return JsonEffectRepository(directory), JsonSubmissionRepository(directory)
    raise ValueError(f"Unknown storage backend: {backend!r}. Expected one of {BACKENDS}")


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        backend: str | None = None,
        db_path: str | None = None,
        data_dir: Path | str | None = None,
        admin_password: str | None = None,
        session_secret: str | None = None,
        session_ttl: int | None = None,
        force: bool = False,
    ) -> None:
        """Initialize all dependencies. Call once at app startup (force=True rewires)."""
        if self._initialized and not force:
            return

        self.backend = backend or STORAGE_BACKEND

        # Repositories (singletons)
        self._effect_repo, self._submission_repo = build_stores(self.backend, db_path, data_dir)

        # Services (with injected repos)
        self.effects = EffectService(self._effect_repo)
        self.stats = StatsService(self._effect_repo)
        self.voting = VotingService(self._effect_repo)
        self.submissions = SubmissionService(
            submissions=self._submission_repo,
            effects=self._effect_repo,
        )
        self.admin = AdminAuth(
            password=admin_password if admin_password is not None else ADMIN_PASSWORD,
            secret=session_secret if session_secret is not None else SESSION_SECRET,
            ttl=session_ttl or SESSION_TTL,
        )

        self._initialized = True
        logger.info("Container initialized (backend={})", self.backend)

    def reset(self) -> None:
        """Forget wiring so the next init() starts fresh."""
        self._initialized = False


# Global container instance
container = Container()
