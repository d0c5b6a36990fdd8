"""SQLAlchemy-backed unit of work for user linking."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any, Literal

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from hooklink.adapters.sqlalchemy.mappings import create_all_tables, start_mappers
from hooklink.adapters.sqlalchemy.repositories import (
    SqlAlchemyCommentRepository,
    SqlAlchemyGithubRepoRepository,
    SqlAlchemyTaskRepository,
    SqlAlchemyUserRepository,
)
from hooklink.config import get_database_config
from hooklink.domain.ports.unit_of_work import LinkingRepositories, RepositoryCollection

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Connection, Engine


log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when a SQLAlchemy unit of work is used before initialisation."""


@dataclass(slots=True)
class _AdapterState:
    _engine: Engine | None = None
    _session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @engine.setter
    def engine(self, value: Engine | None) -> None:
        self._session_factory = None
        self._engine = value

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._engine is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call hooklink.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._session_factory


_STATE = _AdapterState()


def create_database_engine(database_uri: str) -> Engine:
    """Create an engine, with SAVEPOINT support enabled for pysqlite."""

    engine = create_engine(database_uri, future=True)
    if engine.dialect.name == "sqlite":
        _enable_sqlite_savepoints(engine)
    return engine


def _disable_pysqlite_transactions(dbapi_connection: Any, _connection_record: object) -> None:
    dbapi_connection.isolation_level = None


def _begin_sqlite_transaction(connection: Connection) -> None:
    # connections opened before the listeners were attached still need the switch
    dbapi_connection: Any = connection.connection.driver_connection
    if dbapi_connection is not None and dbapi_connection.isolation_level is not None:
        dbapi_connection.isolation_level = None
    connection.exec_driver_sql("BEGIN")


def _enable_sqlite_savepoints(engine: Engine) -> None:
    # pysqlite starts and ends transactions on its own, which breaks SAVEPOINT.
    # Hand transaction control to SQLAlchemy instead.
    if event.contains(engine, "begin", _begin_sqlite_transaction):
        return
    event.listen(engine, "connect", _disable_pysqlite_transactions)
    event.listen(engine, "begin", _begin_sqlite_transaction)


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Initialise the SQLAlchemy engine, metadata, and session factory."""

    if _STATE.engine is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )

    resolved_engine = engine or create_database_engine(
        database_uri or get_database_config().uri
    )
    if resolved_engine.dialect.name == "sqlite":
        _enable_sqlite_savepoints(resolved_engine)
    start_mappers()
    create_all_tables(resolved_engine)

    _STATE.engine = resolved_engine
    log.debug("SQLAlchemy adapter started on %s", resolved_engine.url)


def configured_engine() -> Engine | None:
    """Return the engine currently managed by the adapter (if any)."""

    return _STATE.engine


def is_started() -> bool:
    """Return whether the adapter has been initialised."""

    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the managed engine and reset state (primarily for tests)."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
    _STATE.engine = None


class BaseSqlAlchemyUnitOfWork[TRepositories: RepositoryCollection](ABC):
    """Generic SQLAlchemy unit of work with pluggable repository collections."""

    def __init__(self) -> None:
        self.session_factory: sessionmaker[Session] = _STATE.session_factory
        self._session: Session | None = None

    @abstractmethod
    def _build_repositories(self, session: Session) -> TRepositories: ...

    def __enter__(self) -> BaseSqlAlchemyUnitOfWork[TRepositories]:
        self.session = self.session_factory()
        self._repositories = self._build_repositories(self.session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self.session = None
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def repositories(self) -> TRepositories:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @session.setter
    def session(self, session: Session | None) -> None:
        if self._session is not None and session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = session


class SqlAlchemyLinkingUnitOfWork(BaseSqlAlchemyUnitOfWork[LinkingRepositories]):
    """Unit of work managing SQLAlchemy sessions for user linking."""

    def _build_repositories(self, session: Session) -> LinkingRepositories:
        return LinkingRepositories(
            users=SqlAlchemyUserRepository(session),
            github_repos=SqlAlchemyGithubRepoRepository(session),
            tasks=SqlAlchemyTaskRepository(session),
            comments=SqlAlchemyCommentRepository(session),
        )


if TYPE_CHECKING:
    from hooklink.domain.ports.unit_of_work import LinkingUnitOfWork

    _uow_check: LinkingUnitOfWork = SqlAlchemyLinkingUnitOfWork()
