from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# SQLAlchemy Base class for models to inherit
Base = declarative_base()


def create_db_engine(database_url: str, timeout: float = 5.0) -> Engine:
    """Open the engine once at startup; callers own its lifecycle.

    SQL echo goes through logging (see configure_logging), not `echo=`.
    """
    kwargs = {"pool_pre_ping": True}

    if database_url.startswith("sqlite"):
        # Sessions are used from FastAPI's threadpool; `timeout` bounds
        # how long a statement waits on a locked database file.
        kwargs["connect_args"] = {"check_same_thread": False, "timeout": timeout}
        if database_url in ("sqlite://", "sqlite:///:memory:", "sqlite+pysqlite:///:memory:"):
            # One shared connection, otherwise each checkout sees an empty db
            kwargs["poolclass"] = StaticPool

    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    # Factory that creates DB sessions
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create missing tables (hikes, etc.)."""
    from app.models.hike import Hike  # noqa: F401  (import ensures table is registered)

    Base.metadata.create_all(bind=engine)
