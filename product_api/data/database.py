# product_api/data/database.py
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from product_api.utils.logging import get_logger
from product_api.utils.retry import db_retry

logger = get_logger(__name__)

Base = declarative_base()


def create_db_engine(url: str) -> Engine:
    kwargs = {"pool_pre_ping": True}
    if url.startswith("sqlite"):
        #sqlite: jedno polaczenie dzielone miedzy watkami threadpoola
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def ping(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def init_db(engine: Engine, attempts: int = 1) -> None:
    """
    Sprawdza polaczenie z baza (z retry) i tworzy brakujace tabele.
    Wyjatek z ostatniej proby leci dalej i przerywa start aplikacji.
    """
    # modele musza byc zarejestrowane w Base.metadata przed create_all
    from product_api.data import models  # noqa: F401

    logger.info(f"Checking database connection ({attempts} attempts)")
    db_retry(attempts)(ping)(engine)

    Base.metadata.create_all(bind=engine)
    logger.info(f"Tables ready: {list(Base.metadata.tables.keys())}")


def get_db(request: Request) -> Generator[Session, None, None]:
    #fabryka sesji siedzi w app.state, brak globalnego polaczenia
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
