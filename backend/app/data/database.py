import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str):
    # SQLite: a mesma conexão pode ser usada por threads diferentes do pool do FastAPI
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Declarative Base
Base = declarative_base()


def get_db():
    """Dependency do FastAPI: uma sessão por requisição."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Cria a tabela users caso ainda não exista."""
    # import necessário para registrar o modelo no metadata
    from app.model.user import User  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Tabelas criadas em %s", engine.url)


def close_db():
    engine.dispose()
    logger.info("Conexões com o banco encerradas")
