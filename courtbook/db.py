from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Base para modelos (la importa courtbook.models.record)
Base = declarative_base()


def make_engine(url: str) -> Engine:
    """Engine con timeout alto para SQLite (contención ligera)."""
    is_sqlite = url.startswith("sqlite")
    engine = create_engine(
        url,
        connect_args={"check_same_thread": False, "timeout": 60} if is_sqlite else {},
        pool_pre_ping=True,
    )

    if is_sqlite:
        # PRAGMAs por conexión
        @event.listens_for(engine, "connect")
        def _on_connect(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            try:
                cur.execute("PRAGMA busy_timeout=60000;")
                cur.execute("PRAGMA synchronous=NORMAL;")
            finally:
                cur.close()

    return engine


def make_session_factory(engine: Engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
