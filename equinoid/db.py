"""馬登録DBの接続管理

SQLiteファイル1つに馬の登録簿（horsesテーブル）を保持する。
接続ごとにPRAGMAを設定し、CLIの同時実行時のロック待ちに備える。
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine, event, func, select
from sqlalchemy.orm import Session, sessionmaker

from equinoid.models import Base, Horse

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"

# ロック解除を待つ最大時間（ミリ秒）
SQLITE_BUSY_TIMEOUT_MS = 5000


def _apply_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute(f"PRAGMA busy_timeout = {SQLITE_BUSY_TIMEOUT_MS}")
        cursor.execute("PRAGMA foreign_keys = ON")
    finally:
        cursor.close()


def get_engine(db_path: str) -> Engine:
    """馬登録DBのエンジンを作成する

    Args:
        db_path: DBファイルのパス。":memory:" ならインメモリDB

    Returns:
        PRAGMA設定済みのEngine
    """
    if db_path != MEMORY_DB:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(f"sqlite:///{db_path}")
    event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine


@contextmanager
def get_session(engine: Engine) -> Generator[Session, None, None]:
    """登録簿を操作するセッション

    正常終了でコミット、例外でロールバックする。
    コミット後も取得済みのHorseの属性を参照できるよう、失効させない。
    """
    session = sessionmaker(bind=engine, expire_on_commit=False)()

    try:
        yield session
        session.commit()
    except Exception:
        logger.debug("Rolling back horse registry session", exc_info=True)
        session.rollback()
        raise
    finally:
        session.close()


def init_db(engine: Engine) -> int:
    """horsesテーブルを用意し、登録済みの頭数を返す

    既存のテーブルとデータはそのまま残る。
    """
    Base.metadata.create_all(engine)

    with get_session(engine) as session:
        count = session.scalar(select(func.count()).select_from(Horse))

    logger.debug("Horse registry ready: %d horses", count)
    return count
