from __future__ import annotations

import atexit
import logging
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import pooling

from ..core.constants import DEFAULT_POOL_SIZE

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE


class DatabaseConnection:
    """Process-wide connection pool.

    Connections are borrowed per operation and handed back on ``close()``;
    ``DatabaseConnection.close()`` disconnects whatever is idle at shutdown.
    The pool is created lazily so importing the app never touches the network.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
            atexit.register(cls._instance.close)
        return cls._instance

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        if self._pool is None:
            self._pool = pooling.MySQLConnectionPool(
                pool_name="daily_attendance",
                pool_size=int(self._config.pool_size),
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
            )
            logger.info(
                "Connection pool ready: %s@%s:%s/%s (size=%s)",
                self._config.user,
                self._config.host,
                self._config.port,
                self._config.database,
                self._config.pool_size,
            )
        return self._pool

    def connect(self):
        return self._get_pool().get_connection()

    def close(self) -> int:
        """Disconnect every idle pooled connection and forget the pool."""
        if self._pool is None:
            return 0
        pool, self._pool = self._pool, None

        closed = 0
        while True:
            try:
                cnx = pool.get_connection()
            except mysql.connector.Error:
                # PoolError once drained; a failed reconnect also ends the sweep.
                break
            try:
                cnx.disconnect()
            except mysql.connector.Error as exc:
                logger.warning("Failed to disconnect pooled connection: %s", exc)
            closed += 1

        logger.info("Released connection pool (%d idle connections closed)", closed)
        return closed
