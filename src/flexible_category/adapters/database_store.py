"""
Database Category Store.

Category membership queries over a DB-API 2.0 connection using the
page / categorylinks schema. Statements use the qmark parameter style
(sqlite3); other drivers can pass their own placeholder.

Schema:

    1. page:
        - page_id: INTEGER (primary key)
        - page_namespace: INTEGER
        - page_title: TEXT (DB key, underscores for spaces)

    2. categorylinks:
        - cl_from: INTEGER (page_id of the member)
        - cl_to: TEXT (DB key of the category)
        - cl_sortkey: TEXT
        - cl_timestamp: TEXT (ISO 8601)

Query Optimization Hints:
    - Index on (cl_to, cl_sortkey) for listings
    - Index on (cl_to, cl_timestamp) for the status intersection
    - Index on (cl_from) for the self-join
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator, List, Optional, Protocol, Sequence

from flexible_category.domain.entities import (
    CategoryLinkRow,
    CategoryMember,
    PagingWindow,
    Title,
)

logger = logging.getLogger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS page (
        page_id INTEGER PRIMARY KEY,
        page_namespace INTEGER NOT NULL,
        page_title TEXT NOT NULL,
        UNIQUE (page_namespace, page_title)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS categorylinks (
        cl_from INTEGER NOT NULL,
        cl_to TEXT NOT NULL,
        cl_sortkey TEXT NOT NULL,
        cl_timestamp TEXT NOT NULL,
        UNIQUE (cl_from, cl_to)
    )
    """,
    "CREATE INDEX IF NOT EXISTS cl_sortkey ON categorylinks (cl_to, cl_sortkey)",
    "CREATE INDEX IF NOT EXISTS cl_timestamp ON categorylinks (cl_to, cl_timestamp)",
)


class ConnectionPoolProtocol(Protocol):
    """Protocol for database connection pool."""

    def get_connection(self) -> Any:
        """Get a connection from the pool."""
        ...

    def release_connection(self, conn: Any) -> None:
        """Release connection back to pool."""
        ...


class SingleConnectionPool:
    """Pool around one long-lived connection (e.g. sqlite3 in-process)."""

    def __init__(self, connection: Any) -> None:
        self._connection = connection

    def get_connection(self) -> Any:
        return self._connection

    def release_connection(self, conn: Any) -> None:
        pass


class DatabaseCategoryStore:
    """
    Database-backed membership provider and category link store.

    Usage:
        conn = sqlite3.connect("wiki.db")
        store = DatabaseCategoryStore(SingleConnectionPool(conn))
        store.create_schema()
    """

    def __init__(
        self,
        connection_pool: ConnectionPoolProtocol,
        placeholder: str = "?",
    ) -> None:
        """
        Initialize database store.

        Args:
            connection_pool: Database connection pool
            placeholder: Parameter marker of the driver
        """
        self.pool = connection_pool
        self.placeholder = placeholder
        logger.info("DatabaseCategoryStore initialized")

    def create_schema(self) -> None:
        """Create tables and indexes if missing."""
        with self._cursor(commit=True) as cursor:
            for statement in SCHEMA:
                cursor.execute(statement)

    def add_page(self, title: Title) -> int:
        """Insert a page if missing and return its id."""
        p = self.placeholder
        with self._cursor(commit=True) as cursor:
            cursor.execute(
                f"SELECT page_id FROM page WHERE page_namespace = {p} AND page_title = {p}",
                (title.namespace, title.db_key),
            )
            row = cursor.fetchone()
            if row is not None:
                return int(row[0])
            cursor.execute(
                f"INSERT INTO page (page_namespace, page_title) VALUES ({p}, {p})",
                (title.namespace, title.db_key),
            )
            return int(cursor.lastrowid)

    def add_link(
        self,
        page: Title,
        category: Title,
        timestamp: datetime,
        sort_key: Optional[str] = None,
    ) -> None:
        """Put a page into a category."""
        page_id = self.add_page(page)
        p = self.placeholder
        with self._cursor(commit=True) as cursor:
            cursor.execute(
                "INSERT INTO categorylinks (cl_from, cl_to, cl_sortkey, cl_timestamp) "
                f"VALUES ({p}, {p}, {p}, {p})",
                (page_id, category.db_key, sort_key or page.prefixed_text, timestamp.isoformat()),
            )

    def fetch_members(
        self,
        category: Title,
        window: PagingWindow,
        limit: int,
    ) -> List[CategoryMember]:
        """
        Members of a category in query order, at most limit + 1.

        SQL:
            SELECT page_namespace, page_title, cl_sortkey, cl_timestamp
            FROM page JOIN categorylinks ON cl_from = page_id
            WHERE cl_to = :category AND <window condition>
            ORDER BY cl_sortkey [DESC]
            LIMIT :limit + 1
        """
        p = self.placeholder
        params: List[Any] = [category.db_key]
        order = "ASC"

        if window.from_key:
            condition = f"cl_sortkey >= {p}"
            params.append(window.from_key)
        elif window.until_key:
            condition = f"cl_sortkey < {p}"
            params.append(window.until_key)
            order = "DESC"
        else:
            condition = "1 = 1"
        params.append(limit + 1)

        sql = (
            "SELECT page_namespace, page_title, cl_sortkey, cl_timestamp "
            "FROM page JOIN categorylinks ON cl_from = page_id "
            f"WHERE cl_to = {p} AND {condition} "
            f"ORDER BY cl_sortkey {order} "
            f"LIMIT {p}"
        )
        rows = self._execute_query(sql, params)
        return [
            CategoryMember(
                title=Title(namespace=ns, text=db_title.replace("_", " ")),
                sort_key=sort_key,
                timestamp=_parse_timestamp(ts),
            )
            for ns, db_title, sort_key, ts in rows
        ]

    def select_status_intersection(
        self,
        category_key: str,
        status_key: str,
        limit: int,
    ) -> List[CategoryLinkRow]:
        """
        Links of category_key whose page is also in status_key, newest first.

        SQL:
            SELECT c1.cl_from, c1.cl_sortkey, c1.cl_timestamp
            FROM categorylinks AS c1, categorylinks AS c2
            WHERE c1.cl_from = c2.cl_from
              AND c1.cl_to = :category AND c2.cl_to = :status
            ORDER BY c1.cl_timestamp DESC
            LIMIT :limit
        """
        p = self.placeholder
        sql = (
            "SELECT c1.cl_from, c1.cl_sortkey, c1.cl_timestamp "
            "FROM categorylinks AS c1, categorylinks AS c2 "
            "WHERE c1.cl_from = c2.cl_from "
            f"AND c1.cl_to = {p} AND c2.cl_to = {p} "
            "ORDER BY c1.cl_timestamp DESC "
            f"LIMIT {p}"
        )
        rows = self._execute_query(sql, [category_key, status_key, limit])
        return [
            CategoryLinkRow(page_id=page_id, sort_key=sort_key, timestamp=_parse_timestamp(ts))
            for page_id, sort_key, ts in rows
        ]

    def _execute_query(self, query: str, params: Sequence[Any]) -> List[Sequence[Any]]:
        with self._cursor() as cursor:
            cursor.execute(query, tuple(params))
            return list(cursor.fetchall())

    @contextmanager
    def _cursor(self, commit: bool = False) -> Iterator[Any]:
        conn = self.pool.get_connection()
        try:
            cursor = conn.cursor()
            try:
                yield cursor
            finally:
                cursor.close()
            if commit:
                conn.commit()
        finally:
            self.pool.release_connection(conn)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))
