"""SQLite storage for agent records."""

import json
import sqlite3
from pathlib import Path
from typing import Any

from agenthub.errors import NotFoundError, StoreError
from server.config import AGENTS_DB_PATH
from server.logger import store_logger


class SqliteAgentStore:
    """Record store backed by a single sqlite table.

    Each agent is stored as a JSON document; ``category`` is copied into
    its own indexed column so category queries do not scan the table.
    """

    def __init__(self, db_path: Path | str = AGENTS_DB_PATH) -> None:
        self.db_path = Path(db_path)
        self.init_db()

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _run(self, operation: str, fn):
        """Run fn with a fresh connection, wrapping sqlite errors."""
        try:
            conn = self._connect()
            try:
                with conn:
                    return fn(conn)
            finally:
                conn.close()
        except sqlite3.Error as exc:
            store_logger.exception(f"sqlite {operation} failed on {self.db_path}: {exc}")
            raise StoreError(f"{operation} failed") from exc

    def init_db(self) -> None:
        def create(conn: sqlite3.Connection) -> None:
            conn.execute(
                """
                create table if not exists agents (
                    id text primary key,
                    item_json text not null,
                    category text,
                    updated_at text
                )
                """
            )
            conn.execute(
                "create index if not exists idx_agents_category on agents(category)"
            )

        self._run("init", create)

    def put(self, key: str, item: dict[str, Any]) -> None:
        def upsert(conn: sqlite3.Connection) -> None:
            conn.execute(
                """
                insert into agents (id, item_json, category, updated_at)
                values (?, ?, ?, ?)
                on conflict(id) do update set
                    item_json = excluded.item_json,
                    category = excluded.category,
                    updated_at = excluded.updated_at
                """,
                (key, json.dumps(item), item.get("category"), item.get("updatedAt")),
            )

        self._run("put", upsert)

    def get(self, key: str) -> dict[str, Any] | None:
        row = self._run(
            "get",
            lambda conn: conn.execute(
                "select item_json from agents where id = ?", (key,)
            ).fetchone(),
        )
        if not row:
            return None
        return json.loads(row["item_json"])

    def scan(self) -> list[dict[str, Any]]:
        rows = self._run(
            "scan",
            lambda conn: conn.execute("select item_json from agents").fetchall(),
        )
        return [json.loads(row["item_json"]) for row in rows]

    def query_by_category(self, category: str) -> list[dict[str, Any]]:
        rows = self._run(
            "query",
            lambda conn: conn.execute(
                "select item_json from agents where category = ?", (category,)
            ).fetchall(),
        )
        return [json.loads(row["item_json"]) for row in rows]

    def delete(self, key: str) -> None:
        self._run(
            "delete",
            lambda conn: conn.execute("delete from agents where id = ?", (key,)),
        )

    def update_partial(self, key: str, fields: dict[str, Any]) -> dict[str, Any]:
        def update(conn: sqlite3.Connection) -> dict[str, Any] | None:
            # read-merge-write under one write lock
            conn.execute("begin immediate")
            row = conn.execute(
                "select item_json from agents where id = ?", (key,)
            ).fetchone()
            if not row:
                return None
            item = json.loads(row["item_json"])
            item.update(fields)
            conn.execute(
                """
                update agents
                set item_json = ?, category = ?, updated_at = ?
                where id = ?
                """,
                (json.dumps(item), item.get("category"), item.get("updatedAt"), key),
            )
            return item

        item = self._run("update", update)
        if item is None:
            raise NotFoundError("Record", key)
        return item
