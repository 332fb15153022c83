from __future__ import annotations

import argparse
import asyncio

import asyncpg
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine

import millionaire.db.models  # noqa: F401
from millionaire.core.config import get_settings
from millionaire.core.integration_db_safety import assert_safe_integration_db
from millionaire.db.models.base import Base


async def _ensure_database_exists(database_url: str) -> None:
    parsed = make_url(database_url)
    db_name = parsed.database or ""
    host = parsed.host or "localhost"
    port = int(parsed.port or 5432)
    if parsed.username is None:
        raise RuntimeError("DATABASE_URL username is required.")
    if not db_name.replace("_", "").isalnum():
        raise RuntimeError(f"Unsupported database name '{db_name}'.")

    conn = await asyncpg.connect(
        host=host,
        port=port,
        user=parsed.username,
        password=parsed.password,
        database="postgres",
    )
    try:
        exists = await conn.fetchval("SELECT 1 FROM pg_database WHERE datname = $1", db_name)
        if exists:
            print(f"ensure_test_db: exists db={db_name} host={host}:{port}")  # noqa: T201
            return
        await conn.execute(f'CREATE DATABASE "{db_name}"')
        print(f"ensure_test_db: created db={db_name} host={host}:{port}")  # noqa: T201
    finally:
        await conn.close()


async def _create_schema(database_url: str) -> None:
    engine = create_async_engine(database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()
    print("ensure_test_db: schema ready")  # noqa: T201


async def _run(database_url: str, *, with_schema: bool) -> None:
    await _ensure_database_exists(database_url)
    if with_schema:
        await _create_schema(database_url)


def main() -> int:
    parser = argparse.ArgumentParser(description="Create the local PostgreSQL test database.")
    parser.add_argument("--schema", action="store_true", help="also create game tables from the ORM metadata")
    args = parser.parse_args()

    database_url = get_settings().database_url
    assert_safe_integration_db(database_url)
    asyncio.run(_run(database_url, with_schema=args.schema))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
