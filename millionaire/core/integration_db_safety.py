from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import make_url

LOCAL_TEST_HOSTS = frozenset({"localhost", "127.0.0.1", "::1", "postgres", "millionaire_postgres"})


@dataclass(frozen=True, slots=True)
class IntegrationDbTarget:
    backend: str
    database_name: str
    host: str

    def problems(self) -> list[str]:
        found: list[str] = []
        if self.backend != "postgresql":
            found.append(f"backend '{self.backend}' is not postgresql")
        if "test" not in self.database_name.lower():
            found.append(f"database name '{self.database_name}' does not contain 'test'")
        if self.host not in LOCAL_TEST_HOSTS:
            found.append(f"host '{self.host}' is not a local test host")
        return found


def describe_integration_db(database_url: str) -> IntegrationDbTarget:
    parsed = make_url(database_url)
    return IntegrationDbTarget(
        backend=parsed.get_backend_name(),
        database_name=(parsed.database or "").strip(),
        host=(parsed.host or "").strip().lower(),
    )


def assert_safe_integration_db(database_url: str) -> None:
    """Refuse to let integration fixtures truncate anything but a local test database."""
    problems = describe_integration_db(database_url).problems()
    if not problems:
        return
    raise RuntimeError(
        "Refusing to truncate game tables outside a local test database: "
        + "; ".join(problems)
        + ". Point DATABASE_URL at e.g. 'millionaire_test' on localhost."
    )
