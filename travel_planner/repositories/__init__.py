from travel_planner.repositories.base import Repositories
from travel_planner.repositories.memory import build_memory_repositories
from travel_planner.repositories.sql import build_sql_repositories


def build_repositories(backend: str, session_factory=None) -> Repositories:
    """Create the repository set for the configured storage backend."""
    if backend == "memory":
        return build_memory_repositories()
    if backend == "sql":
        if session_factory is None:
            from travel_planner.database import SessionLocal, init_db
            init_db()
            session_factory = SessionLocal
        return build_sql_repositories(session_factory)
    raise ValueError(f"Unknown storage backend: {backend}")


__all__ = ["Repositories", "build_repositories"]
