"""Database URL resolution utilities."""
from pathlib import Path


def resolve_db_url(db_url: str) -> str:
    """
    Resolve relative SQLite database URLs to absolute paths.
    sqlite:///./dev.db -> sqlite:////abs/project/root/dev.db. Other URLs are returned unchanged.
    """
    if not db_url.startswith("sqlite") or ":///./" not in db_url:
        return db_url

    prefix, relative_path = db_url.split(":///./", 1)
    # Project root is where alembic.ini lives
    project_root = Path(__file__).resolve().parent.parent.parent
    absolute_path = (project_root / relative_path).resolve()
    return f"{prefix}:///{absolute_path.as_posix()}"
