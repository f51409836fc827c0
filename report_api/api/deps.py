# File: report_api/api/deps.py

from collections.abc import Generator

from fastapi import Request
from sqlalchemy.orm import Session


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    The session factory is created once per application (see main.py), so
    each request gets its own session on the shared engine.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db: Session = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
