from contextlib import contextmanager
from portfolio.extensions import db

@contextmanager
def transactional():
    """Commit the session when the block exits cleanly, roll back otherwise."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
