import contextlib
import logging

from database.database import SessionLocal
from database.repositories.capital import CapitalRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def capital_uow(session_factory=None):
    """Per-unit-of-work transaction scope.

    Yields a CapitalRepository bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with capital_uow() as repo:
            results = MatchingService(repo, config).run_matching(seeker_id)
        # commit happens automatically on successful exit
    """
    session = (session_factory or SessionLocal)()
    repo = CapitalRepository(session)
    try:
        yield repo
        repo.commit()
    except Exception:
        logger.debug("Rolling back capital unit of work")
        repo.rollback()
        raise
    finally:
        session.close()
