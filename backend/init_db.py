from database import engine, Base
import models  # noqa: F401  (registers tables on Base.metadata)
import logging

logger = logging.getLogger(__name__)


def init_database(bind=None):
    """
    Create all tables that don't exist yet.

    Args:
        bind: Engine to use (defaults to the application engine)
    """
    target = bind if bind is not None else engine
    Base.metadata.create_all(bind=target)
    logger.info(f"✅ Database initialized: {target.url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
