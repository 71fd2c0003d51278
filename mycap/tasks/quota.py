"""Celery tasks for the monthly quota reset."""

import logging

from sqlalchemy.orm import Session

from mycap.celery_app import app as celery_app
from mycap.database import SessionLocal
from mycap.services.user_service import UserService

logger = logging.getLogger(__name__)


@celery_app.task(name="mycap.tasks.quota.reset_free_tier_quota")
def reset_free_tier_quota() -> dict:
    """Restore the default remaining time for every free-tier user.

    This task runs monthly via celery-beat, in the worker rather than the
    API process, so it never blocks request handling.

    Returns:
        dict with the number of users reset
    """
    db: Session = SessionLocal()
    try:
        count = UserService(db).reset_all_free_tier_quota()
        logger.info(f"Update free users' remaining time: {count} reset")
        return {"reset": count}
    finally:
        db.close()
