"""Celery application configuration."""

from celery import Celery
from celery.schedules import crontab

from mycap.config import get_settings

settings = get_settings()

app = Celery(
    "mycap",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["mycap.tasks.quota"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=300,  # 5 minutes max per task
    task_soft_time_limit=240,  # 4 minutes soft limit
)

# Free-tier quota is restored once a month
app.conf.beat_schedule = {
    "reset-free-tier-quota": {
        "task": "mycap.tasks.quota.reset_free_tier_quota",
        "schedule": crontab(
            minute=0,
            hour=settings.quota_reset_hour,
            day_of_month=settings.quota_reset_day_of_month,
        ),
    },
}
