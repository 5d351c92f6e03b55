"""
Celery configuration for background tasks.

- Uses Redis as message broker
- Prewarms the stock summary cache on a fixed interval
"""

from celery import Celery
from stock_display.core.config import settings

celery_app = Celery(
    'stock_display',
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=['stock_display.tasks.scheduled']
)

celery_app.conf.update(
    timezone='UTC',
    enable_utc=True,

    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',

    task_track_started=True,
    task_time_limit=300,
    task_soft_time_limit=240,

    worker_prefetch_multiplier=1,
    worker_max_tasks_per_child=1000,

    result_expires=3600,
)

celery_app.conf.beat_schedule = {
    'prewarm-stock-cache': {
        'task': 'stock_display.tasks.prewarm_stock_cache',
        'schedule': settings.prewarm_interval_seconds,
        'options': {
            # Expire before the next run to avoid overlap
            'expires': max(1.0, settings.prewarm_interval_seconds - 10),
        }
    },
}
