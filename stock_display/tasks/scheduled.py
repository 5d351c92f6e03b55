"""
Celery tasks for stock cache prewarming.
"""

import asyncio
import logging
from stock_display.tasks.celery_app import celery_app
from stock_display.tasks.jobs import stock_prewarm_job

logger = logging.getLogger(__name__)


def _run(coro):
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@celery_app.task(name='stock_display.tasks.prewarm_stock_cache')
def prewarm_stock_cache():
    """
    Scheduled task: refresh cached stock summaries for every catalog product.
    """
    logger.info("Celery task started: prewarm_stock_cache")

    try:
        counts = _run(stock_prewarm_job.run_scheduled_job())
    except Exception as e:
        logger.error(f"Celery task failed: {str(e)}", exc_info=True)
        return {"status": "error", "message": str(e)}

    status = "error" if counts["failed"] else "success"
    return {"status": status, **counts}


@celery_app.task(name='stock_display.tasks.prewarm_stock_for_sku')
def prewarm_stock_for_sku(sku: str):
    """
    Refresh the cached stock summary of a single SKU.
    """
    logger.info(f"Celery task started: prewarm_stock_for_sku({sku})")

    try:
        counts = _run(stock_prewarm_job.run_scheduled_job([sku]))
    except Exception as e:
        logger.error(f"Failed to prewarm {sku}: {str(e)}", exc_info=True)
        return {"status": "error", "sku": sku, "message": str(e)}

    if counts["failed"]:
        return {"status": "error", "sku": sku, "message": f"Prewarm failed for {sku}"}
    return {"status": "success", "sku": sku, "available": counts["prewarmed"] == 1}
