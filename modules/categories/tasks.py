"""
Categories Celery tasks.
"""
import logging
from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task
def rebuild_category_paths(category_id: int = None):
    """
    Repair materialized paths that drifted from the parent chain.

    Args:
        category_id: Subtree root to rebuild; every root when omitted

    This task can be scheduled to run periodically.
    """
    from .services import CategoryService

    service = CategoryService()

    if category_id is not None:
        service.rebuild_paths(category_id)
        logger.info(f"Rebuilt category paths under {category_id}")
        return category_id

    total = service.rebuild_all_paths()
    logger.info(f"Rebuilt paths for {total} categories")
    return total


@shared_task
def report_path_drift():
    """
    Find categories whose stored path differs from the parent chain.

    Rows whose parent chain is broken (dangling link or cycle) are
    reported as drifted too. Informational only; run
    rebuild_category_paths to repair.
    """
    from .exceptions import CategoryPathIntegrityError
    from .models import CategoryModel
    from .tree import build_category_path

    drifted = []
    for category_id, stored_path in CategoryModel.objects.values_list('id', 'path'):
        try:
            expected = build_category_path(category_id)
        except CategoryPathIntegrityError as e:
            logger.warning(f"Cannot resolve path for category {category_id}: {e.message}")
            drifted.append(category_id)
            continue
        if stored_path != expected:
            drifted.append(category_id)

    if drifted:
        logger.warning(f"Found {len(drifted)} categories with stale paths")
        for category_id in drifted[:10]:
            logger.warning(f"  - {category_id}")

    return drifted
