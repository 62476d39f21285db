"""
Category hierarchy helpers.

Slug resolution, parent validation and materialized path maintenance.
The database helpers read and write through the default connection, so
when called inside ``transaction.atomic`` they see the uncommitted writes
of the surrounding operation and are rolled back together with it.
"""
import logging
from collections import defaultdict, deque
from typing import Any, Dict, Iterable, List, Optional

from shared.utils import slugify

from .exceptions import (
    CategoryCycleError,
    CategoryPathIntegrityError,
    ParentCategoryNotFoundError,
    SelfParentError,
)
from .models import CategoryModel

logger = logging.getLogger(__name__)

FALLBACK_SLUG = 'category'
PATH_SEPARATOR = '/'
MAX_SLUG_BASE_LENGTH = 100


def build_slug_base(name: str) -> str:
    """Slug for a display name, never empty."""
    base = slugify(name)[:MAX_SLUG_BASE_LENGTH].strip('-')
    return base or FALLBACK_SLUG


def generate_unique_slug(base: str, exclude_id: Optional[int] = None) -> str:
    """
    Return the first free slug among ``base``, ``base-2``, ``base-3``...

    The row identified by ``exclude_id`` is ignored so a category keeps its
    own slug when renamed to an equivalent name.
    """
    normalized = base or FALLBACK_SLUG
    candidate = normalized
    suffix = 2

    while True:
        queryset = CategoryModel.objects.filter(slug=candidate)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        if not queryset.exists():
            return candidate
        candidate = f"{normalized}-{suffix}"
        suffix += 1


def ensure_valid_parent(parent_id: Optional[int], current_id: Optional[int] = None) -> None:
    """
    Reject parents that do not exist or would create a cycle.

    Raises:
        SelfParentError: parent_id equals current_id
        CategoryCycleError: current_id is an ancestor of parent_id
        ParentCategoryNotFoundError: parent_id or one of its ancestors is missing
        CategoryPathIntegrityError: the existing ancestor chain already loops
    """
    if parent_id is None:
        return

    if current_id is not None and parent_id == current_id:
        raise SelfParentError(current_id)

    seen = set()
    cursor = parent_id
    while cursor is not None:
        if cursor in seen:
            raise CategoryPathIntegrityError(
                cursor, message=f"Category hierarchy already contains a cycle at \"{cursor}\""
            )
        seen.add(cursor)

        row = CategoryModel.objects.filter(pk=cursor).values('id', 'parent_id').first()
        if row is None:
            raise ParentCategoryNotFoundError(parent_id)
        if current_id is not None and row['id'] == current_id:
            raise CategoryCycleError(current_id, parent_id)
        cursor = row['parent_id']


def build_category_path(category_id: int) -> str:
    """Join the slugs from the root down to ``category_id``."""
    segments: List[str] = []
    seen = set()
    cursor = category_id

    while cursor is not None:
        if cursor in seen:
            raise CategoryPathIntegrityError(
                cursor, message=f"Category hierarchy contains a cycle at \"{cursor}\""
            )
        seen.add(cursor)

        row = CategoryModel.objects.filter(pk=cursor).values('slug', 'parent_id').first()
        if row is None:
            raise CategoryPathIntegrityError(cursor)
        segments.append(row['slug'])
        cursor = row['parent_id']

    segments.reverse()
    return PATH_SEPARATOR.join(segments)


def rebuild_subtree_paths(category_id: int) -> int:
    """
    Recompute and store ``path`` for a category and all of its descendants.

    Breadth-first over an explicit queue; each node is visited once.
    Returns the number of rows visited.
    """
    queue = deque([category_id])
    visited = set()

    while queue:
        current_id = queue.popleft()
        if current_id in visited:
            continue
        visited.add(current_id)

        path = build_category_path(current_id)
        CategoryModel.objects.filter(pk=current_id).update(path=path)

        queue.extend(
            CategoryModel.objects.filter(parent_id=current_id).values_list('id', flat=True)
        )

    logger.debug(f"Rebuilt paths for {len(visited)} categories under {category_id}")
    return len(visited)


def collect_subtree_ids(category_id: int) -> List[int]:
    """Ids of a category and all of its descendants, walked over ``parent_id``."""
    queue = deque([category_id])
    collected: List[int] = []
    visited = set()

    while queue:
        current_id = queue.popleft()
        if current_id in visited:
            continue
        visited.add(current_id)
        collected.append(current_id)
        queue.extend(
            CategoryModel.objects.filter(parent_id=current_id).values_list('id', flat=True)
        )

    return collected


def _sibling_key(node: Dict[str, Any]):
    name = node.get('name') or ''
    return (node.get('sort_order') or 0, name.casefold(), name)


def assemble_tree(nodes: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Nest a flat list of category dicts into a forest.

    Each input dict needs ``id``, ``parent_id``, ``sort_order`` and ``name``;
    the output dicts are copies with a ``children`` list. Siblings are
    ordered by sort order, then name. Nodes whose parent is not in the
    input are not reachable from a root and are left out.
    """
    children_by_parent: Dict[Optional[int], List[Dict[str, Any]]] = defaultdict(list)

    for node in nodes:
        item = dict(node)
        item['children'] = []
        children_by_parent[item.get('parent_id')].append(item)

    for siblings in children_by_parent.values():
        siblings.sort(key=_sibling_key)

    roots = children_by_parent.get(None, [])
    stack = list(roots)
    while stack:
        node = stack.pop()
        node['children'] = children_by_parent.get(node['id'], [])
        stack.extend(node['children'])

    return roots
