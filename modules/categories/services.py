"""
Categories business logic services.
"""
import logging
from typing import Any, Dict, List, Optional

from django.db import IntegrityError, transaction
from django.db.models import Count

from .exceptions import (
    CategoryHasChildrenError,
    CategoryHasProductsError,
    CategoryNotFoundError,
    DuplicateReorderIdsError,
    ReorderParentMismatchError,
    SlugConflictError,
)
from .models import CategoryModel
from .tree import (
    assemble_tree,
    build_category_path,
    build_slug_base,
    ensure_valid_parent,
    generate_unique_slug,
    rebuild_subtree_paths,
)

logger = logging.getLogger(__name__)

# Distinguishes "parent_id not sent" from "parent_id: null" (move to root).
UNSET = object()

SLUG_RETRY_ATTEMPTS = 3

TREE_FIELDS = (
    'id',
    'name',
    'slug',
    'path',
    'parent_id',
    'sort_order',
    'created_at',
    'updated_at',
    'product_count',
)


class CategoryService:
    """Service for category operations."""

    def get_category(self, category_id: int) -> CategoryModel:
        """Get category by ID or raise CategoryNotFoundError."""
        try:
            return CategoryModel.objects.get(pk=category_id)
        except CategoryModel.DoesNotExist:
            raise CategoryNotFoundError(category_id=category_id)

    def get_subcategories(self, parent_id: int) -> List[CategoryModel]:
        """Get direct children of a category."""
        parent = self.get_category(parent_id)
        return list(parent.children.order_by('sort_order', 'name'))

    def get_category_tree(self) -> List[Dict[str, Any]]:
        """Get the full category forest with product counts."""
        rows = (
            CategoryModel.objects
            .annotate(product_count=Count('products'))
            .values(*TREE_FIELDS)
        )
        return assemble_tree(rows)

    @transaction.atomic
    def create_category(
        self,
        name: str,
        parent_id: Optional[int] = None,
        sort_order: Optional[int] = None,
    ) -> CategoryModel:
        """Create a new category with its slug and path."""
        ensure_valid_parent(parent_id)

        if sort_order is None:
            sort_order = CategoryModel.objects.filter(parent_id=parent_id).count()

        category = CategoryModel(
            name=name,
            parent_id=parent_id,
            sort_order=sort_order,
            path='',
        )
        self._save_with_unique_slug(category)

        category.path = build_category_path(category.pk)
        category.save(update_fields=['path', 'updated_at'])

        logger.info(f"Created category: {category.path} ({category.id})")
        return category

    @transaction.atomic
    def update_category(
        self,
        category_id: int,
        name: str = None,
        parent_id=UNSET,
        sort_order: int = None,
    ) -> CategoryModel:
        """
        Rename, move or re-sort a category.

        The slug is regenerated only when the name changes; paths of the
        whole subtree are rebuilt when the slug or the parent changes.
        """
        category = self.get_category(category_id)
        changed = False
        rename = False
        rebuild_paths = False

        if name is not None and name != category.name:
            category.name = name
            rename = True
            rebuild_paths = True

        if sort_order is not None and sort_order != category.sort_order:
            category.sort_order = sort_order
            changed = True

        if parent_id is not UNSET and parent_id != category.parent_id:
            ensure_valid_parent(parent_id, category.pk)
            category.parent_id = parent_id
            rebuild_paths = True

        if not (changed or rebuild_paths):
            return category

        if rename:
            self._save_with_unique_slug(category)
        else:
            category.save()

        if rebuild_paths:
            count = rebuild_subtree_paths(category.pk)
            category.refresh_from_db()
            logger.info(f"Updated category {category.id}, rebuilt {count} path(s)")
        else:
            logger.info(f"Updated category: {category.path} ({category.id})")
        return category

    @transaction.atomic
    def delete_category(self, category_id: int) -> bool:
        """Delete a category that has no subcategories and no products."""
        category = self.get_category(category_id)

        child_count = category.children.count()
        if child_count > 0:
            raise CategoryHasChildrenError(category_id, child_count)

        product_count = category.products.count()
        if product_count > 0:
            raise CategoryHasProductsError(category_id, product_count)

        category.delete()
        logger.info(f"Deleted category: {category_id}")
        return True

    @transaction.atomic
    def reorder_categories(self, parent_id: Optional[int], ordered_ids: List[int]) -> int:
        """Assign sort orders 0..n-1 to siblings in the given order."""
        if len(set(ordered_ids)) != len(ordered_ids):
            raise DuplicateReorderIdsError()

        if not ordered_ids:
            return 0

        categories = list(
            CategoryModel.objects.filter(pk__in=ordered_ids).values('id', 'parent_id')
        )
        if len(categories) != len(ordered_ids):
            missing = sorted(set(ordered_ids) - {row['id'] for row in categories})
            raise CategoryNotFoundError(
                category_id=missing,
                message="One or more categories were not found",
            )

        foreign = [row['id'] for row in categories if row['parent_id'] != parent_id]
        if foreign:
            raise ReorderParentMismatchError(parent_id, foreign)

        for index, category_id in enumerate(ordered_ids):
            CategoryModel.objects.filter(pk=category_id).update(sort_order=index)

        logger.info(f"Reordered {len(ordered_ids)} categories under parent {parent_id}")
        return len(ordered_ids)

    def rebuild_paths(self, category_id: int) -> CategoryModel:
        """Recompute paths of a category subtree without other changes."""
        self.get_category(category_id)

        with transaction.atomic():
            count = rebuild_subtree_paths(category_id)

        logger.info(f"Rebuilt {count} path(s) under category {category_id}")
        return self.get_category(category_id)

    def rebuild_all_paths(self) -> int:
        """Recompute paths for every root and its subtree."""
        total = 0
        with transaction.atomic():
            root_ids = list(
                CategoryModel.objects.filter(parent__isnull=True).values_list('id', flat=True)
            )
            for root_id in root_ids:
                total += rebuild_subtree_paths(root_id)
        return total

    def _save_with_unique_slug(self, category: CategoryModel) -> CategoryModel:
        """
        Claim a unique slug for the category name and save it.

        A concurrent transaction may take the same slug between the lookup
        and the write; the savepoint lets the unique constraint failure be
        retried with a fresh lookup.
        """
        base = build_slug_base(category.name)

        for attempt in range(1, SLUG_RETRY_ATTEMPTS + 1):
            category.slug = generate_unique_slug(base, exclude_id=category.pk)
            try:
                with transaction.atomic():
                    category.save()
                return category
            except IntegrityError:
                logger.warning(
                    f"Slug '{category.slug}' was claimed concurrently "
                    f"(attempt {attempt}/{SLUG_RETRY_ATTEMPTS})"
                )

        raise SlugConflictError(category.slug)
