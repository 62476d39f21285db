"""
Categories module exceptions.
"""
from shared.exceptions import (
    ConflictError,
    DataIntegrityError,
    NotFoundError,
    ValidationError,
)


class CategoryNotFoundError(NotFoundError):
    """Raised when category is not found."""

    def __init__(self, category_id=None, message: str = None):
        super().__init__(
            entity_name='Category',
            entity_id=category_id,
            message=message or f"Category not found: {category_id}",
            code='CATEGORY_NOT_FOUND',
        )
        self.category_id = category_id


class ParentCategoryNotFoundError(NotFoundError):
    """Raised when a parent (or one of its ancestors) does not exist."""

    def __init__(self, parent_id):
        super().__init__(
            entity_name='Category',
            entity_id=parent_id,
            message="Parent category not found",
            code='PARENT_NOT_FOUND',
        )
        self.parent_id = parent_id


class InvalidCategoryHierarchyError(ConflictError):
    """Raised when category hierarchy is invalid."""

    def __init__(self, message: str, code: str = 'INVALID_CATEGORY_HIERARCHY'):
        super().__init__(message, rule='acyclic_hierarchy', code=code)


class SelfParentError(InvalidCategoryHierarchyError):
    """Category assigned as its own parent."""

    def __init__(self, category_id):
        super().__init__("Category cannot be its own parent", code='SELF_PARENT')
        self.category_id = category_id


class CategoryCycleError(InvalidCategoryHierarchyError):
    """Category assigned under one of its own descendants."""

    def __init__(self, category_id, parent_id):
        super().__init__(
            "Cannot set category as a descendant of itself",
            code='CATEGORY_CYCLE',
        )
        self.category_id = category_id
        self.parent_id = parent_id


class CategoryHasChildrenError(ConflictError):
    """Raised when deleting a category that still has subcategories."""

    def __init__(self, category_id, child_count: int):
        super().__init__(
            "Cannot delete a category that has subcategories",
            rule='delete_requires_no_children',
            code='CATEGORY_HAS_CHILDREN',
        )
        self.category_id = category_id
        self.child_count = child_count


class CategoryHasProductsError(ConflictError):
    """Raised when deleting a category that still holds products."""

    def __init__(self, category_id, product_count: int):
        super().__init__(
            f"Cannot delete a category with {product_count} product(s)",
            rule='delete_requires_no_products',
            code='CATEGORY_HAS_PRODUCTS',
        )
        self.category_id = category_id
        self.product_count = product_count


class DuplicateReorderIdsError(ValidationError):
    """Raised when a reorder request repeats an id."""

    def __init__(self):
        super().__init__(
            "ordered_ids must be unique",
            field='ordered_ids',
            code='DUPLICATE_IDS',
        )


class ReorderParentMismatchError(ConflictError):
    """Raised when reordered categories do not share the given parent."""

    def __init__(self, parent_id, category_ids):
        super().__init__(
            "All categories must belong to the specified parent",
            rule='reorder_same_parent',
            code='PARENT_MISMATCH',
        )
        self.parent_id = parent_id
        self.category_ids = category_ids


class SlugConflictError(ConflictError):
    """Raised when a unique slug could not be claimed."""

    def __init__(self, slug: str):
        super().__init__(
            "Category with this slug already exists",
            rule='unique_slug',
            code='SLUG_CONFLICT',
        )
        self.slug = slug


class CategoryPathIntegrityError(DataIntegrityError):
    """Raised when a parent link points at a missing row."""

    def __init__(self, category_id, message: str = None):
        super().__init__(
            message or f"Category with id \"{category_id}\" not found",
            code='DANGLING_PARENT',
        )
        self.category_id = category_id
