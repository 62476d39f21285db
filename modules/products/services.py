"""
Products module service layer.
"""
import logging
import math
from typing import Any, Dict, List, Optional

from django.db import transaction
from django.db.models import Count, Q

from modules.categories.exceptions import CategoryNotFoundError
from modules.categories.models import CategoryModel
from shared.exceptions import ValidationError

from .exceptions import EmptyProductUpdateError, ProductHasStockError, ProductNotFoundError
from .filters import ProductFilter
from .models import ProductModel

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
SEARCH_LIMIT = 10

UPDATABLE_FIELDS = ('name', 'brand', 'model', 'category_id', 'specs', 'image_urls')


class ProductService:
    """
    Product business logic service.
    """

    def get_product(self, product_id: int) -> ProductModel:
        """Get product by ID or raise ProductNotFoundError."""
        try:
            return self._queryset().get(pk=product_id)
        except ProductModel.DoesNotExist:
            raise ProductNotFoundError(product_id)

    def list_products(
        self,
        filters: Dict[str, Any] = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Dict[str, Any]:
        """
        Filtered, paginated product list.

        Args:
            filters: Query parameters understood by ProductFilter
            page: 1-based page number
            page_size: Page size, capped at MAX_PAGE_SIZE

        Returns:
            Dict with the page of products, total count and paging info
        """
        page_size = min(page_size, MAX_PAGE_SIZE)
        queryset = self._queryset().order_by('-created_at', '-id')
        filterset = ProductFilter(filters or {}, queryset=queryset)
        if not filterset.is_valid():
            field, errors = next(iter(filterset.errors.items()))
            raise ValidationError(f"Invalid filter '{field}': {errors[0]}", field=field)
        queryset = filterset.qs

        total = queryset.count()
        offset = (page - 1) * page_size
        return {
            'items': list(queryset[offset:offset + page_size]),
            'total': total,
            'page': page,
            'page_size': page_size,
            'total_pages': math.ceil(total / page_size) if total else 0,
        }

    def search_products(self, query: Optional[str], limit: int = SEARCH_LIMIT) -> List[ProductModel]:
        """Quick lookup by name, brand or model; empty query finds nothing."""
        query = (query or '').strip()
        if not query:
            return []
        return list(
            self._queryset().filter(
                Q(name__icontains=query) |
                Q(brand__icontains=query) |
                Q(model__icontains=query)
            ).order_by('name', 'id')[:limit]
        )

    @transaction.atomic
    def create_product(
        self,
        name: str,
        brand: Optional[str] = None,
        model: Optional[str] = None,
        category_id: Optional[int] = None,
        specs: dict = None,
        image_urls: list = None,
    ) -> ProductModel:
        """Create a new product."""
        self._ensure_category_exists(category_id)

        product = ProductModel.objects.create(
            name=name,
            brand=brand,
            model=model,
            category_id=category_id,
            specs=specs or {},
            image_urls=image_urls or [],
        )
        logger.info(f"Created product: {product.name} ({product.id})")
        return self.get_product(product.id)

    @transaction.atomic
    def update_product(self, product_id: int, **changes) -> ProductModel:
        """Update the given product fields; None clears optional ones."""
        if not changes:
            raise EmptyProductUpdateError()

        product = self.get_product(product_id)

        if 'category_id' in changes:
            self._ensure_category_exists(changes['category_id'])

        for key, value in changes.items():
            if key not in UPDATABLE_FIELDS:
                continue
            if key == 'specs' and value is None:
                value = {}
            if key == 'image_urls' and value is None:
                value = []
            setattr(product, key, value)

        product.save()
        logger.info(f"Updated product: {product.id}")
        return self.get_product(product.id)

    @transaction.atomic
    def delete_product(self, product_id: int) -> bool:
        """Delete a product that has no items and no purchase or sale lines."""
        product = self.get_product(product_id)
        if (
            product.items_count
            or product.purchase_lines.exists()
            or product.sale_lines.exists()
        ):
            raise ProductHasStockError(product_id, product.items_count)
        product.delete()
        logger.info(f"Deleted product: {product_id}")
        return True

    def _queryset(self):
        return ProductModel.objects.select_related('category').annotate(items_count=Count('items'))

    def _ensure_category_exists(self, category_id: Optional[int]) -> None:
        if category_id is None:
            return
        if not CategoryModel.objects.filter(pk=category_id).exists():
            raise CategoryNotFoundError(category_id=category_id)
