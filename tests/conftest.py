"""
Pytest configuration and fixtures.
"""
import pytest


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


# Service fixtures

@pytest.fixture
def category_service():
    """Get category service instance."""
    from modules.categories.services import CategoryService
    return CategoryService()


@pytest.fixture
def product_service():
    """Get product service instance."""
    from modules.products.services import ProductService
    return ProductService()


@pytest.fixture
def item_service():
    """Get item service instance."""
    from modules.items.services import ItemService
    return ItemService()


@pytest.fixture
def sale_service():
    """Get sale service instance."""
    from modules.sales.services import SaleService
    return SaleService()


@pytest.fixture
def purchase_service():
    """Get purchase service instance."""
    from modules.purchases.services import PurchaseService
    return PurchaseService()


# Model fixtures

@pytest.fixture
def create_category(db, category_service):
    """Factory fixture to create categories through the service."""
    def _create_category(name='Test Category', parent=None, **kwargs):
        parent_id = parent.id if parent is not None else None
        return category_service.create_category(name=name, parent_id=parent_id, **kwargs)
    return _create_category


@pytest.fixture
def category(create_category):
    """Create a test category."""
    return create_category('Test Category')


@pytest.fixture
def category_tree(create_category):
    """
    Small hierarchy:

        computers
        ├── laptops
        │   └── gaming
        └── desktops
        phones
    """
    computers = create_category('Computers')
    laptops = create_category('Laptops', parent=computers)
    gaming = create_category('Gaming', parent=laptops)
    desktops = create_category('Desktops', parent=computers)
    phones = create_category('Phones')
    return {
        'computers': computers,
        'laptops': laptops,
        'gaming': gaming,
        'desktops': desktops,
        'phones': phones,
    }


@pytest.fixture
def create_product(db):
    """Factory fixture to create products."""
    from modules.products.models import ProductModel

    def _create_product(name='Test Product', category=None, **kwargs):
        return ProductModel.objects.create(name=name, category=category, **kwargs)
    return _create_product


@pytest.fixture
def product(create_product, category):
    """Create a test product."""
    return create_product(
        name='Test Product',
        brand='Test Brand',
        model='T-100',
        category=category,
        specs={'color': 'black'},
    )


@pytest.fixture
def create_item(db):
    """Factory fixture to create items without movements."""
    from modules.items.models import ItemModel

    counter = {'n': 0}

    def _create_item(product, serial=None, purchase_toman=1_000_000, **kwargs):
        counter['n'] += 1
        return ItemModel.objects.create(
            product=product,
            serial=serial or f"SN-{counter['n']:04d}",
            purchase_toman=purchase_toman,
            **kwargs,
        )
    return _create_item


@pytest.fixture
def laptop(create_product, category_tree):
    """A laptop product to hold stock items."""
    return create_product(
        name='ThinkPad X1 Carbon',
        brand='Lenovo',
        model='Gen 11',
        category=category_tree['laptops'],
    )
