"""
Tests for the product API endpoints.
"""
import pytest
from rest_framework import status

from modules.products.models import ProductModel
from modules.products.services import MAX_PAGE_SIZE

BASE_URL = '/api/v1/products/'


@pytest.mark.django_db
class TestProductListAPI:

    def test_empty(self, api_client):
        response = api_client.get(BASE_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'items': [],
            'total': 0,
            'page': 1,
            'page_size': 20,
            'total_pages': 0,
        }

    def test_newest_first(self, api_client, create_product):
        create_product('Older')
        create_product('Newer')

        response = api_client.get(BASE_URL)

        assert [item['name'] for item in response.json()['items']] == ['Newer', 'Older']

    def test_search(self, api_client, create_product):
        create_product('ThinkPad X1', brand='Lenovo')
        create_product('Galaxy S24', brand='Samsung', model='SM-S921')
        create_product('MacBook Air', brand='Apple')

        response = api_client.get(BASE_URL, {'q': 'sm-s9'})

        body = response.json()
        assert body['total'] == 1
        assert body['items'][0]['name'] == 'Galaxy S24'

    def test_filter_by_brand_ignores_case(self, api_client, create_product):
        create_product('ThinkPad X1', brand='Lenovo')
        create_product('MacBook Air', brand='Apple')

        response = api_client.get(BASE_URL, {'brand': 'lenovo'})

        assert [item['name'] for item in response.json()['items']] == ['ThinkPad X1']

    def test_filter_by_category(self, api_client, category_tree, create_product):
        create_product('ThinkPad', category=category_tree['laptops'])
        create_product('Blade', category=category_tree['gaming'])

        response = api_client.get(BASE_URL, {'category_id': category_tree['laptops'].id})

        assert [item['name'] for item in response.json()['items']] == ['ThinkPad']

    def test_filter_by_category_subtree(self, api_client, category_tree, create_product):
        create_product('ThinkPad', category=category_tree['laptops'])
        create_product('Blade', category=category_tree['gaming'])
        create_product('Pixel', category=category_tree['phones'])

        response = api_client.get(BASE_URL, {'in_category': category_tree['computers'].id})

        names = {item['name'] for item in response.json()['items']}
        assert names == {'ThinkPad', 'Blade'}

    def test_filter_by_missing_category_subtree(self, api_client, create_product):
        create_product('Loose')

        response = api_client.get(BASE_URL, {'in_category': 9999})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['total'] == 0

    def test_pagination(self, api_client, create_product):
        for index in range(5):
            create_product(f'Product {index}')

        response = api_client.get(BASE_URL, {'page': 2, 'page_size': 2})

        body = response.json()
        assert body['total'] == 5
        assert body['page'] == 2
        assert body['page_size'] == 2
        assert body['total_pages'] == 3
        assert len(body['items']) == 2

    def test_page_size_is_capped(self, api_client, db):
        response = api_client.get(BASE_URL, {'page_size': MAX_PAGE_SIZE + 50})

        assert response.json()['page_size'] == MAX_PAGE_SIZE

    @pytest.mark.parametrize('params', [{'page': 0}, {'page_size': -1}, {'page': 'abc'}])
    def test_invalid_pagination(self, api_client, db, params):
        response = api_client.get(BASE_URL, params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body['error'] == 'Pagination parameters must be positive integers'
        assert body['kind'] == 'validation'

    def test_invalid_filter_value(self, api_client, db):
        response = api_client.get(BASE_URL, {'category_id': 'abc'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['field'] == 'category_id'

    def test_item_includes_category_summary(self, api_client, product):
        response = api_client.get(BASE_URL)

        item = response.json()['items'][0]
        assert item['category'] == {
            'id': product.category.id,
            'name': 'Test Category',
            'slug': 'test-category',
            'path': 'test-category',
        }
        assert item['specs'] == {'color': 'black'}


@pytest.mark.django_db
class TestProductCreateAPI:

    def test_create(self, api_client, category):
        response = api_client.post(
            BASE_URL,
            {
                'name': 'ThinkPad X1',
                'brand': 'Lenovo',
                'category_id': category.id,
                'specs': {'ram': '16GB'},
                'image_urls': ['https://example.com/x1.png'],
            },
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body['category_id'] == category.id
        assert body['image_urls'] == ['https://example.com/x1.png']
        assert ProductModel.objects.filter(name='ThinkPad X1').exists()

    def test_create_without_category(self, api_client, db):
        response = api_client.post(BASE_URL, {'name': 'Loose'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body['category'] is None
        assert body['specs'] == {}
        assert body['image_urls'] == []

    def test_create_with_missing_category(self, api_client, db):
        response = api_client.post(
            BASE_URL,
            {'name': 'Lost', 'category_id': 9999},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['code'] == 'CATEGORY_NOT_FOUND'
        assert not ProductModel.objects.exists()

    def test_specs_must_be_object(self, api_client, db):
        response = api_client.post(
            BASE_URL,
            {'name': 'Odd', 'specs': ['not', 'a', 'dict']},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'specs' in response.json()['errors']

    def test_invalid_image_url(self, api_client, db):
        response = api_client.post(
            BASE_URL,
            {'name': 'Odd', 'image_urls': ['not a url']},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'image_urls' in response.json()['errors']


@pytest.mark.django_db
class TestProductDetailAPI:

    def test_get(self, api_client, product):
        response = api_client.get(f'{BASE_URL}{product.id}/')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['name'] == 'Test Product'

    def test_get_missing(self, api_client, db):
        response = api_client.get(f'{BASE_URL}9999/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['code'] == 'PRODUCT_NOT_FOUND'

    def test_update(self, api_client, product, create_category):
        other = create_category('Other')

        response = api_client.patch(
            f'{BASE_URL}{product.id}/',
            {'brand': 'New Brand', 'category_id': other.id},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body['brand'] == 'New Brand'
        assert body['category']['slug'] == 'other'
        assert body['name'] == 'Test Product'

    def test_update_clears_category(self, api_client, product):
        response = api_client.patch(
            f'{BASE_URL}{product.id}/',
            {'category_id': None},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['category'] is None

    def test_empty_update(self, api_client, product):
        response = api_client.patch(f'{BASE_URL}{product.id}/', {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['code'] == 'EMPTY_UPDATE'

    def test_delete(self, api_client, product):
        response = api_client.delete(f'{BASE_URL}{product.id}/')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not ProductModel.objects.filter(pk=product.pk).exists()

    def test_delete_frees_category(self, api_client, product):
        api_client.delete(f'{BASE_URL}{product.id}/')

        response = api_client.delete(f'/api/v1/categories/{product.category_id}/')

        assert response.status_code == status.HTTP_200_OK


@pytest.mark.django_db
class TestProductStockAPI:

    def test_items_count_in_list_and_detail(self, api_client, product, create_item, create_product):
        create_item(product)
        create_item(product)
        create_product('Empty Shelf')

        listed = {row['name']: row['items_count'] for row in api_client.get(BASE_URL).json()['items']}
        detail = api_client.get(f'{BASE_URL}{product.id}/').json()

        assert listed == {'Test Product': 2, 'Empty Shelf': 0}
        assert detail['items_count'] == 2

    def test_delete_with_items_is_refused(self, api_client, product, create_item):
        create_item(product)

        response = api_client.delete(f'{BASE_URL}{product.id}/')

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()['code'] == 'PRODUCT_HAS_STOCK'
        assert ProductModel.objects.filter(pk=product.pk).exists()

    def test_delete_with_purchase_line_is_refused(self, api_client, product, purchase_service):
        purchase_service.create_purchase(
            supplier_name='Tehran Wholesale',
            lines=[{'product_id': product.id, 'quantity': 1, 'unit_toman': 1}],
        )

        response = api_client.delete(f'{BASE_URL}{product.id}/')

        assert response.status_code == status.HTTP_409_CONFLICT


@pytest.mark.django_db
class TestProductSearchAPI:

    SEARCH_URL = f'{BASE_URL}search/'

    def test_empty_query_finds_nothing(self, api_client, product):
        for params in ({}, {'q': '   '}):
            response = api_client.get(self.SEARCH_URL, params)

            assert response.status_code == status.HTTP_200_OK
            assert response.json() == {'items': []}

    def test_matches_name_brand_and_model(self, api_client, create_product):
        create_product('ThinkPad X1', brand='Lenovo', model='21HM')
        create_product('Galaxy S24', brand='Samsung')
        create_product('Yoga Slim', brand='Lenovo')

        by_brand = api_client.get(self.SEARCH_URL, {'q': 'LENOVO'}).json()['items']
        by_model = api_client.get(self.SEARCH_URL, {'q': '21hm'}).json()['items']

        assert [row['name'] for row in by_brand] == ['ThinkPad X1', 'Yoga Slim']
        assert [row['name'] for row in by_model] == ['ThinkPad X1']

    def test_at_most_ten_results(self, api_client, create_product):
        for index in range(12):
            create_product(f'Cable {index:02d}')

        response = api_client.get(self.SEARCH_URL, {'q': 'cable'})

        assert len(response.json()['items']) == 10
