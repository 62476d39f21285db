"""
Tests for the category API endpoints.
"""
import pytest
from rest_framework import status

from modules.categories.models import CategoryModel

BASE_URL = '/api/v1/categories/'


def _detail_url(category_id):
    return f'{BASE_URL}{category_id}/'


@pytest.mark.django_db
class TestCategoryTreeAPI:

    def test_empty_tree(self, api_client):
        response = api_client.get(BASE_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == []

    def test_nested_tree(self, api_client, category_tree, create_product):
        create_product('Pixel', category=category_tree['phones'])

        response = api_client.get(BASE_URL)

        assert response.status_code == status.HTTP_200_OK
        roots = response.json()
        assert [root['slug'] for root in roots] == ['computers', 'phones']
        assert roots[1]['product_count'] == 1
        computers = roots[0]
        assert [child['path'] for child in computers['children']] == [
            'computers/laptops',
            'computers/desktops',
        ]
        assert computers['children'][0]['children'][0]['path'] == 'computers/laptops/gaming'
        assert computers['children'][0]['children'][0]['children'] == []


@pytest.mark.django_db
class TestCreateCategoryAPI:

    def test_create_root(self, api_client):
        response = api_client.post(BASE_URL, {'name': 'Computers'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body['name'] == 'Computers'
        assert body['slug'] == 'computers'
        assert body['path'] == 'computers'
        assert body['parent_id'] is None
        assert body['depth'] == 0
        assert body['children_count'] == 0

    def test_create_child(self, api_client, category):
        response = api_client.post(
            BASE_URL,
            {'name': 'Child', 'parent_id': category.id},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()['path'] == 'test-category/child'
        assert response.json()['depth'] == 1

    def test_create_duplicate_name(self, api_client, create_category):
        create_category('Laptops')

        response = api_client.post(BASE_URL, {'name': 'Laptops'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()['slug'] == 'laptops-2'

    def test_create_without_name(self, api_client, db):
        response = api_client.post(BASE_URL, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body['status'] == 400
        assert 'name' in body['errors']

    def test_create_with_missing_parent(self, api_client, db):
        response = api_client.post(
            BASE_URL,
            {'name': 'Orphan', 'parent_id': 9999},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            'error': 'Parent category not found',
            'code': 'PARENT_NOT_FOUND',
            'kind': 'not_found',
            'entity': 'Category',
            'entity_id': 9999,
        }
        assert not CategoryModel.objects.exists()


@pytest.mark.django_db
class TestCategoryDetailAPI:

    def test_get(self, api_client, category_tree):
        laptops = category_tree['laptops']

        response = api_client.get(_detail_url(laptops.id))

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body['id'] == laptops.id
        assert body['parent_id'] == category_tree['computers'].id
        assert body['children_count'] == 1

    def test_get_missing(self, api_client, db):
        response = api_client.get(_detail_url(9999))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert body['code'] == 'CATEGORY_NOT_FOUND'
        assert body['kind'] == 'not_found'

    def test_rename(self, api_client, category_tree):
        computers = category_tree['computers']

        response = api_client.patch(_detail_url(computers.id), {'name': 'PCs'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['path'] == 'pcs'
        laptops = CategoryModel.objects.get(pk=category_tree['laptops'].pk)
        assert laptops.path == 'pcs/laptops'

    def test_move_to_root_with_null_parent(self, api_client, category_tree):
        laptops = category_tree['laptops']

        response = api_client.patch(_detail_url(laptops.id), {'parent_id': None}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['parent_id'] is None
        assert response.json()['path'] == 'laptops'

    def test_move_under_descendant(self, api_client, category_tree):
        computers = category_tree['computers']

        response = api_client.patch(
            _detail_url(computers.id),
            {'parent_id': category_tree['gaming'].id},
            format='json',
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        body = response.json()
        assert body['code'] == 'CATEGORY_CYCLE'
        assert body['kind'] == 'conflict'
        assert body['rule'] == 'acyclic_hierarchy'

    def test_self_parent(self, api_client, category):
        response = api_client.patch(
            _detail_url(category.id),
            {'parent_id': category.id},
            format='json',
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()['code'] == 'SELF_PARENT'

    def test_invalid_sort_order(self, api_client, category):
        response = api_client.patch(
            _detail_url(category.id),
            {'sort_order': 'first'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'sort_order' in response.json()['errors']

    def test_delete(self, api_client, category):
        response = api_client.delete(_detail_url(category.id))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'message': 'Category deleted'}
        assert not CategoryModel.objects.filter(pk=category.pk).exists()

    def test_delete_with_children(self, api_client, category_tree):
        response = api_client.delete(_detail_url(category_tree['computers'].id))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()['code'] == 'CATEGORY_HAS_CHILDREN'

    def test_delete_with_products(self, api_client, product):
        response = api_client.delete(_detail_url(product.category_id))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()['code'] == 'CATEGORY_HAS_PRODUCTS'

    def test_delete_missing(self, api_client, db):
        response = api_client.delete(_detail_url(9999))

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestSubcategoriesAPI:

    def test_list(self, api_client, category_tree):
        url = f"{_detail_url(category_tree['computers'].id)}subcategories/"

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [item['name'] for item in response.json()] == ['Laptops', 'Desktops']

    def test_leaf_has_none(self, api_client, category_tree):
        url = f"{_detail_url(category_tree['gaming'].id)}subcategories/"

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_missing_parent(self, api_client, db):
        response = api_client.get(f'{_detail_url(9999)}subcategories/')

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestReorderAPI:
    url = f'{BASE_URL}reorder/'

    def test_reorder(self, api_client, category_tree):
        computers = category_tree['computers']
        laptops = category_tree['laptops']
        desktops = category_tree['desktops']

        response = api_client.post(
            self.url,
            {'parent_id': computers.id, 'ordered_ids': [desktops.id, laptops.id]},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'message': 'Reordered categories'}
        children = api_client.get(f'{_detail_url(computers.id)}subcategories/').json()
        assert [child['name'] for child in children] == ['Desktops', 'Laptops']

    def test_reorder_roots_without_parent(self, api_client, category_tree):
        response = api_client.post(
            self.url,
            {'ordered_ids': [category_tree['phones'].id, category_tree['computers'].id]},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        roots = api_client.get(BASE_URL).json()
        assert [root['name'] for root in roots] == ['Phones', 'Computers']

    def test_duplicate_ids(self, api_client, category_tree):
        laptops = category_tree['laptops']

        response = api_client.post(
            self.url,
            {'parent_id': category_tree['computers'].id, 'ordered_ids': [laptops.id, laptops.id]},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body['code'] == 'DUPLICATE_IDS'
        assert body['kind'] == 'validation'
        assert body['field'] == 'ordered_ids'

    def test_parent_mismatch(self, api_client, category_tree):
        response = api_client.post(
            self.url,
            {
                'parent_id': category_tree['computers'].id,
                'ordered_ids': [category_tree['laptops'].id, category_tree['phones'].id],
            },
            format='json',
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()['code'] == 'PARENT_MISMATCH'

    def test_unknown_ids(self, api_client, category_tree):
        response = api_client.post(
            self.url,
            {'parent_id': None, 'ordered_ids': [category_tree['phones'].id, 9999]},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['entity_id'] == [9999]

    def test_missing_ordered_ids(self, api_client, db):
        response = api_client.post(self.url, {'parent_id': None}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'ordered_ids' in response.json()['errors']


@pytest.mark.django_db
class TestRebuildPathsAPI:

    def test_rebuild(self, api_client, category_tree):
        CategoryModel.objects.filter(pk=category_tree['gaming'].pk).update(path='stale')

        response = api_client.post(f"{_detail_url(category_tree['computers'].id)}rebuild-paths/")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body['message'] == 'Category paths rebuilt'
        assert body['category']['path'] == 'computers'
        assert CategoryModel.objects.get(pk=category_tree['gaming'].pk).path == 'computers/laptops/gaming'

    def test_rebuild_missing(self, api_client, db):
        response = api_client.post(f'{_detail_url(9999)}rebuild-paths/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
