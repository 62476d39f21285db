"""
Tests for the sale API endpoints.
"""
import pytest
from rest_framework import status

from modules.items.models import InventoryMovementModel, ItemModel
from modules.sales.models import SaleLineModel, SaleModel

BASE_URL = '/api/v1/sales/'


@pytest.fixture
def two_items(laptop, create_item):
    first = create_item(laptop, serial='PF-A', purchase_toman=11_000_000, status='LISTED')
    second = create_item(laptop, serial='PF-B', purchase_toman=8_000_000)
    return first, second


def _sale_payload(*lines, **overrides):
    payload = {
        'customer_name': 'Sara Rahimi',
        'channel': 'DIRECT',
        'reference': 'INV-1001',
        'lines': [{'item_id': item_id, 'unit_toman': unit} for item_id, unit in lines],
    }
    payload.update(overrides)
    return payload


@pytest.mark.django_db
class TestSaleCreateAPI:

    def test_create_sells_every_item(self, api_client, two_items):
        first, second = two_items

        response = api_client.post(
            BASE_URL,
            _sale_payload((first.id, 12_500_000), (second.id, 9_500_000)),
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body['total_toman'] == 22_000_000
        assert [line['serial'] for line in body['lines']] == ['PF-A', 'PF-B']
        assert body['lines'][0]['product_id'] == first.product_id

        sold = ItemModel.objects.get(pk=first.pk)
        assert sold.status == 'SOLD'
        assert sold.sold_price_toman == 12_500_000
        assert sold.sale_channel == 'DIRECT'
        assert sold.buyer_name == 'Sara Rahimi'
        assert sold.sold_at is not None

        movements = InventoryMovementModel.objects.filter(movement='SALE_OUT')
        assert movements.count() == 2
        assert set(movements.values_list('reference', flat=True)) == {'INV-1001'}

    def test_duplicate_item_in_lines(self, api_client, two_items):
        first, _ = two_items

        response = api_client.post(
            BASE_URL,
            _sale_payload((first.id, 1_000), (first.id, 2_000)),
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == 'Each item can appear only once per sale'
        assert not SaleModel.objects.exists()

    def test_missing_items(self, api_client, two_items):
        first, _ = two_items

        response = api_client.post(
            BASE_URL,
            _sale_payload((first.id, 1_000), (9998, 1_000), (9999, 1_000)),
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['error'] == 'Item(s) not found: 9998, 9999'
        assert ItemModel.objects.get(pk=first.pk).status == 'LISTED'

    def test_already_sold_item_rolls_back_whole_sale(self, api_client, two_items, create_item, laptop):
        first, _ = two_items
        gone = create_item(laptop, serial='PF-GONE', status='SOLD', sold_price_toman=1)

        response = api_client.post(
            BASE_URL,
            _sale_payload((first.id, 1_000), (gone.id, 1_000)),
            format='json',
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()['error'] == 'Item PF-GONE is already sold'
        assert ItemModel.objects.get(pk=first.pk).status == 'LISTED'
        assert not SaleLineModel.objects.exists()
        assert not InventoryMovementModel.objects.exists()

    @pytest.mark.parametrize('overrides', [
        {'lines': []},
        {'customer_name': '  '},
        {'channel': 'MARKET'},
    ])
    def test_invalid_payload(self, api_client, two_items, overrides):
        first, _ = two_items

        response = api_client.post(BASE_URL, _sale_payload((first.id, 1_000), **overrides), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestSaleReadAPI:

    def test_list_with_counts(self, api_client, two_items, sale_service):
        first, second = two_items
        sale_service.create_sale(
            customer_name='Sara Rahimi',
            channel='ONLINE',
            lines=[{'item_id': first.id, 'unit_toman': 1}, {'item_id': second.id, 'unit_toman': 2}],
        )

        response = api_client.get(BASE_URL)

        assert response.status_code == status.HTTP_200_OK
        [summary] = response.json()
        assert summary['total_toman'] == 3
        assert summary['total_items'] == 2
        assert summary['fulfilled_items'] == 2

    def test_get_missing(self, api_client, db):
        response = api_client.get(f'{BASE_URL}9999/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['error'] == 'Sale not found'


@pytest.mark.django_db
class TestSaleDeleteAPI:

    def test_delete_relists_items(self, api_client, two_items, sale_service):
        first, second = two_items
        sale = sale_service.create_sale(
            customer_name='Sara Rahimi',
            channel='DIRECT',
            lines=[{'item_id': first.id, 'unit_toman': 5}, {'item_id': second.id, 'unit_toman': 6}],
        )
        InventoryMovementModel.objects.create(item=first, movement='ADJUSTMENT')

        response = api_client.delete(f'{BASE_URL}{sale.id}/')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not SaleModel.objects.exists()
        assert not SaleLineModel.objects.exists()
        for item in ItemModel.objects.filter(pk__in=[first.pk, second.pk]):
            assert item.status == 'LISTED'
            assert item.sold_at is None
            assert item.sold_price_toman is None
            assert item.sale_channel is None
            assert item.buyer_name is None
        assert list(InventoryMovementModel.objects.values_list('movement', flat=True)) == ['ADJUSTMENT']

    def test_relisted_item_can_be_sold_again(self, api_client, two_items, sale_service):
        first, _ = two_items
        sale = sale_service.create_sale(
            customer_name='A', channel='DIRECT', lines=[{'item_id': first.id, 'unit_toman': 5}],
        )
        api_client.delete(f'{BASE_URL}{sale.id}/')

        response = api_client.post(BASE_URL, _sale_payload((first.id, 7)), format='json')

        assert response.status_code == status.HTTP_201_CREATED

    def test_delete_missing(self, api_client, db):
        response = api_client.delete(f'{BASE_URL}9999/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
