"""
Alerts module serializers.
"""
from rest_framework import serializers


class AlertItemSerializer(serializers.Serializer):
    """Fields shared by every alert row."""
    id = serializers.IntegerField()
    product_name = serializers.CharField()
    serial = serializers.CharField()
    status = serializers.CharField()
    listed_price_toman = serializers.IntegerField(allow_null=True)
    listed_channel = serializers.CharField(allow_null=True)
    sale_channel = serializers.CharField(allow_null=True)
    sold_price_toman = serializers.IntegerField(allow_null=True)
    cost_toman = serializers.IntegerField()


class AgingAlertItemSerializer(AlertItemSerializer):
    acquired_at = serializers.DateTimeField()
    days_in_stock = serializers.IntegerField()


class StaleAlertItemSerializer(AlertItemSerializer):
    listed_at = serializers.DateTimeField()
    days_listed = serializers.IntegerField()


class MarginAlertItemSerializer(AlertItemSerializer):
    sold_at = serializers.DateTimeField(allow_null=True)
    margin_toman = serializers.IntegerField()
    margin_percent = serializers.FloatField()


class AgingSectionSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    threshold_days = serializers.IntegerField()
    items = AgingAlertItemSerializer(many=True)


class StaleSectionSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    threshold_days = serializers.IntegerField()
    items = StaleAlertItemSerializer(many=True)


class MarginSectionSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    threshold_percent = serializers.FloatField()
    items = MarginAlertItemSerializer(many=True)


class AlertSummarySerializer(serializers.Serializer):
    """Alert summary response."""
    aging = AgingSectionSerializer()
    stale = StaleSectionSerializer()
    margin = MarginSectionSerializer()
