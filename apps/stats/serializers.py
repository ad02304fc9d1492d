from rest_framework import serializers


class OverviewSerializer(serializers.Serializer):
    active_staff = serializers.IntegerField(read_only=True)
    daily_orders = serializers.IntegerField(read_only=True)
    menu_items = serializers.IntegerField(read_only=True)
    student_users = serializers.IntegerField(read_only=True)
