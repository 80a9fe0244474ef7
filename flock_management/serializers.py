"""
Read serializers for batches, coop allocations and daily logs.

Writes go through flock_management.services, which owns the derivation
rules; these serializers only shape responses.
"""

from rest_framework import serializers

from .models import Batch, Coop, CoopAllocation, DailyLog


# =============================================================================
# COOP SERIALIZERS
# =============================================================================

class CoopSerializer(serializers.ModelSerializer):
    """Coop registry entries, writable through the generic views"""
    occupied = serializers.IntegerField(read_only=True)

    class Meta:
        model = Coop
        fields = [
            'id', 'code', 'name', 'capacity', 'occupied', 'is_active', 'notes',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_capacity(self, value):
        """A coop cannot shrink below the birds already placed in it"""
        if value is not None and self.instance is not None and value < self.instance.occupied:
            raise serializers.ValidationError(
                f"Capacity {value} is below the {self.instance.occupied} birds currently allocated"
            )
        return value


class CoopAllocationSerializer(serializers.ModelSerializer):
    batch_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = CoopAllocation
        fields = [
            'id', 'batch_id', 'coop_id', 'allocated_quantity', 'placement_date',
            'initial_mortality', 'notes', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


# =============================================================================
# BATCH SERIALIZERS
# =============================================================================

class BatchSerializer(serializers.ModelSerializer):
    """Batch with its coop allocations and derived flock figures"""
    coop_allocations = CoopAllocationSerializer(many=True, read_only=True)
    breed_display = serializers.CharField(source='get_breed_display', read_only=True)
    payment_status_display = serializers.CharField(source='get_payment_status_display', read_only=True)
    mortality = serializers.IntegerField(read_only=True)
    mortality_rate_percent = serializers.DecimalField(max_digits=6, decimal_places=2, read_only=True)
    days_on_farm = serializers.IntegerField(read_only=True)
    allocated_quantity = serializers.IntegerField(read_only=True)
    unallocated_quantity = serializers.IntegerField(read_only=True)

    class Meta:
        model = Batch
        fields = [
            'id', 'batch_id', 'name', 'supplier', 'breed', 'breed_display',
            'arrival_date', 'intake_age_days', 'initial_quantity', 'current_count',
            'mortality', 'mortality_rate_percent', 'days_on_farm',
            'currency', 'cost_per_bird', 'transport_cost', 'equipment_cost',
            'total_initial_cost', 'amount_paid_upfront', 'balance_due',
            'payment_status', 'payment_status_display', 'is_active',
            'allocated_quantity', 'unallocated_quantity', 'coop_allocations',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


# =============================================================================
# DAILY LOG SERIALIZERS
# =============================================================================

class DailyLogSerializer(serializers.ModelSerializer):
    batch_id = serializers.IntegerField(read_only=True, allow_null=True)
    batch_code = serializers.CharField(source='batch.batch_id', read_only=True, allow_null=True)
    batch_name = serializers.CharField(source='batch.name', read_only=True, allow_null=True)
    created_by_name = serializers.CharField(source='created_by.get_full_name', read_only=True, allow_null=True)

    class Meta:
        model = DailyLog
        fields = [
            'id', 'batch_id', 'batch_code', 'batch_name', 'log_date', 'mortality_count',
            'feed_type', 'feed_input_mode', 'feed_bags', 'feed_kg',
            'water_intake_liters', 'notes', 'logged_by', 'created_by', 'created_by_name',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields
