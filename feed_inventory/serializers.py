"""
Serializers for suppliers and feed intakes.

FeedIntakeSerializer.validate() derives the quantity, unit cost and total
that were not entered.
"""

from phonenumber_field.serializerfields import PhoneNumberField
from rest_framework import serializers

from core.money import quantize
from flock_management.models import FeedInputMode, FeedType

from .models import FeedIntake, Supplier
from .units import bags_to_kg, kg_per_bag, kg_to_bags


# =============================================================================
# SUPPLIER SERIALIZERS
# =============================================================================

class SupplierSerializer(serializers.ModelSerializer):
    phone = PhoneNumberField(region='KE', required=False, allow_null=True, allow_blank=True)
    intake_count = serializers.IntegerField(source='feed_intakes.count', read_only=True)

    class Meta:
        model = Supplier
        fields = [
            'id', 'name', 'contact_person', 'phone', 'email', 'address', 'notes',
            'intake_count', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'name': {
                'error_messages': {
                    'required': 'Supplier name is required',
                    'blank': 'Supplier name is required',
                    'null': 'Supplier name is required',
                }
            },
        }


# =============================================================================
# FEED INTAKE SERIALIZERS
# =============================================================================

class FeedIntakeSerializer(serializers.ModelSerializer):
    """Feed deliveries; exactly one of bags / kg needs to be entered"""
    supplier_id = serializers.PrimaryKeyRelatedField(
        source='supplier',
        queryset=Supplier.objects.all(),
        required=False,
        allow_null=True
    )
    feed_name = serializers.CharField(source='display_feed_name', read_only=True)
    created_by_name = serializers.CharField(source='created_by.get_full_name', read_only=True, allow_null=True)

    class Meta:
        model = FeedIntake
        fields = [
            'id', 'delivery_date', 'feed_type', 'custom_feed_name', 'feed_name',
            'supplier_id', 'supplier_name', 'input_mode',
            'bags_received', 'kg_received', 'cost_per_bag', 'cost_per_kg', 'total_cost',
            'currency', 'batch_number', 'invoice_number', 'notes', 'received_by',
            'created_by', 'created_by_name', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_by', 'created_at', 'updated_at']
        extra_kwargs = {
            'total_cost': {'required': False},
        }

    def validate(self, attrs):
        def current(field):
            if field in attrs:
                return attrs[field]
            return getattr(self.instance, field, None) if self.instance else None

        if current('feed_type') == FeedType.OTHER and not current('custom_feed_name'):
            raise serializers.ValidationError({
                'custom_feed_name': 'Custom feed name is required when feed type is Other'
            })

        per_bag = kg_per_bag()
        input_mode = current('input_mode')

        if input_mode == FeedInputMode.BAGS:
            bags = current('bags_received')
            if not bags or bags <= 0:
                raise serializers.ValidationError({'bags_received': 'Enter the number of bags received'})
            bags, kg = quantize(bags), bags_to_kg(bags, per_bag)
        else:
            kg = current('kg_received')
            if not kg or kg <= 0:
                raise serializers.ValidationError({'kg_received': 'Enter the kilograms received'})
            bags, kg = kg_to_bags(kg, per_bag), quantize(kg)

        cost_per_bag = current('cost_per_bag')
        cost_per_kg = current('cost_per_kg')
        if input_mode == FeedInputMode.BAGS and cost_per_bag is not None:
            cost_per_kg = quantize(cost_per_bag / per_bag)
        elif input_mode == FeedInputMode.KG and cost_per_kg is not None:
            cost_per_bag = quantize(cost_per_kg * per_bag)
        elif cost_per_bag is not None:
            cost_per_kg = quantize(cost_per_bag / per_bag)
        elif cost_per_kg is not None:
            cost_per_bag = quantize(cost_per_kg * per_bag)

        pricing_fields = {'input_mode', 'bags_received', 'kg_received', 'cost_per_bag', 'cost_per_kg'}
        if attrs.get('total_cost') is not None:
            total_cost = attrs['total_cost']
        elif self.instance is not None and not pricing_fields & set(attrs):
            total_cost = self.instance.total_cost
        elif cost_per_bag is not None and input_mode == FeedInputMode.BAGS:
            total_cost = quantize(bags * cost_per_bag)
        elif cost_per_kg is not None:
            total_cost = quantize(kg * cost_per_kg)
        else:
            total_cost = current('total_cost')

        if not total_cost or total_cost <= 0:
            raise serializers.ValidationError({
                'total_cost': 'A positive total cost is required (enter it or a unit cost)'
            })

        supplier = current('supplier')
        if supplier is not None and not current('supplier_name'):
            attrs['supplier_name'] = supplier.name

        attrs.update({
            'bags_received': bags,
            'kg_received': kg,
            'cost_per_bag': cost_per_bag,
            'cost_per_kg': cost_per_kg,
            'total_cost': total_cost,
        })
        return attrs
