from rest_framework import serializers

from .models import VaccineAdministration, VaccineSchedule
from .services import mark_schedule_completed, record_administration


class VaccineScheduleSerializer(serializers.ModelSerializer):
    administration_count = serializers.IntegerField(source='administrations.count', read_only=True)

    class Meta:
        model = VaccineSchedule
        fields = [
            'id', 'vaccine_name', 'week_number', 'scheduled_date', 'status',
            'description', 'administration_count', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class VaccineAdministrationSerializer(serializers.ModelSerializer):
    """
    Creating an administration completes its schedule.
    """
    schedule_id = serializers.PrimaryKeyRelatedField(
        source='schedule',
        queryset=VaccineSchedule.objects.all()
    )
    vaccine_name = serializers.CharField(source='schedule.vaccine_name', read_only=True)

    class Meta:
        model = VaccineAdministration
        fields = [
            'id', 'schedule_id', 'vaccine_name', 'administration_date',
            'full_flock_vaccinated', 'head_count_vaccinated', 'cost', 'currency',
            'notes', 'administered_by', 'created_by', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_by', 'created_at', 'updated_at']

    def validate(self, attrs):
        instance = self.instance
        full_flock = attrs.get(
            'full_flock_vaccinated',
            instance.full_flock_vaccinated if instance else True
        )
        head_count = attrs.get(
            'head_count_vaccinated',
            instance.head_count_vaccinated if instance else None
        )

        if full_flock:
            attrs['head_count_vaccinated'] = None
        elif not head_count:
            raise serializers.ValidationError({
                'head_count_vaccinated': 'Enter the number of birds vaccinated when the full flock was not vaccinated'
            })
        return attrs

    def create(self, validated_data):
        return record_administration(validated_data)

    def update(self, instance, validated_data):
        previous_schedule_id = instance.schedule_id
        instance = super().update(instance, validated_data)
        if instance.schedule_id != previous_schedule_id:
            mark_schedule_completed(instance.schedule_id)
        return instance
