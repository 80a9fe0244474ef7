from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.db import transaction
from phonenumber_field.serializerfields import PhoneNumberField
from rest_framework import serializers

from wallet.serializers import WalletSerializer
from wallet.services import wallet_for

User = get_user_model()


class FarmUserSerializer(serializers.ModelSerializer):
    """
    A farm user as shown on their profile. The wallet balances ride along so
    the app can show what is available before a transfer.
    """
    full_name = serializers.CharField(source='get_full_name', read_only=True)
    role_display = serializers.CharField(source='get_role_display', read_only=True)
    phone = PhoneNumberField(region='KE', required=False, allow_null=True, allow_blank=True)
    wallet = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email', 'phone', 'first_name', 'last_name',
            'full_name', 'role', 'role_display', 'wallet', 'created_at'
        ]
        read_only_fields = ['id', 'username', 'role', 'created_at']

    def get_wallet(self, obj):
        return WalletSerializer(wallet_for(obj)).data


class FarmUserRegistrationSerializer(serializers.ModelSerializer):
    """New farm hands register themselves; managers are promoted in the admin."""
    password = serializers.CharField(write_only=True, validators=[validate_password], style={'input_type': 'password'})
    password_confirm = serializers.CharField(write_only=True, style={'input_type': 'password'})
    phone = PhoneNumberField(region='KE', required=False, allow_null=True, allow_blank=True)

    class Meta:
        model = User
        fields = [
            'username', 'email', 'phone', 'first_name', 'last_name',
            'password', 'password_confirm'
        ]

    def validate(self, attrs):
        if attrs['password'] != attrs.pop('password_confirm'):
            raise serializers.ValidationError({'password': 'Passwords do not match'})
        return attrs

    @transaction.atomic
    def create(self, validated_data):
        password = validated_data.pop('password')
        user = User(role=User.UserRole.USER, **validated_data)
        user.set_password(password)
        user.save()
        # Every farm user can receive transfers from the day they join
        wallet_for(user)
        return user
