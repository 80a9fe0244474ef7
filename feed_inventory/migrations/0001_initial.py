# Generated manually for suppliers and feed intakes
import django.core.validators
import django.db.models.deletion
import phonenumber_field.modelfields
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Supplier',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('contact_person', models.CharField(blank=True, max_length=255)),
                ('phone', phonenumber_field.modelfields.PhoneNumberField(blank=True, help_text='Phone number (Kenya format: +254XXXXXXXXX)', max_length=128, null=True, region='KE')),
                ('email', models.EmailField(blank=True, max_length=254)),
                ('address', models.TextField(blank=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'poultry_suppliers',
                'ordering': ['-created_at', '-id'],
            },
        ),
        migrations.CreateModel(
            name='FeedIntake',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('delivery_date', models.DateField(help_text='Date the feed was delivered')),
                ('feed_type', models.CharField(choices=[('Starters Mash', 'Starters Mash'), ('Growers Mash', 'Growers Mash'), ('Layers Mash', 'Layers Mash'), ('Finisher Mash', 'Finisher Mash'), ('Other', 'Other')], max_length=20)),
                ('custom_feed_name', models.CharField(blank=True, help_text='Required when feed type is Other', max_length=255)),
                ('supplier_name', models.CharField(blank=True, max_length=255)),
                ('input_mode', models.CharField(choices=[('bags', 'Bags'), ('kg', 'Kilograms')], max_length=10)),
                ('bags_received', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('kg_received', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('cost_per_bag', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('cost_per_kg', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('total_cost', models.DecimalField(decimal_places=2, help_text='Entered directly or quantity × unit cost', max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('currency', models.CharField(default='KES', max_length=10)),
                ('batch_number', models.CharField(blank=True, help_text='Manufacturer batch number', max_length=100)),
                ('invoice_number', models.CharField(blank=True, help_text='Supplier invoice number', max_length=100)),
                ('notes', models.TextField(blank=True)),
                ('received_by', models.CharField(help_text='Person who received the delivery', max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='feed_intakes_created', to=settings.AUTH_USER_MODEL)),
                ('supplier', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='feed_intakes', to='feed_inventory.supplier')),
            ],
            options={
                'verbose_name': 'Feed Intake',
                'verbose_name_plural': 'Feed Intakes',
                'db_table': 'poultry_feed_intakes',
                'ordering': ['-delivery_date', '-id'],
            },
        ),
    ]
