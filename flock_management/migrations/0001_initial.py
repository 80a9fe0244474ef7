# Generated manually for batches, coops, coop allocations and daily logs
import django.core.validators
import django.db.models.deletion
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
            name='Coop',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(help_text='Identifier used by allocations (e.g., COOP-A)', max_length=100, unique=True)),
                ('name', models.CharField(blank=True, max_length=255)),
                ('capacity', models.PositiveIntegerField(blank=True, help_text='Maximum birds housed at once across all active batches', null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'poultry_coops',
                'ordering': ['code'],
            },
        ),
        migrations.CreateModel(
            name='Batch',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('batch_id', models.CharField(help_text='Human-readable identifier (e.g., batch_layers_20250101)', max_length=100, unique=True)),
                ('name', models.CharField(max_length=255)),
                ('supplier', models.CharField(help_text='Hatchery or supplier name', max_length=255)),
                ('breed', models.CharField(choices=[('Layers', 'Layers'), ('Broilers', 'Broilers'), ('Kenbro', 'Kenbro')], db_index=True, max_length=20)),
                ('arrival_date', models.DateField(help_text='Date birds arrived at farm')),
                ('intake_age_days', models.PositiveIntegerField(default=0, help_text='Age in days when birds arrived')),
                ('initial_quantity', models.PositiveIntegerField(help_text='Number of birds at arrival', validators=[django.core.validators.MinValueValidator(1)])),
                ('current_count', models.PositiveIntegerField(help_text='Current number of live birds')),
                ('currency', models.CharField(default='KES', max_length=10)),
                ('cost_per_bird', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ('transport_cost', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ('equipment_cost', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ('total_initial_cost', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='cost_per_bird × initial_quantity + transport + equipment, or a lump sum', max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ('amount_paid_upfront', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(0)])),
                ('balance_due', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='total_initial_cost - amount_paid_upfront', max_digits=12)),
                ('payment_status', models.CharField(choices=[('paid', 'Paid'), ('partial', 'Partial'), ('pending', 'Pending')], default='pending', max_length=20)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name_plural': 'Batches',
                'db_table': 'poultry_batches',
                'ordering': ['-arrival_date', '-id'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('current_count__gte', 0)), name='batch_current_count_non_negative'),
                    models.CheckConstraint(condition=models.Q(('current_count__lte', models.F('initial_quantity'))), name='batch_current_count_within_initial'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CoopAllocation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('coop_id', models.CharField(db_index=True, help_text='Coop code (matches Coop.code when the coop is registered)', max_length=100)),
                ('allocated_quantity', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('placement_date', models.DateField()),
                ('initial_mortality', models.PositiveIntegerField(default=0, help_text='Birds lost during placement')),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('batch', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='coop_allocations', to='flock_management.batch')),
            ],
            options={
                'db_table': 'poultry_coop_allocations',
                'ordering': ['id'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('allocated_quantity__gt', 0)), name='coop_allocation_quantity_positive'),
                ],
            },
        ),
        migrations.CreateModel(
            name='DailyLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('log_date', models.DateField(db_index=True)),
                ('mortality_count', models.PositiveIntegerField(default=0)),
                ('feed_type', models.CharField(choices=[('Starters Mash', 'Starters Mash'), ('Growers Mash', 'Growers Mash'), ('Layers Mash', 'Layers Mash'), ('Finisher Mash', 'Finisher Mash'), ('Other', 'Other')], max_length=20)),
                ('feed_input_mode', models.CharField(choices=[('bags', 'Bags'), ('kg', 'Kilograms')], max_length=10)),
                ('feed_bags', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('feed_kg', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10)),
                ('water_intake_liters', models.DecimalField(decimal_places=2, max_digits=10)),
                ('notes', models.TextField(blank=True)),
                ('logged_by', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('batch', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='daily_logs', to='flock_management.batch')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='daily_logs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'poultry_daily_logs',
                'ordering': ['-log_date', '-id'],
                'indexes': [models.Index(fields=['batch', 'log_date'], name='daily_log_batch_date_idx')],
            },
        ),
    ]
