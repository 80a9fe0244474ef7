# Generated manually for expenses
import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('flock_management', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Expense',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('category', models.CharField(choices=[('Feed', 'Feed'), ('Medicine', 'Medicine'), ('Infrastructure', 'Infrastructure'), ('Salary', 'Salary'), ('Other', 'Other')], db_index=True, help_text='Main expense category', max_length=20)),
                ('description', models.CharField(help_text='Brief description of the expense', max_length=255)),
                ('expense_date', models.DateField(db_index=True, help_text='Date expense was incurred')),
                ('quantity', models.DecimalField(decimal_places=2, default=Decimal('1.00'), help_text='Quantity (hours, units, kWh, etc.)', max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('unit', models.CharField(default='unit', help_text='Unit of measurement', max_length=50)),
                ('unit_cost', models.DecimalField(blank=True, decimal_places=2, help_text='Cost per unit', max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('total_amount', models.DecimalField(decimal_places=2, help_text='Total expense amount', max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('amount_paid', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('balance_due', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='total_amount - amount_paid (auto-calculated)', max_digits=12)),
                ('payment_status', models.CharField(choices=[('paid', 'Paid'), ('partial', 'Partial'), ('pending', 'Pending')], default='pending', help_text='Payment status (auto-calculated)', max_length=10)),
                ('payment_method', models.CharField(blank=True, help_text='Payment method (Cash, M-Pesa, Bank, etc.)', max_length=50)),
                ('reference', models.CharField(blank=True, help_text='Receipt or reference number', max_length=100)),
                ('payee', models.CharField(blank=True, help_text='Name of person/company paid', max_length=200)),
                ('currency', models.CharField(default='KES', max_length=10)),
                ('notes', models.TextField(blank=True, help_text='Additional notes')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('batch', models.ForeignKey(blank=True, help_text='Specific batch (leave blank for farm-level expenses)', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='expenses', to='flock_management.batch')),
                ('created_by', models.ForeignKey(blank=True, help_text='User who recorded this expense', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='expenses_created', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Expense',
                'verbose_name_plural': 'Expenses',
                'db_table': 'poultry_expenses',
                'ordering': ['-expense_date', '-created_at'],
                'indexes': [models.Index(fields=['category', 'expense_date'], name='expense_category_date_idx'), models.Index(fields=['batch', 'expense_date'], name='expense_batch_date_idx')],
            },
        ),
    ]
