# Generated manually for vaccine schedules and administrations
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
            name='VaccineSchedule',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('vaccine_name', models.CharField(help_text='Vaccine to administer (e.g., Newcastle, Gumboro)', max_length=200)),
                ('week_number', models.PositiveSmallIntegerField(help_text='Week of age the vaccine is due', validators=[django.core.validators.MinValueValidator(1)])),
                ('scheduled_date', models.DateField()),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('completed', 'Completed'), ('overdue', 'Overdue'), ('upcoming', 'Upcoming')], db_index=True, default='pending', max_length=20)),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'poultry_vaccine_schedules',
                'ordering': ['-scheduled_date', '-id'],
            },
        ),
        migrations.CreateModel(
            name='VaccineAdministration',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('administration_date', models.DateField()),
                ('full_flock_vaccinated', models.BooleanField(default=True)),
                ('head_count_vaccinated', models.PositiveIntegerField(blank=True, help_text='Birds vaccinated when not the full flock', null=True)),
                ('cost', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('currency', models.CharField(default='KES', max_length=10)),
                ('notes', models.TextField(blank=True)),
                ('administered_by', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='vaccine_administrations', to=settings.AUTH_USER_MODEL)),
                ('schedule', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='administrations', to='medication_management.vaccineschedule')),
            ],
            options={
                'db_table': 'poultry_vaccine_administrations',
                'ordering': ['-administration_date', '-id'],
            },
        ),
    ]
