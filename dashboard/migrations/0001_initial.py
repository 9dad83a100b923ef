from django.db import migrations, models
import django.db.models.deletion
import dashboard.models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Customer',
            fields=[
                ('id', models.CharField(default=dashboard.models.generate_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('email', models.EmailField(max_length=254)),
                ('image_url', models.CharField(blank=True, max_length=255)),
            ],
            options={
                'db_table': 'customers',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Revenue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('month', models.CharField(max_length=4, unique=True)),
                ('revenue', models.IntegerField()),
            ],
            options={
                'db_table': 'revenue',
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Invoice',
            fields=[
                ('id', models.CharField(default=dashboard.models.generate_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ('amount', models.IntegerField()),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('paid', 'Paid')], db_index=True, max_length=20)),
                ('date', models.DateField(db_index=True)),
                ('customer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='invoices', to='dashboard.customer')),
            ],
            options={
                'db_table': 'invoices',
                'ordering': ['-date'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('amount__gt', 0)), name='invoice_amount_positive'),
                    models.CheckConstraint(condition=models.Q(('status__in', ['pending', 'paid'])), name='invoice_status_valid'),
                ],
            },
        ),
    ]
