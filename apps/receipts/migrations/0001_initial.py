# Generated manually for the receipts app

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Receipt',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('customer_name', models.CharField(max_length=255)),
                ('customer_email', models.EmailField(max_length=255)),
                ('billing_address', models.TextField()),
                ('product_name', models.CharField(max_length=255)),
                ('product_image_url', models.URLField(blank=True, max_length=500)),
                ('product_price', models.PositiveIntegerField(validators=[MinValueValidator(1)])),
                ('quantity', models.PositiveIntegerField(validators=[MinValueValidator(1)])),
                ('tax_rate', models.PositiveIntegerField(validators=[MaxValueValidator(10000)])),
                ('shipping', models.PositiveIntegerField(default=0)),
                ('subtotal', models.PositiveBigIntegerField()),
                ('tax', models.PositiveBigIntegerField()),
                ('total', models.PositiveBigIntegerField()),
                ('order_number', models.CharField(max_length=20)),
                ('email_sent', models.BooleanField(default=False)),
                ('email_sent_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='receipts', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'receipts',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddIndex(
            model_name='receipt',
            index=models.Index(fields=['user', 'created_at'], name='receipts_user_created_idx'),
        ),
        migrations.AddIndex(
            model_name='receipt',
            index=models.Index(fields=['email_sent', 'created_at'], name='receipts_sent_created_idx'),
        ),
    ]
