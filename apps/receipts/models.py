from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils import timezone
import uuid


class Receipt(models.Model):
    """
    One generated receipt document and its delivery outcome.

    Money fields are integer minor units (cents); tax_rate is basis points.
    Amounts are fixed at creation; only the email status changes afterwards.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='receipts'
    )

    # Customer
    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField(max_length=255)
    billing_address = models.TextField()

    # Product
    product_name = models.CharField(max_length=255)
    product_image_url = models.URLField(max_length=500, blank=True)
    product_price = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    tax_rate = models.PositiveIntegerField(validators=[MaxValueValidator(10000)])
    shipping = models.PositiveIntegerField(default=0)

    # Derived amounts
    subtotal = models.PositiveBigIntegerField()
    tax = models.PositiveBigIntegerField()
    total = models.PositiveBigIntegerField()

    # Cosmetic storefront-style number, not unique
    order_number = models.CharField(max_length=20)

    # Delivery
    email_sent = models.BooleanField(default=False)
    email_sent_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'receipts'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'created_at'], name='receipts_user_created_idx'),
            models.Index(fields=['email_sent', 'created_at'], name='receipts_sent_created_idx'),
        ]

    def __str__(self):
        return f"#{self.order_number} - {self.product_name} ({self.customer_email})"

    def mark_sent(self, sent_at=None):
        """Record a confirmed delivery; the only post-creation mutation."""
        self.email_sent = True
        self.email_sent_at = sent_at or timezone.now()
        self.save(update_fields=['email_sent', 'email_sent_at'])
