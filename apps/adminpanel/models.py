from django.contrib.auth import hashers
from django.db import models
import uuid


class AdminUser(models.Model):
    """
    Operator account for the admin panel.

    Independent of accounts.User: admins cannot send receipts and users
    cannot reach the admin panel.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=150, unique=True)
    password = models.CharField(max_length=128)

    # Bumped on logout; tokens carrying an older version are rejected
    token_version = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'admin_users'
        ordering = ['username']

    def __str__(self):
        return self.username

    @property
    def is_authenticated(self):
        return True

    @property
    def is_anonymous(self):
        return False

    def set_password(self, raw_password):
        self.password = hashers.make_password(raw_password)

    def check_password(self, raw_password):
        return hashers.check_password(raw_password, self.password)
