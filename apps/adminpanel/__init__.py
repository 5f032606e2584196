"""
Admin Panel App - Operator Access and Credit Management

Operators are AdminUser accounts, separate from end users. They log in with
a username and password and receive a signed, expiring token that every
admin endpoint requires in an ``Authorization: Admin <token>`` header.

Key Features:
- Provisioning command that requires an externally supplied password
- Signed admin tokens (django.core.signing) with expiry and logout revocation
- User and receipt listings, failed-delivery filter, summary statistics
- Credit grants of 1-1000 per call
"""
