from drf_spectacular.extensions import OpenApiAuthenticationExtension
from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header

from .services import verify_admin_token, AdminTokenError


class AdminTokenAuthentication(BaseAuthentication):
    """
    Signed admin token authentication.

    Clients send ``Authorization: Admin <token>``. Other schemes (user
    ``Bearer`` JWTs included) are ignored, leaving the request anonymous.
    """

    keyword = 'Admin'

    def authenticate(self, request):
        auth = get_authorization_header(request).split()

        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None

        if len(auth) != 2:
            raise exceptions.AuthenticationFailed('Invalid admin token header.')

        try:
            token = auth[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed('Invalid admin token header.')

        try:
            admin = verify_admin_token(token)
        except AdminTokenError as e:
            raise exceptions.AuthenticationFailed(str(e))

        return (admin, token)

    def authenticate_header(self, request):
        return self.keyword


class AdminTokenScheme(OpenApiAuthenticationExtension):
    """OpenAPI security scheme for AdminTokenAuthentication."""

    target_class = 'apps.adminpanel.authentication.AdminTokenAuthentication'
    name = 'adminToken'

    def get_security_definition(self, auto_schema):
        return {
            'type': 'apiKey',
            'in': 'header',
            'name': 'Authorization',
            'description': 'Admin token prefixed with "Admin ", e.g. "Admin abc123..."',
        }
