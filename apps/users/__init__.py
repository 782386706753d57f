"""Users app package.

Defines the marketplace account model with guest/host/admin roles, the
JWT authentication flows and profile endpoints. Use
``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout the
project.
"""
