"""WSGI config for StayFinder project.

Exposes Django wrapped by the Socket.IO WSGI middleware: requests under
``/socket.io/`` reach the real-time server, everything else goes to Django.
"""

import os

import socketio  # type: ignore
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

django_application = get_wsgi_application()

from apps.realtime.server import sio  # noqa: E402  (needs configured settings)

application = socketio.WSGIApp(sio, django_application)
