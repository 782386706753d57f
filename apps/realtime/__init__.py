"""Real-time push over Socket.IO.

Holds the process-local registry of connected users and the socket server
that delivers ``booking-updated`` and ``notification`` events to them.
"""
