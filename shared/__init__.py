"""
Shared Kernel

Cross-app plumbing used by every domain app: the API error envelope and
request logging middleware.
"""
