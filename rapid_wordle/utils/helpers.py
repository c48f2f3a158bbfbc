"""
Helper Functions

Contains utility functions used throughout the application.
"""

from flask import request


def get_client_identity(request_obj=None) -> str:
    """Socket.IO session id when available, otherwise the remote address."""
    if request_obj is None:
        request_obj = request

    session_id = getattr(request_obj, 'sid', None)
    if session_id:
        return session_id

    return request_obj.remote_addr or 'unknown'
