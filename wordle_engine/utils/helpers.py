"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional

from flask import request

from ..models.game import LetterStatus


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    return {'user_ip': request_obj.remote_addr or 'unknown'}


def status_value(status: Optional[LetterStatus]) -> Optional[str]:
    """JSON value of a letter status; None stays None for unused keys."""
    return status.value if status is not None else None
