"""
Utility functions for the Employee API.
"""

import uuid

from django.utils import timezone


def generate_id():
    """Generate a 32-character hex ID (a UUID4 without hyphens)."""
    return uuid.uuid4().hex


def years_since(moment, now=None):
    """
    Whole years between `moment` and now, by calendar year only.

    Month and day are ignored, so the result can be one year too high
    before the anniversary.
    """
    if moment is None:
        return None
    now = now or timezone.now()
    return now.year - moment.year
