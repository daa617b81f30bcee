"""
Data models for the application.

This module contains all data models used throughout the application.
"""

from trip_helper.models.chat import User, Room, slugify
from trip_helper.models.association import AssociationModel, AssociationRecord
from trip_helper.models.context import DispatchContext

__all__ = [
    "User",
    "Room",
    "slugify",
    "AssociationModel",
    "AssociationRecord",
    "DispatchContext",
]
