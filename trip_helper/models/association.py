"""
Association store keys.

Records in the association store are addressed by a model scope plus a
free-form identifier string.
"""

from dataclasses import dataclass
from enum import Enum


class AssociationModel(str, Enum):
    """Scope of an association record."""
    ROOM = "room"
    USER = "user"


@dataclass(frozen=True)
class AssociationRecord:
    """Composite key of a record in the association store."""
    model: AssociationModel
    id: str

    def __str__(self) -> str:
        return f"{self.model.value}:{self.id}"
