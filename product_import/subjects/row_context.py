"""State of the row the bunch loop is processing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class RowContext:
    """
    Updated by the bunch loop before each row, read by the subject.

    Attributes:
        filename: CSV file the bunch has been read from
        line_number: Line of the actual row in that file
        last_entity_id: Entity ID of the product the actual row belongs to
        store_id: Store the values of the actual row are persisted for
    """
    filename: Optional[str] = None
    line_number: Optional[int] = None
    last_entity_id: Optional[int] = None
    store_id: int = 0
