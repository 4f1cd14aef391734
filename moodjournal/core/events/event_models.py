"""Domain event envelope."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class EventRecord:
    event_type: str
    payload: Dict[str, Any] = field(default_factory=dict)
    user_id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
