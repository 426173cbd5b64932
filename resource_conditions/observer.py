import json
import logging
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from resource_conditions.app.utils import get_timestamp

logger = logging.getLogger(__name__)

CONDITION_ADDED = "ConditionAdded"
CONDITION_TRANSITIONED = "ConditionTransitioned"


class EventData(BaseModel):
    event: str
    timestamp: Optional[datetime] = None
    data: Dict[str, Any]


class Observer:
    def __init__(self):
        self.callbacks: List[Callable[[EventData], None]] = []

    def register(self, callback: Callable[[EventData], None]):
        self.callbacks.append(callback)

    def notify(self, event: str, data: Dict[str, Any]):
        for callback in self.callbacks:
            try:
                event_data = EventData(event=event, data=data, timestamp=get_timestamp())
                callback(event_data)
            except Exception as e:
                name = getattr(callback, "__name__", repr(callback))
                logger.warning(f"Callback {name} failed with exception for event {event}: {e}")


def custom_serializer(obj):
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, Path):
        return obj.as_posix()
    raise TypeError(f"Type {type(obj)} not serializable")


def gen_json_logging_callback(logger: logging.Logger) -> Callable[[EventData], None]:
    def json_logging(event_data: EventData):
        json_str = json.dumps({"event": event_data.event, **event_data.data}, default=custom_serializer)
        logger.info(json_str)

    return json_logging


def gen_recording_callback(events: List[EventData]) -> Callable[[EventData], None]:
    def record(event_data: EventData):
        events.append(event_data)

    return record
