from datetime import datetime

from pydantic import Field

from guestportal.core.db import MongoModel
from guestportal.utils import now


class AuditRecord(MongoModel):
    """Completed guest login.

    Indexed on cache_id - unique.
    """

    cache_id: str
    device_id: str
    ap_id: str
    name: str
    email: str
    duration: int  # Minutes granted
    created_at: datetime = Field(default_factory=now)
