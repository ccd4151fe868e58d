"""Pending guest login models."""

from datetime import datetime
from typing import NewType

from pydantic import BaseModel, ConfigDict

CacheToken = NewType("CacheToken", str)


class PendingLogin(BaseModel):
    """Guest device waiting for the login form to be submitted.

    Created from the captive-portal redirect parameters, never modified afterwards.
    """

    token: CacheToken
    device_id: str  # Client MAC address
    ap_id: str  # Access point MAC address, empty if the controller did not send one
    created_at: datetime

    model_config = ConfigDict(frozen=True)
