"""
Dashboard alert model.
"""

from datetime import datetime

from pydantic import ConfigDict

from .base import CamelModel
from .enums import AlertType


class Alert(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: AlertType
    message: str
    timestamp: datetime
    product_id: str | None = None
