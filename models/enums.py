"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class ProductStatus(str, Enum):
    """Lifecycle status of a catalog product"""

    ACTIVE = "active"
    DISCONTINUED = "discontinued"
    PROMOTIONAL = "promotional"


class SortOrder(str, Enum):
    """Direction applied by the product query pipeline"""

    ASC = "asc"
    DESC = "desc"


class MarginStatus(str, Enum):
    """Health bucket for a margin percentage"""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    WARNING = "warning"
    NEUTRAL = "neutral"


class KPITrend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class SuggestionType(str, Enum):
    """Kinds of margin-improvement suggestions"""

    PRICE_ADJUSTMENT = "price_adjustment"
    SUPPLIER_CHANGE = "supplier_change"
    PROMOTION_ADJUSTMENT = "promotion_adjustment"
    BUNDLE_SUGGESTION = "bundle_suggestion"


class SuggestionStatus(str, Enum):
    """Review state of a suggestion"""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class CauseTrend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class AlertType(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class MessageRole(str, Enum):
    """Sender of a chat message"""

    USER = "user"
    ASSISTANT = "assistant"
