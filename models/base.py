"""
Shared Pydantic base class for API-facing records.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys.

    Attributes stay snake_case in Python; ``model_dump(by_alias=True)``
    produces the keys the dashboard frontend expects (``marginDelta``,
    ``lastUpdated``, ...). Either spelling is accepted on input.
    ``NaN`` and infinities are rejected in every float field.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
