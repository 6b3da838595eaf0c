"""Shared pydantic plumbing for request and response models"""

import re
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

TRADE_DATE_PATTERN = re.compile(r"^\d{8}$")
TRADE_MONTH_PATTERN = re.compile(r"^\d{6}$")


def _none_to_empty(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _none_to_zero(value: Any) -> Any:
    if value is None:
        return 0
    if isinstance(value, str):
        cleaned = value.strip().replace(",", "")
        if cleaned in ("", "-", "--"):
            return 0
        return cleaned
    return value


# The exchange sends null for missing strings and numbers, and often sends
# numbers as strings with thousands separators.
NullableStr = Annotated[str, BeforeValidator(_none_to_empty)]
NullableInt = Annotated[int, BeforeValidator(_none_to_zero)]
NullableFloat = Annotated[float, BeforeValidator(_none_to_zero)]

# 1 futures, 2 options; accepted as int or str, sent as str
TradeType = Annotated[Literal["1", "2"], BeforeValidator(str)]


class ResponseModel(BaseModel):
    """Base for records decoded from the exchange"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class RequestModel(BaseModel):
    """Base for request bodies sent to the exchange"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        loc_by_alias=False,
    )

    def to_body(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON body the exchange expects"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


def validate_trade_date(value: str | None) -> str | None:
    if value is None:
        return value
    value = value.replace("-", "")
    if not TRADE_DATE_PATTERN.match(value):
        raise ValueError("trade date must be in YYYYMMDD format")
    return value


def validate_trade_month(value: str | None) -> str | None:
    if value is None:
        return value
    value = value.replace("-", "")
    if not TRADE_MONTH_PATTERN.match(value):
        raise ValueError("trade month must be in YYYYMM format")
    return value


def validate_required(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("value is required")
    return value.strip()
