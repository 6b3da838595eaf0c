"""Response envelope and authentication payload"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .base import NullableInt, NullableStr


class Envelope(BaseModel):
    """Uniform wrapper around every DCE API response"""

    model_config = ConfigDict(extra="ignore")

    code: int
    msg: NullableStr = Field("", validation_alias=AliasChoices("msg", "message"))
    data: Any = None


class TokenPayload(BaseModel):
    """Data section of the access token response"""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    token_type: NullableStr = Field("Bearer", alias="tokenType")
    access_token: NullableStr = Field("", alias="token")
    expires_in: NullableInt = Field(0, alias="expiresIn")
