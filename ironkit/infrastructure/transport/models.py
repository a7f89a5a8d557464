"""
Shared Response Model

Both services confirm writes with a ``{"msg": "..."}`` body.

Author: Platform Team
Date: 2026-10-02
"""

from pydantic import BaseModel, ConfigDict


class ResponseMsg(BaseModel):
    """
    Body carrying a confirmation string in its ``msg`` field.

    Success is signalled by an exact match on ``msg``, not by HTTP status.
    """

    model_config = ConfigDict(extra="ignore")

    msg: str | None = None

    def has_expected_message(self, expected: str) -> bool:
        return self.msg == expected
