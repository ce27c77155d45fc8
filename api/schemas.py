"""Request payloads accepted by the dictation API."""
from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr

from dictation.config import ComparisonOptions


class CompareRequest(BaseModel):
    reference: StrictStr
    user_input: StrictStr
    ignore_case: StrictBool = True

    def options(self) -> ComparisonOptions:
        return ComparisonOptions(ignore_case=self.ignore_case)


class NormalizeRequest(BaseModel):
    text: StrictStr


class SentenceResultRequest(CompareRequest):
    sentence_index: StrictInt = Field(ge=0)
