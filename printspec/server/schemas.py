from typing import Any

from pydantic import BaseModel, Field, model_validator


class RecordRequest(BaseModel):
    isbn: str | None = Field(default=None, examples=["9780000000000"])
    title: str | None = None
    trim_height: str | None = Field(default=None, examples=["234"])
    trim_width: str | None = Field(default=None, examples=["156"])
    extent: str | None = Field(default=None, examples=["64"])
    paper: str | None = Field(default=None, examples=["Clairjet 90 gsm"])
    colour: str | None = Field(default=None, examples=["Colour"])
    quality: str | None = Field(default=None, examples=["Standard"])
    binding_style: str | None = Field(default=None, examples=["Cased"])

    @model_validator(mode="before")
    @classmethod
    def _coerce_numbers(cls, data: Any) -> Any:
        """Accept numeric JSON values for the dimension fields."""
        if isinstance(data, dict):
            for key in ("trim_height", "trim_width", "extent"):
                value = data.get(key)
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    data[key] = str(value)
        return data


class CheckPayload(BaseModel):
    name: str
    passed: bool
    message: str = ""


class OutcomePayload(BaseModel):
    label: str = ""
    isbn: str = ""
    title: str = ""
    filename: str = ""
    passed: bool | None = None
    checks: list[CheckPayload] = Field(default_factory=list)


class OutcomesRequest(BaseModel):
    outcomes: list[OutcomePayload] = Field(..., min_length=1)
