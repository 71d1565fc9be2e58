from __future__ import annotations

from typing import Any, Dict, List
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FunctionCall(BaseModel):
    """One function invocation requested by the conversational model."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    name: str
    args: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("args", mode="before")
    @classmethod
    def _default_args(cls, value: Any) -> Any:
        return {} if value is None else value


class ToolCall(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    function_calls: List[FunctionCall] = Field(default_factory=list, alias="functionCalls")


class FunctionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    response: Dict[str, Any]

    @classmethod
    def for_call(cls, call: FunctionCall, output: Dict[str, Any]) -> "FunctionResponse":
        return cls(id=call.id, name=call.name, response={"output": output})

    @property
    def output(self) -> Dict[str, Any]:
        return self.response.get("output", {})


class ToolResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    function_responses: List[FunctionResponse] = Field(default_factory=list, alias="functionResponses")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
