from __future__ import annotations

import inspect
import types
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union, get_args, get_origin

JsonSchema = Dict[str, Any]


def _json_type(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is None:
        mapping = {
            str: "string",
            int: "integer",
            float: "number",
            bool: "boolean",
            dict: "object",
            list: "array",
        }
        return mapping.get(annotation, "string")
    if origin in (list, List):
        return "array"
    if origin in (dict, Dict):
        return "object"
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _json_type(args[0]) if args else "string"
    return "string"


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    signature: inspect.Signature
    parameter_docs: Mapping[str, str] = field(default_factory=dict)

    @property
    def required(self) -> List[str]:
        return [
            param.name
            for param in self.signature.parameters.values()
            if param.default is inspect.Parameter.empty
        ]

    def parameter_schema(self, *, upper_case_types: bool = False) -> JsonSchema:
        properties: JsonSchema = {}
        for param in self.signature.parameters.values():
            json_type = _json_type(param.annotation)
            schema: JsonSchema = {"type": json_type.upper() if upper_case_types else json_type}
            if param.name in self.parameter_docs:
                schema["description"] = self.parameter_docs[param.name]
            properties[param.name] = schema
        schema = {"type": "OBJECT" if upper_case_types else "object", "properties": properties}
        if self.required:
            schema["required"] = self.required
        return schema

    def as_function_declaration(self) -> Dict[str, Any]:
        """Declaration in the shape the live session expects."""

        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameter_schema(upper_case_types=True),
        }

    def as_tool(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameter_schema(),
            },
        }


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    tags: Optional[Iterable[str]] = None,
    parameter_docs: Optional[Mapping[str, str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            signature=inspect.signature(func),
            parameter_docs=dict(parameter_docs or {}),
        )
        return func

    return decorator


def get_api_functions(category: Optional[str] = None) -> List[ApiFunction]:
    functions = list(REGISTRY.values())
    if category is None:
        return functions
    return [func for func in functions if func.category == category]


def call_api(function_name: str, /, **kwargs: Any) -> Any:
    if function_name not in REGISTRY:
        raise KeyError(f"API function '{function_name}' is not registered.")
    return REGISTRY[function_name].func(**kwargs)
