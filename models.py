"""
Local representations of Parameter Store records and request filters.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class ParameterType(str, Enum):
    """Parameter type tags accepted by Parameter Store."""

    STRING = "String"
    STRING_LIST = "StringList"
    SECURE_STRING = "SecureString"

    @classmethod
    def parse(cls, raw: str) -> "ParameterType":
        for member in cls:
            if member.value == raw:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"unknown parameter type {raw!r}, expected one of: {valid}")


@dataclass
class ParameterFilter:
    """One entry of the ParameterFilters request field."""

    key: str
    values: List[str]
    option: Optional[str] = None

    def to_request(self) -> Dict[str, Any]:
        entry: Dict[str, Any] = {"Key": self.key, "Values": list(self.values)}
        if self.option:
            entry["Option"] = self.option
        return entry


@dataclass
class Parameter:
    """A parameter as returned by the Get* operations."""

    name: str
    type: ParameterType
    value: str
    version: int
    last_modified_date: Optional[datetime] = None
    arn: Optional[str] = None
    data_type: Optional[str] = None
    selector: Optional[str] = None
    source_result: Optional[str] = None
    labels: Optional[List[str]] = None

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "Parameter":
        """Build from one entry of a response's Parameter/Parameters field."""
        return cls(
            name=data["Name"],
            type=ParameterType.parse(data["Type"]),
            value=data["Value"],
            version=int(data.get("Version", 0)),
            last_modified_date=data.get("LastModifiedDate"),
            arn=data.get("ARN"),
            data_type=data.get("DataType"),
            selector=data.get("Selector"),
            source_result=data.get("SourceResult"),
            labels=list(data["Labels"]) if "Labels" in data else None,
        )

