from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

ToolArgs = Union[str, Mapping[str, Any], None]


@dataclass(frozen=True)
class ToolMetadata:
    """Static descriptor a tool is registered under."""

    name: str
    description: str
    parameters: Dict[str, Any]
    category: str = "General"
    tags: List[str] = field(default_factory=list)

    def to_schema(self) -> Dict[str, Any]:
        """Function-calling schema in the shape chat completion APIs expect."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }


class Tool(ABC):
    """A named operation that takes JSON arguments and returns a result string."""

    metadata: ToolMetadata

    @property
    def name(self) -> str:
        return self.metadata.name

    @abstractmethod
    def execute(self, args: ToolArgs) -> str:
        """Run the tool. Bad input is reported in the returned string, not raised."""
