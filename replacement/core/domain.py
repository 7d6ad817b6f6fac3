# replacement/core/domain.py

"""Domain models for replacement results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

# Decoded JSON: None, bool, int, float, str, list or dict.
JsonValue = Any
JsonContainer = Union[List[Any], Dict[str, Any]]


@dataclass
class TraversalFrame:
    """One pending node of a traversal.

    Attributes:
        value: Value to inspect
        parent: Cloned container the value lives in
        key: Index or key of the value within ``parent``
    """

    value: JsonValue
    parent: JsonContainer
    key: Union[int, str]


@dataclass
class ReplaceResult:
    """Result object returned by the replacement engine.

    Attributes:
        result: Rewritten value (shares unvisited subtrees with the input)
        replacement_count: Number of positions substituted
    """

    result: JsonValue
    replacement_count: int = 0


@dataclass
class ReplacementResponse:
    """Result object returned by the replacement service.

    Attributes:
        result: Rewritten payload, or the untouched payload on failure
        replacement_count: Number of substitutions performed
        metadata: Additional processing information
    """

    result: JsonValue = None
    replacement_count: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)
