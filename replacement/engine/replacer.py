# replacement/engine/replacer.py

"""Iterative replacement of values inside decoded JSON documents."""

import logging
import math
from typing import Any, List, Optional, Union

from replacement.core.domain import JsonContainer, ReplaceResult, TraversalFrame
from replacement.logic.matching import is_container, values_match

logger = logging.getLogger(__name__)


def _shallow_clone(container: JsonContainer) -> JsonContainer:
    """Returns a new list or dict holding the same children, in the same order."""
    if isinstance(container, list):
        return list(container)
    return dict(container)


def _push_children(stack: List[TraversalFrame], container: JsonContainer) -> None:
    """Pushes one frame per child so that they pop in document order."""
    if isinstance(container, list):
        for index in range(len(container) - 1, -1, -1):
            stack.append(TraversalFrame(container[index], container, index))
    else:
        for key in reversed(list(container.keys())):
            stack.append(TraversalFrame(container[key], container, key))


def replace_in_json(
    payload: Any,
    target_value: Any,
    replacement_value: Any,
    max_replacements: Optional[Union[int, float]] = math.inf,
) -> ReplaceResult:
    """Replaces occurrences of a value anywhere in a JSON document.

    Walks the document depth-first in document order using an explicit stack,
    so nesting depth is not limited by the interpreter's recursion limit.
    Every container on a visited path is shallow-cloned before it is written
    to; the input is never mutated. Subtrees left unvisited once the limit is
    reached are shared with the input.

    A matched container is replaced wholesale and its children are not
    visited. The root container itself is never compared against the target.

    Args:
        payload: Decoded JSON value to process
        target_value: Value to replace (containers match by identity)
        replacement_value: Value written in place of each occurrence
        max_replacements: Maximum substitutions; ``None`` means unlimited

    Returns:
        ReplaceResult with the rewritten value and the substitution count.
        With a limit of zero or less the payload itself is returned.
    """
    if max_replacements is None:
        max_replacements = math.inf

    # Zero limit hands back the very same object, not a copy
    if max_replacements <= 0:
        return ReplaceResult(result=payload, replacement_count=0)

    if payload is None:
        return ReplaceResult(result=payload, replacement_count=0)

    if not is_container(payload):
        if values_match(payload, target_value):
            return ReplaceResult(result=replacement_value, replacement_count=1)
        return ReplaceResult(result=payload, replacement_count=0)

    result = _shallow_clone(payload)
    stack: List[TraversalFrame] = []
    _push_children(stack, result)

    replacement_count = 0
    cloned = 1

    while stack and replacement_count < max_replacements:
        frame = stack.pop()

        if values_match(frame.value, target_value):
            frame.parent[frame.key] = replacement_value
            replacement_count += 1
            continue

        if is_container(frame.value):
            clone = _shallow_clone(frame.value)
            frame.parent[frame.key] = clone
            cloned += 1
            _push_children(stack, clone)

    logger.debug(
        "Replacement pass finished",
        extra={
            "replacement_count": replacement_count,
            "containers_cloned": cloned,
            "frames_abandoned": len(stack),
        },
    )

    return ReplaceResult(result=result, replacement_count=replacement_count)
