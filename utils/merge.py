"""
Partial-update helper for the validated state tables.
"""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT", bound=BaseModel)


def merge_fields(state: StateT, fields: Mapping[str, Any], label: str = "") -> StateT:
    """
    Shallow-merge ``fields`` into ``state`` and re-validate the result.
    Names that are not declared on the model are dropped with a warning;
    the original ``state`` is left untouched.
    """
    declared = type(state).model_fields
    known = {name: value for name, value in fields.items() if name in declared}
    unknown = sorted(set(fields) - set(known))
    if unknown:
        logger.warning(f"Ignoring unknown fields for {label or type(state).__name__}: {unknown}")
    return type(state).model_validate({**state.model_dump(), **known})
