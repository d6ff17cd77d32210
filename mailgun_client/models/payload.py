"""Form and JSON payload assembly shared by every request model.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel

FormContent = list[tuple[str, str]]
JsonObject = dict[str, Union[str, list[str]]]


def form_to_json(content: FormContent) -> JsonObject:
    """Fold ordered form pairs into a JSON object.

    Keys that appear once map to their string value; repeated keys
    (``o:tag``, ``url``, ``action``) map to the list of their values in
    order.
    """
    result: JsonObject = {}
    repeated: set[str] = set()

    for key, value in content:
        if key not in result:
            result[key] = value
        elif key in repeated:
            result[key].append(value)  # type: ignore[union-attr]
        else:
            result[key] = [result[key], value]  # type: ignore[list-item]
            repeated.add(key)

    return result


class RequestModel(BaseModel):
    """Base class for immutable request value objects.

    Subclasses implement ``to_form_content``; ``to_json`` is derived from
    it so both encodings always carry the same information.
    """

    model_config = {"frozen": True}

    def to_form_content(self) -> FormContent:
        raise NotImplementedError

    def to_json(self) -> JsonObject:
        return form_to_json(self.to_form_content())
