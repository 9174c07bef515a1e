from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict


class Representation(BaseModel):
    """Base for admin API documents. Unknown server fields are kept as extras.

    ``to_payload`` drops fields that are ``None``, so a model cannot send an
    explicit ``null`` on a whole-document update. Pass a plain ``dict`` to
    clear a field.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


Document = Union[dict[str, Any], Representation]


def as_payload(document: Document) -> dict[str, Any]:
    if isinstance(document, Representation):
        return document.to_payload()
    return dict(document)
