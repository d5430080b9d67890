from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class HttpRequest(BaseModel):
    """Marker base for inputs that may be dispatched through a Mediator.

    Subclasses declare their own fields. JSON keys are camelCase on the wire
    and may also be populated by their Python names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
