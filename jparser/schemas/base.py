"""
Strict base models for request bodies.

Request shapes decoded by jparser must be closed: any key the model does not
declare is rejected instead of silently dropped.
"""

from pydantic import BaseModel, ConfigDict


class StrictRequestModel(BaseModel):
    """
    Base for every request body decoded by jparser.

    - extra="forbid": unknown keys are rejected
    - strict=True: no coercion ("2" is not an int, 2 is not a str)

    Nested models must subclass this as well; the closed-schema rule is
    applied per model.
    """

    model_config = ConfigDict(extra="forbid", strict=True)
