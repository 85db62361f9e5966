"""Base model for telemetry payloads.

Every wire-facing model inherits from :class:`DashBaseModel` which
provides:

* frozen instances, so a decoded record can be shared between tasks.
* ``extra="ignore"`` so exporter additions never break decoding.
* strict validation: a value of the wrong type (``"100"`` for a number,
  ``1`` for a flag, ``NaN``) rejects the whole line instead of being
  coerced or dropped. Integers still validate as floats.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DashBaseModel(BaseModel):
    """Base for telemetry models.

    Only ``null`` or a missing key means "instrument not reporting".
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        strict=True,
        allow_inf_nan=False,
    )
