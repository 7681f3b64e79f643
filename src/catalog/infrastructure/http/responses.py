"""JSON response that writes Decimal values as exact JSON numbers.

The stock JSONResponse goes through the stdlib encoder, which only knows
floats: ``Decimal("10.00")`` would come out as ``10.0`` and wide prices
would lose their cents.
"""

from __future__ import annotations

from typing import Any

import simplejson
from fastapi.responses import JSONResponse


class DecimalJSONResponse(JSONResponse):

    def render(self, content: Any) -> bytes:
        return simplejson.dumps(
            content,
            use_decimal=True,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")
