"""Explicit load/query outcomes.

Registry and façade entry points return these instead of raising, so callers
at the routing-engine boundary must look at the error case. ``unwrap()``
re-raises the carried RasterError for callers that prefer exceptions.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from domain.raster.errors import RasterError
from domain.raster.value_objects import RasterDatum


class _Outcome(BaseModel):
    error: RasterError | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def ok(self) -> bool:
        return self.error is None

    def _raise_error(self) -> None:
        if self.error is not None:
            raise self.error


class LoadResult(_Outcome):
    """Handle of a loaded source, or the error that prevented loading."""

    handle: int | None = None

    @model_validator(mode="after")
    def validate_exclusive(self) -> "LoadResult":
        if (self.handle is None) == (self.error is None):
            raise ValueError("LoadResult needs exactly one of handle or error")
        return self

    def unwrap(self) -> int:
        self._raise_error()
        assert self.handle is not None
        return self.handle


class QueryResult(_Outcome):
    """Datum of a query (possibly the invalid sentinel), or a query error."""

    datum: RasterDatum | None = None

    @model_validator(mode="after")
    def validate_exclusive(self) -> "QueryResult":
        if (self.datum is None) == (self.error is None):
            raise ValueError("QueryResult needs exactly one of datum or error")
        return self

    def unwrap(self) -> RasterDatum:
        self._raise_error()
        assert self.datum is not None
        return self.datum
