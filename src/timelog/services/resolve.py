"""ResolveService: turn a raw command into a ServiceResult.

Pipeline: RESOLVE → RESPOND.  Resolution is delegated to the pure
domain resolver; this layer only translates its outcome.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from timelog.domain.errors import CommandParseError
from timelog.domain.resolver import resolve_command
from timelog.domain.timestamps import Clock, system_clock
from timelog.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class ResolveService:
    """Resolves raw commands against a clock."""

    def __init__(self, clock: Clock = system_clock) -> None:
        self._clock = clock

    def resolve(self, raw: BaseModel) -> ServiceResult:
        """Resolve *raw* into a result whose data is the resolved command.

        On failure the result carries one ``ServiceError`` whose message
        is the rendered :class:`CommandParseError`.
        """
        op = str(getattr(raw, "kind", type(raw).__name__))
        try:
            command = resolve_command(raw, clock=self._clock)
        except CommandParseError as exc:
            logger.debug("Rejected %s: %s", op, exc.code)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=exc.code, message=str(exc), detail=exc.to_detail()),
            )
        return ServiceResult(ok=True, op=op, data=command.model_dump())
