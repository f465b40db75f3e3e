"""Per-call working state shared by the resolution steps."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .errors import ComponentError

logger = logging.getLogger(__name__)


@dataclass
class ResolveContext:
    """
    State for one resolution pass, created fresh on every call.

    Attributes:
        project_root: Absolute project root ("" when the host has none)
        dependencies: Script files of every component that was expanded
        diagnostics: Non-fatal errors recorded so far
        error_sink: Host-owned error list; only ever appended to
    """

    project_root: str = ""
    dependencies: set[str] = field(default_factory=set)
    diagnostics: list[ComponentError] = field(default_factory=list)
    error_sink: list[Any] | None = None

    def report(self, error: ComponentError) -> None:
        logger.warning("%s", error)
        self.diagnostics.append(error)
        if self.error_sink is not None:
            self.error_sink.append(error)
