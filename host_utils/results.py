# host_utils/results.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CommandResult:
    """Outcome of one CommandRunner.execute call.

    output is None when the caller did not wait or the launch failed; an empty
    string means the command ran and printed nothing.
    """
    command: List[str]
    output: Optional[str] = None
    error: Optional[str] = None
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self) -> str:
        if self.ok:
            return f"CommandResult(ok=True, timed_out={self.timed_out}, output={self.output!r})"
        return f"CommandResult(ok=False, error={self.error!r})"


@dataclass
class StopResult:
    """Outcome of ProcessTerminator.stop.

    killed lists what a kill was issued for (pids, or the image name on
    Windows), not confirmed terminations: taskkill output is not inspected.
    """
    name: str
    killed: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
