# FC/cards/services/upload_flow.py
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Optional

logger = logging.getLogger(__name__)

# 10 МБ — с запасом для PDF с форматированием
MAX_FILE_SIZE = 10 * 1024 * 1024


class Phase(str, enum.Enum):
    IDLE = "idle"
    PREPARING = "preparing"
    UPLOADING = "uploading"
    COMPLETE = "complete"
    ERROR = "error"


# допустимые переходы между фазами
TRANSITIONS: Dict[Phase, FrozenSet[Phase]] = {
    Phase.IDLE: frozenset({Phase.PREPARING}),
    Phase.PREPARING: frozenset({Phase.UPLOADING, Phase.COMPLETE, Phase.ERROR}),
    Phase.UPLOADING: frozenset({Phase.COMPLETE, Phase.ERROR}),
    Phase.COMPLETE: frozenset({Phase.IDLE}),
    Phase.ERROR: frozenset({Phase.IDLE}),
}


class UploadFlowError(RuntimeError):
    """Недопустимый переход состояния загрузки."""


@dataclass(frozen=True)
class UploadState:
    phase: Phase = Phase.IDLE
    filename: str = ""
    task_id: Optional[int] = None
    error: str = ""

    @property
    def is_terminal(self) -> bool:
        return self.phase in (Phase.COMPLETE, Phase.ERROR)


class UploadFlow:
    """Единственный владелец состояния загрузки исходника для одной задачи.

    Состояние неизменяемое; каждый переход заменяет его новым объектом.
    """

    def __init__(self) -> None:
        self.state = UploadState()

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def _move(self, phase: Phase, **changes) -> UploadState:
        if phase not in TRANSITIONS[self.state.phase]:
            raise UploadFlowError(f"cannot move from {self.state.phase.value} to {phase.value}")
        logger.debug("upload flow: %s -> %s", self.state.phase.value, phase.value)
        self.state = replace(self.state, phase=phase, **changes)
        return self.state

    def prepare(self, filename: str = "") -> UploadState:
        return self._move(Phase.PREPARING, filename=filename)

    def start_upload(self, task_id: int) -> UploadState:
        return self._move(Phase.UPLOADING, task_id=task_id)

    def complete(self, task_id: Optional[int] = None) -> UploadState:
        if task_id is None:
            task_id = self.state.task_id
        return self._move(Phase.COMPLETE, task_id=task_id)

    def fail(self, reason: str) -> UploadState:
        logger.warning("upload flow failed (%s): %s", self.state.filename or "-", reason)
        return self._move(Phase.ERROR, error=reason)

    def reset(self) -> UploadState:
        self._move(Phase.IDLE)
        self.state = UploadState()
        return self.state


def check_file_size(size: int) -> Optional[str]:
    """Текст ошибки, если файл больше лимита, иначе None."""
    if size > MAX_FILE_SIZE:
        return f"Файл больше {MAX_FILE_SIZE // (1024 * 1024)} МБ"
    return None
