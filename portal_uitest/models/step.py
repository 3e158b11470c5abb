# models/step.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from portal_uitest.core.errors import StepAlreadyClosedError


class StepStatus(Enum):
    PASSED = 'passed'
    FAILED = 'failed'


@dataclass
class Attachment:
    name: str
    body: Union[str, bytes]
    mime_type: str = 'text/plain'


@dataclass
class ReportStep:
    name: str
    uuid: str = ''
    status: Optional[StepStatus] = None
    attachments: List[Attachment] = field(default_factory=list)
    failure_message: str = ''
    failed: bool = False
    started_at: str = field(default_factory=lambda: datetime.now().isoformat())
    stopped_at: str = ''

    def fail(self, message: str = '') -> None:
        self.failed = True
        if message:
            self.failure_message = message

    @property
    def closed(self) -> bool:
        return self.status is not None

    def close(self, status: StepStatus) -> None:
        if self.closed:
            raise StepAlreadyClosedError(f"Step '{self.name}' is already closed with status {self.status.value}")
        self.status = status
        self.stopped_at = datetime.now().isoformat()
