# core/reporting.py
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

import allure
from allure_commons import plugin_manager
from allure_commons.utils import uuid4

from portal_uitest.core.errors import error_message
from portal_uitest.models.step import Attachment, ReportStep, StepStatus

TEXT = 'text/plain'
PNG = 'image/png'


class StepFailure(AssertionError):
    """Carried into Allure so a step closed as failed is shown as failed."""


class AllureReporter:
    def start_step(self, step: ReportStep) -> None:
        step.uuid = uuid4()
        plugin_manager.hook.start_step(uuid=step.uuid, title=step.name, params={})

    def stop_step(self, step: ReportStep) -> None:
        if step.status == StepStatus.FAILED:
            failure = StepFailure(step.failure_message or f"Step failed: {step.name}")
            plugin_manager.hook.stop_step(uuid=step.uuid, title=step.name,
                                          exc_type=StepFailure, exc_val=failure, exc_tb=None)
        else:
            plugin_manager.hook.stop_step(uuid=step.uuid, title=step.name,
                                          exc_type=None, exc_val=None, exc_tb=None)

    def attach(self, attachment: Attachment) -> None:
        attachment_type = allure.attachment_type.PNG if attachment.mime_type == PNG else allure.attachment_type.TEXT
        allure.attach(attachment.body, name=attachment.name, attachment_type=attachment_type)


class MemoryReporter:
    def __init__(self):
        self.steps: List[ReportStep] = []
        self.attachments: List[Attachment] = []

    def start_step(self, step: ReportStep) -> None:
        step.uuid = str(len(self.steps) + 1)
        self.steps.append(step)

    def stop_step(self, step: ReportStep) -> None:
        pass

    def attach(self, attachment: Attachment) -> None:
        self.attachments.append(attachment)

    def step_named(self, name: str) -> Optional[ReportStep]:
        for step in self.steps:
            if step.name == name:
                return step
        return None


class ReportContext:
    """Reporting sink plus logger handed to the action layer.

    One context per browser session. Steps opened through ``step()`` are
    always closed, whichever way the block exits.
    """

    def __init__(self, reporter=None, logger: Optional[logging.Logger] = None):
        self.reporter = reporter if reporter is not None else AllureReporter()
        self.logger = logger or logging.getLogger('portal_uitest')
        self._open_steps: List[ReportStep] = []

    @property
    def current_step(self) -> Optional[ReportStep]:
        return self._open_steps[-1] if self._open_steps else None

    @contextmanager
    def step(self, name: str) -> Iterator[ReportStep]:
        step = ReportStep(name=name)
        self.reporter.start_step(step)
        self._open_steps.append(step)
        try:
            yield step
        except BaseException as e:
            step.fail(error_message(e))
            self._close(step)
            raise
        else:
            self._close(step)

    def _close(self, step: ReportStep) -> None:
        self._open_steps.remove(step)
        step.close(StepStatus.FAILED if step.failed else StepStatus.PASSED)
        self.reporter.stop_step(step)

    def attach_text(self, name: str, text: str) -> None:
        self._attach(Attachment(name=name, body=text, mime_type=TEXT))

    def attach_png(self, name: str, png: bytes) -> None:
        self._attach(Attachment(name=name, body=png, mime_type=PNG))

    def _attach(self, attachment: Attachment) -> None:
        if self.current_step is not None:
            self.current_step.attachments.append(attachment)
        try:
            self.reporter.attach(attachment)
        except Exception as e:
            self.logger.warning(f"[REPORT] Could not attach '{attachment.name}': {e}")
