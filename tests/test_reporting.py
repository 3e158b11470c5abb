from unittest.mock import MagicMock

import pytest

from portal_uitest.core import reporting
from portal_uitest.core.errors import StepAlreadyClosedError
from portal_uitest.core.reporting import AllureReporter, MemoryReporter, ReportContext, StepFailure
from portal_uitest.models.step import StepStatus


@pytest.fixture
def context():
    return ReportContext(MemoryReporter())


def test_step_passes_when_body_completes(context):
    with context.step('Open URL: https://example.com') as step:
        assert context.current_step is step

    assert step.status == StepStatus.PASSED
    assert context.current_step is None


def test_step_fails_and_reraises(context):
    with pytest.raises(RuntimeError):
        with context.step('Click on element: #go') as step:
            raise RuntimeError('click intercepted')

    assert step.status == StepStatus.FAILED
    assert step.failure_message == 'click intercepted'


def test_step_marked_failed_without_raising(context):
    with context.step('Verify title: Home') as step:
        step.fail('PAGE TITLE MISMATCH')

    assert step.status == StepStatus.FAILED
    assert step.failure_message == 'PAGE TITLE MISMATCH'


def test_nested_steps_close_innermost_first(context):
    with context.step('outer') as outer:
        with context.step('inner') as inner:
            assert context.current_step is inner
        assert context.current_step is outer

    assert inner.closed and outer.closed


def test_attachments_go_to_current_step_and_reporter(context):
    context.attach_text('outside', 'no step')
    with context.step('Get Alert Text') as step:
        context.attach_text('Alert Text', 'Are you sure?')
        context.attach_png('Screenshot', b'\x89PNG')

    assert [a.name for a in step.attachments] == ['Alert Text', 'Screenshot']
    assert [a.mime_type for a in step.attachments] == ['text/plain', 'image/png']
    assert [a.name for a in context.reporter.attachments] == ['outside', 'Alert Text', 'Screenshot']


def test_reporter_errors_do_not_escape(context, caplog):
    context.reporter.attach = MagicMock(side_effect=RuntimeError('no test context'))

    context.attach_text('Error Message', 'boom')

    assert "Could not attach 'Error Message'" in caplog.text


def test_step_cannot_close_twice(context):
    with context.step('once') as step:
        pass

    with pytest.raises(StepAlreadyClosedError):
        step.close(StepStatus.PASSED)


def test_memory_reporter_finds_steps_by_name(context):
    with context.step('first'):
        pass

    assert context.reporter.step_named('first').uuid == '1'
    assert context.reporter.step_named('missing') is None


class TestAllureReporter:
    @pytest.fixture
    def hooks(self, monkeypatch):
        manager = MagicMock()
        monkeypatch.setattr(reporting, 'plugin_manager', manager)
        return manager.hook

    def test_passed_step(self, hooks):
        context = ReportContext(AllureReporter())

        with context.step('Click on element: #go') as step:
            pass

        hooks.start_step.assert_called_once_with(uuid=step.uuid, title='Click on element: #go', params={})
        hooks.stop_step.assert_called_once_with(uuid=step.uuid, title='Click on element: #go',
                                                exc_type=None, exc_val=None, exc_tb=None)

    def test_failed_step_carries_failure(self, hooks):
        context = ReportContext(AllureReporter())

        with context.step('Verify URL: /home') as step:
            step.fail('URL Mismatch')

        kwargs = hooks.stop_step.call_args.kwargs
        assert kwargs['exc_type'] is StepFailure
        assert str(kwargs['exc_val']) == 'URL Mismatch'

    def test_attachment_types(self, monkeypatch):
        attach = MagicMock()
        monkeypatch.setattr(reporting.allure, 'attach', attach)
        context = ReportContext(AllureReporter())

        context.attach_png('Click Failed', b'\x89PNG')
        context.attach_text('Error Message', 'boom')

        assert attach.call_args_list[0].kwargs['attachment_type'] == reporting.allure.attachment_type.PNG
        assert attach.call_args_list[1].kwargs['attachment_type'] == reporting.allure.attachment_type.TEXT
