# core/browser_utils.py
import time
from pathlib import Path
from typing import Callable, Dict, Optional

from selenium.common.exceptions import StaleElementReferenceException, TimeoutException
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select, WebDriverWait

from portal_uitest.config.settings import Config, FrameworkConfig, get_framework_config
from portal_uitest.core.errors import (
    ErrorKind,
    FrameNotFoundError,
    InvalidInputError,
    OptionNotFoundError,
    WindowNotFoundError,
    classify_error,
    error_message,
)
from portal_uitest.core.reporting import ReportContext
from portal_uitest.core.retry import retry_action
from portal_uitest.models.step import ReportStep
from portal_uitest.utils.locators import option_by_text_xpath, to_by

STALE_RETRY_PAUSE = 0.5
HOVER_PAUSE = 0.5
FRAME_NOT_FOUND_KINDS = (ErrorKind.NO_SUCH_FRAME, ErrorKind.TIMEOUT, ErrorKind.NOT_FOUND)


def is_blank(value: Optional[str]) -> bool:
    return value is None or str(value).strip() == ''


class BrowserUtils:
    """Action wrappers over one WebDriver session.

    Every public operation runs inside a report step. State-changing
    actions retry, then re-raise the driver error; verifications and
    attribute/alert-text retrieval return ``False``/``""`` instead of raising.
    """

    def __init__(self, driver, framework_config: Optional[FrameworkConfig] = None,
                 report: Optional[ReportContext] = None, upload_dir: Optional[Path] = None):
        self.driver = driver
        self.config = framework_config or get_framework_config()
        self.report = report or ReportContext()
        self.logger = self.report.logger
        self.upload_dir = Path(upload_dir or Config.UPLOAD_DIR)

    # ------------------------------------------------------------------ helpers

    def _timeout_ms(self, timeout: Optional[int]) -> int:
        return self.config.default_timeout if timeout is None else timeout

    def _retries(self, retries: Optional[int]) -> int:
        return self.config.retry_count if retries is None else retries

    def _wait(self, timeout: Optional[int] = None) -> WebDriverWait:
        return WebDriverWait(self.driver, self._timeout_ms(timeout) / 1000)

    def _wait_displayed(self, locator: str, timeout: Optional[int] = None) -> WebElement:
        return self._wait(timeout).until(
            EC.visibility_of_element_located(to_by(locator)),
            f'element ("{locator}") still not displayed after {self._timeout_ms(timeout)}ms')

    def _wait_clickable(self, locator: str, timeout: Optional[int] = None) -> WebElement:
        return self._wait(timeout).until(
            EC.element_to_be_clickable(to_by(locator)),
            f'element ("{locator}") still not clickable after {self._timeout_ms(timeout)}ms')

    def _wait_exists(self, locator: str, timeout: Optional[int] = None) -> WebElement:
        return self._wait(timeout).until(
            EC.presence_of_element_located(to_by(locator)),
            f'element ("{locator}") still not existing after {self._timeout_ms(timeout)}ms')

    def _wait_for_alert(self):
        return self._wait().until(EC.alert_is_present(), 'Alert was not present within timeout period')

    def capture_screenshot(self, title: str) -> None:
        try:
            self.report.attach_png(title, self.driver.get_screenshot_as_png())
        except Exception as e:
            self.logger.warning(f"[SCREENSHOT] Could not capture '{title}': {error_message(e)}")

    def _screenshot_if_always(self, title: str) -> None:
        if self.config.always_screenshot:
            self.capture_screenshot(title)

    def _record_failure(self, step: ReportStep, message: str, attachment_name: str,
                        screenshot_title: Optional[str] = None) -> None:
        self.logger.error(message)
        if screenshot_title:
            self.capture_screenshot(screenshot_title)
        self.report.attach_text(attachment_name, message)
        step.fail(message)

    def _run_action(self, step_name: str, action: Callable[[], None], retries: Optional[int],
                    action_name: str, after_title: str, failed_title: str,
                    error_attachment: str = 'Error Message') -> None:
        self.logger.info(f"[ACTION] {step_name}")
        with self.report.step(step_name):
            try:
                retry_action(action, self._retries(retries), action_name, self.logger)
            except Exception as e:
                message = f"[ERROR] {step_name} failed: {error_message(e)}"
                self.logger.error(message)
                self.report.attach_text(error_attachment, message)
                self.capture_screenshot(failed_title)
                raise
            self._screenshot_if_always(after_title)

    # --------------------------------------------------------------- navigation

    def launch_url(self, url: str) -> None:
        step_name = f"Open URL: {url}"
        self.logger.info(f"[NAVIGATE] {step_name}")
        with self.report.step(step_name):
            try:
                self.driver.get(url)
            except Exception as e:
                self.logger.error(f"[NAVIGATE][ERROR] {error_message(e)}")
                self.capture_screenshot('Navigation Failed')
                raise
            self._screenshot_if_always('After Navigation')

    # ------------------------------------------------------ element interaction

    def click_element(self, locator: str, retries: Optional[int] = None) -> None:
        def action():
            self._wait_clickable(locator).click()

        self._run_action(f"Click on element: {locator}", action, retries,
                         'clickElement', 'After Click', 'Click Failed')

    def type_text(self, locator: str, value: str, retries: Optional[int] = None) -> None:
        if is_blank(value):
            msg = f"TEXT INPUT SKIPPED: Provided value is empty or null for locator [{locator}]"
            self.logger.warning(msg)
            self.report.attach_text('Input Skipped', msg)
            return

        def action():
            element = self._wait_displayed(locator)
            element.clear()
            element.send_keys(value)

        self._run_action(f'Type text "{value}" into element: {locator}', action, retries,
                         'typeText', 'After Type', 'Type Failed', 'Type Error')

    def clear_and_type(self, locator: str, value: str, retries: Optional[int] = None) -> None:
        if is_blank(value):
            msg = f"TEXT INPUT SKIPPED: Provided value is empty or null for locator [{locator}]"
            self.logger.warning(msg)
            self.report.attach_text('Input Skipped', msg)
            return

        def action():
            element = self._wait_displayed(locator)
            element.clear()
            element.send_keys(value)

        self._run_action(f'Clear and type text "{value}" into element: {locator}', action, retries,
                         'clearAndType', 'After Clear and Type', 'Clear and Type Failed')

    def type_and_enter(self, locator: str, value: str, retries: Optional[int] = None) -> None:
        step_name = f'Type text "{value}" and press Enter into element: {locator}'
        if is_blank(value):
            self.logger.info(f"[ACTION] {step_name}")
            with self.report.step(step_name):
                msg = f"[ERROR] Invalid input: value is null or empty for locator: {locator}"
                self.logger.error(msg)
                self.report.attach_text('Input Error', msg)
                self.capture_screenshot('Empty Input')
                raise InvalidInputError(msg)

        def action():
            element = self._wait_displayed(locator)
            element.clear()
            element.send_keys(value)
            element.send_keys(Keys.ENTER)

        self._run_action(step_name, action, retries, 'typeAndEnter',
                         'After Type and Enter', 'Type and Enter Failed')

    def type_and_tab(self, locator: str, value: str, timeout: Optional[int] = None) -> bool:
        step_name = f"Type into element and press TAB: {locator}"
        self.logger.info(f"[ACTION] {step_name}")
        with self.report.step(step_name) as step:
            if is_blank(value):
                msg = f"TEXT INPUT FAILED: Data is null or empty. Cannot send invalid input to element [{locator}]"
                self._record_failure(step, msg, 'Input Error', 'Empty Input')
                return False
            try:
                element = self._wait_displayed(locator, timeout)
                element.clear()
                element.send_keys(value)
                element.send_keys(Keys.TAB)
                return True
            except StaleElementReferenceException:
                self.logger.warning(f"[ACTION] Element went stale. Retrying: {locator}")
                time.sleep(STALE_RETRY_PAUSE)
                try:
                    element = self.driver.find_element(*to_by(locator))
                    element.clear()
                    element.send_keys(value)
                    element.send_keys(Keys.TAB)
                    return True
                except Exception as retry_error:
                    msg = (f"TEXT INPUT FAILED: Could not type into element [{locator}] even after retrying. "
                           f"{error_message(retry_error)}")
                    self._record_failure(step, msg, 'Retry Failure', 'Retry Failed - Type and Tab')
                    return False
            except Exception as e:
                msg = f"TEXT INPUT ERROR: WebDriverException occurred for element [{locator}]. {error_message(e)}"
                self._record_failure(step, msg, 'Exception', 'Type and Tab Error')
                return False

    def upload_file(self, locator: str, relative_path: str) -> None:
        file_path = (self.upload_dir / relative_path).resolve()
        step_name = f"Upload file [{relative_path}] to element [{locator}]"
        self.logger.info(f"[ACTION] {step_name}")
        with self.report.step(step_name):
            try:
                if not file_path.is_file():
                    raise FileNotFoundError(f"Upload file not found: {file_path}")
                self._wait_exists(locator).send_keys(str(file_path))
            except Exception as e:
                self.logger.error(f"UPLOAD FAILED: {error_message(e)}")
                self.report.attach_text('Upload Error', error_message(e))
                raise

    # ---------------------------------------------------------------- dropdowns

    def select_dropdown_by_text(self, locator: str, text: str, retries: Optional[int] = None) -> None:
        def action():
            element = self._wait_displayed(locator)
            if not element.find_elements(By.XPATH, option_by_text_xpath(text)):
                raise OptionNotFoundError(f"Dropdown option '{text}' not found for locator: {locator}")
            Select(element).select_by_visible_text(text)

        self._run_action(f"Select '{text}' from dropdown: {locator}", action, retries,
                         'selectDropdownByText', 'After Dropdown Selection',
                         'Dropdown Selection Failed', 'Dropdown Error')

    def select_dropdown_by_index(self, locator: str, index: int, retries: Optional[int] = None) -> None:
        def action():
            Select(self._wait_displayed(locator)).select_by_index(index)

        self._run_action(f"Select option at index {index} from dropdown: {locator}", action, retries,
                         'selectDropdownByIndex', 'After Dropdown Selection by Index',
                         'Dropdown Selection by Index Failed', 'Dropdown Index Error')

    def select_dropdown_by_value(self, locator: str, value: str, retries: Optional[int] = None) -> None:
        def action():
            Select(self._wait_displayed(locator)).select_by_value(value)

        self._run_action(f'Select option with value "{value}" from dropdown: {locator}', action, retries,
                         'selectDropdownByValue', 'After Dropdown Selection by Value',
                         'Dropdown Selection by Value Failed', 'Dropdown Value Error')

    # ------------------------------------------------------------ mouse actions

    def move_to_element(self, locator: str, retries: Optional[int] = None) -> None:
        def action():
            element = self._wait_displayed(locator)
            ActionChains(self.driver).move_to_element(element).perform()

        self._run_action(f"Move mouse to element: {locator}", action, retries,
                         'moveToElement', 'After Move To Element', 'Move To Element Failed')

    def hover_and_click(self, locator: str, retries: Optional[int] = None) -> None:
        def action():
            element = self._wait_clickable(locator)
            ActionChains(self.driver).move_to_element(element).pause(HOVER_PAUSE).click(element).perform()

        self._run_action(f"Hover and click on element: {locator}", action, retries,
                         'hoverAndClick', 'After Hover Click', 'Hover Click Failed')

    def double_click(self, locator: str, retries: Optional[int] = None) -> None:
        def action():
            element = self._wait_clickable(locator)
            ActionChains(self.driver).double_click(element).perform()

        self._run_action(f"Double click on element: {locator}", action, retries,
                         'doubleClick', 'After Double Click', 'Double Click Failed')

    def context_click(self, locator: str, retries: Optional[int] = None) -> None:
        def action():
            element = self._wait_clickable(locator)
            ActionChains(self.driver).context_click(element).perform()

        self._run_action(f"Right-click (contextClick) on element: {locator}", action, retries,
                         'contextClick', 'After Context Click', 'Context Click Failed')

    def drag_and_drop(self, source_locator: str, target_locator: str, retries: Optional[int] = None) -> None:
        def action():
            source = self._wait_displayed(source_locator)
            target = self._wait_displayed(target_locator)
            ActionChains(self.driver).drag_and_drop(source, target).perform()

        self._run_action(f"Drag element {source_locator} and drop on {target_locator}", action, retries,
                         'dragAndDrop', 'After Drag and Drop', 'Drag and Drop Failed')

    # ---------------------------------------------------------------- retrieval

    def get_element_text(self, locator: str, timeout: Optional[int] = None) -> str:
        step_name = f"Get text from element: {locator}"
        self.logger.info(f"[ACTION] {step_name}")
        with self.report.step(step_name):
            try:
                text = self._wait_displayed(locator, timeout).text
            except Exception as e:
                self.capture_screenshot(f"Get Text Failed: {locator}")
                self.report.attach_text('Error Message', error_message(e))
                self.logger.error(f"[ERROR] {step_name} failed: {error_message(e)}")
                raise
            self._screenshot_if_always('After Get Text')
            return text

    def get_attribute(self, locator: str, attribute: str, retries: Optional[int] = None) -> str:
        step_name = f'Get attribute "{attribute}" from element: {locator}'
        self.logger.info(f"[ACTION] {step_name}")
        attr_value = None

        def action():
            nonlocal attr_value
            element = self._wait_displayed(locator)
            attr_value = element.get_attribute(attribute)
            if not attr_value:
                # Attribute absent: fall back to the live DOM property
                attr_value = self.driver.execute_script('return arguments[0][arguments[1]];', element, attribute)

        with self.report.step(step_name) as step:
            try:
                retry_action(action, self._retries(retries), 'getAttribute', self.logger)
            except Exception as e:
                message = f'[ERROR] Failed to get attribute "{attribute}" from {locator}: {error_message(e)}'
                self._record_failure(step, message, 'Attribute Error', f"Get Attribute Failed: {attribute}")
                return ''
        if isinstance(attr_value, bool):
            return 'true' if attr_value else ''
        return str(attr_value) if attr_value else ''

    # ------------------------------------------------------------- verification

    def is_visible(self, locator: str, timeout: Optional[int] = None, retries: Optional[int] = None) -> bool:
        step_name = f"Check visibility of element: {locator}"
        self.logger.info(f"[CHECK] {step_name}")
        displayed = False

        def action():
            nonlocal displayed
            displayed = self._wait_exists(locator, timeout).is_displayed()

        with self.report.step(step_name):
            try:
                retry_action(action, self._retries(retries), 'isVisible', self.logger)
            except Exception as e:
                self.logger.error(f"[CHECK][ERROR] {step_name} failed: {error_message(e)}")
                self.capture_screenshot('Visibility Check Failed')
                raise
            self.logger.info(f"[CHECK] {locator} is {'visible' if displayed else 'not visible'}")
            return bool(displayed)

    def verify_disappeared(self, locator: str, timeout: Optional[int] = None) -> bool:
        step_name = f"Verify element has disappeared: {locator}"
        self.logger.info(f"[VERIFY] {step_name}")
        with self.report.step(step_name) as step:
            try:
                self._wait(timeout).until(EC.invisibility_of_element_located(to_by(locator)))
                return True
            except StaleElementReferenceException:
                self.logger.info(f"[VERIFY] Element is stale, considered disappeared: {locator}")
                return True
            except TimeoutException:
                msg = f'[VERIFY][FAILURE] Element "{locator}" is still visible after timeout.'
                self._record_failure(step, msg, 'Disappearance Failure', 'Disappearance Check Failed')
                return False
            except Exception as e:
                msg = f"[VERIFY][ERROR] Failed while waiting for element to disappear: {error_message(e)}"
                self._record_failure(step, msg, 'Disappearance Exception', 'Unexpected Error - Disappearance')
                return False

    def _verify_state(self, locator: str, timeout: Optional[int], state: str,
                      read: Callable[[WebElement], bool], failure_text: str) -> bool:
        step_name = f"Verify element is {state}: {locator}"
        label = state.capitalize()
        self.logger.info(f"[VERIFY] {step_name}")
        with self.report.step(step_name) as step:
            try:
                value = read(self._wait_exists(locator, timeout))
            except StaleElementReferenceException:
                self.logger.warning(f"[VERIFY] Element went stale. Retrying: {locator}")
                time.sleep(STALE_RETRY_PAUSE)
                try:
                    value = read(self.driver.find_element(*to_by(locator)))
                except Exception as retry_error:
                    msg = f"Retry failed after stale element: {error_message(retry_error)}"
                    self._record_failure(step, msg, 'Retry Failure', f"Verify {label} Retry Failed")
                    return False
            except Exception as e:
                msg = f"ELEMENT CHECK FAILED: {error_message(e)}"
                self._record_failure(step, msg, 'Exception', f"Verify {label} Failed")
                return False

            if not value:
                msg = f"ELEMENT NOT {state.upper()}: The element [{locator}] is present but {failure_text}."
                self._record_failure(step, msg, f"{label} Check Failure", f"Element Not {label}")
                return False
            return True

    def verify_enabled(self, locator: str, timeout: Optional[int] = None) -> bool:
        return self._verify_state(locator, timeout, 'enabled', lambda el: el.is_enabled(), 'disabled')

    def verify_selected(self, locator: str, timeout: Optional[int] = None) -> bool:
        return self._verify_state(locator, timeout, 'selected', lambda el: el.is_selected(), 'not selected')

    def verify_exact_text(self, locator: str, expected_text: str, retries: Optional[int] = None) -> bool:
        step_name = f'Verify element text equals: "{expected_text}" for locator: {locator}'
        self.logger.info(f"[ASSERT] {step_name}")
        actual_text = None

        def action():
            nonlocal actual_text
            actual_text = self._wait_displayed(locator).text
            if actual_text != expected_text:
                raise AssertionError(f"Text mismatch for locator: {locator}")

        with self.report.step(step_name) as step:
            try:
                retry_action(action, self._retries(retries), 'verifyExactText', self.logger)
                return True
            except Exception as e:
                if actual_text is None:
                    message = f'[ASSERT][ERROR] Expected "{expected_text}" but text could not be read: {error_message(e)}'
                else:
                    message = f'[ASSERT][ERROR] Expected "{expected_text}" but got "{actual_text}"'
                self._record_failure(step, message, 'Text Verification Error', 'Text Verification Failed')
                return False

    def verify_partial_text(self, locator: str, expected_text: str) -> bool:
        step_name = f'Verify partial text "{expected_text}" is present in element: {locator}'
        self.logger.info(f"[VERIFY] {step_name}")
        with self.report.step(step_name) as step:
            try:
                actual_text = self._wait_displayed(locator).text
            except Exception as e:
                msg = f"[VERIFY][ERROR] {step_name}: {error_message(e)}"
                self._record_failure(step, msg, 'Verification Failure', 'Partial Text Verification Failed')
                return False
            if expected_text not in actual_text:
                msg = f'[VERIFY][ERROR] Expected partial text "{expected_text}" not found in actual text "{actual_text}"'
                self._record_failure(step, msg, 'Verification Failure', 'Partial Text Verification Failed')
                return False
            return True

    def verify_url(self, expected_url: str) -> bool:
        with self.report.step(f"Verify URL: {expected_url}") as step:
            try:
                current_url = self.driver.current_url
            except Exception as e:
                message = 'URL Verification Failed: Could not fetch or compare URL'
                self._record_failure(step, f"{message}\n{error_message(e)}", 'URL Verification Error')
                return False
            if current_url == expected_url:
                self.logger.info(f"[VERIFY] Current URL matches expected: {expected_url}")
                return True
            message = f"URL Mismatch: Expected [{expected_url}], but found [{current_url}]"
            self._record_failure(step, message, 'URL Mismatch')
            return False

    def verify_title(self, expected_title: str) -> bool:
        with self.report.step(f"Verify page title: {expected_title}") as step:
            try:
                actual_title = self.driver.title
            except Exception as e:
                message = 'TITLE VERIFICATION ERROR: Unable to retrieve or compare page title.'
                self._record_failure(step, f"{message}\n{error_message(e)}", 'Title Verification Error')
                return False
            if actual_title == expected_title:
                self.logger.info(f"[VERIFY] Page title matches expected: {expected_title}")
                return True
            message = f"PAGE TITLE MISMATCH: Expected [{expected_title}], but found [{actual_title}]"
            self._record_failure(step, message, 'Title Mismatch')
            return False

    # -------------------------------------------------------------------- waits

    def _wait_with_diagnostics(self, step_name: str, action_name: str, wait: Callable[[], None],
                               retries: Optional[int], messages: Dict[ErrorKind, str],
                               generic_prefix: str, attachment_name: str, screenshot_title: str) -> None:
        self.logger.info(f"[WAIT] {step_name}")
        with self.report.step(step_name):
            try:
                retry_action(wait, self._retries(retries), action_name, self.logger)
            except Exception as e:
                kind = classify_error(e)
                message = messages.get(kind, f"{generic_prefix}: {error_message(e)}")
                self.logger.error(message)
                self.report.attach_text(attachment_name, message)
                self.capture_screenshot(screenshot_title)
                raise

    def wait_for_visible(self, locator: str, timeout: Optional[int] = None, retries: Optional[int] = None) -> None:
        timeout_ms = self._timeout_ms(timeout)
        self._wait_with_diagnostics(
            f"Wait for element to be visible: {locator}", 'waitForVisible',
            lambda: self._wait_displayed(locator, timeout), retries,
            {
                ErrorKind.STALE_ELEMENT: f"VISIBILITY ERROR: Element [{locator}] became stale before interaction. Consider retrying.",
                ErrorKind.TIMEOUT: f"VISIBILITY TIMEOUT: Element [{locator}] did not appear within {timeout_ms}ms.",
            },
            'VISIBILITY CHECK FAILED', 'Visibility Failure', 'Visibility Check Failed')

    def wait_for_clickable(self, locator: str, timeout: Optional[int] = None, retries: Optional[int] = None) -> None:
        timeout_ms = self._timeout_ms(timeout)
        self._wait_with_diagnostics(
            f"Wait for element to be clickable: {locator}", 'waitForClickable',
            lambda: self._wait_clickable(locator, timeout), retries,
            {
                ErrorKind.STALE_ELEMENT: f"STALE ELEMENT ERROR: Element [{locator}] became stale before interaction. Consider retrying.",
                ErrorKind.TIMEOUT: f"TIMEOUT ERROR: Element [{locator}] did not become clickable within {timeout_ms}ms.",
            },
            'CLICKABILITY CHECK FAILED', 'Clickable Failure', 'Clickability Check Failed')

    def wait_for_disappearance(self, locator: str, timeout: Optional[int] = None) -> None:
        step_name = f"Wait for element to disappear: {locator}"
        self.logger.info(f"[WAIT] {step_name}")
        with self.report.step(step_name):
            try:
                self._wait(timeout).until(EC.invisibility_of_element_located(to_by(locator)))
            except TimeoutException:
                msg = f"TIMEOUT: Element [{locator}] did not disappear within {self._timeout_ms(timeout)} ms."
                self.logger.error(msg)
                self.report.attach_text('Disappearance Failure', msg)
            except Exception as e:
                msg = f"UNEXPECTED ERROR: Failed while waiting for element [{locator}] to disappear."
                self.logger.error(f"{msg} {error_message(e)}")
                self.report.attach_text('Wait for Disappearance Error', f"{msg}\n{error_message(e)}")
                raise

    # ------------------------------------------------------------------- alerts

    def _alert_action(self, step_name: str, attachment_name: str, screenshot_title: str,
                      act: Callable) -> None:
        self.logger.info(f"[ACTION] {step_name}")
        with self.report.step(step_name):
            try:
                alert = self._wait_for_alert()
                self.logger.info(f"[ALERT] Text: {alert.text}")
                act(alert)
            except Exception as e:
                self.logger.error(f"[ALERT][ERROR] {error_message(e)}")
                self.report.attach_text(attachment_name, error_message(e))
                self.capture_screenshot(screenshot_title)
                raise

    def accept_alert(self) -> None:
        self._alert_action('Accept Alert', 'Alert Accept Failed', 'Accept Alert Failed',
                           lambda alert: alert.accept())

    def dismiss_alert(self) -> None:
        self._alert_action('Dismiss Alert', 'Alert Dismiss Failed', 'Dismiss Alert Failed',
                           lambda alert: alert.dismiss())

    def get_alert_text(self) -> str:
        step_name = 'Get Alert Text'
        self.logger.info(f"[ACTION] {step_name}")
        with self.report.step(step_name) as step:
            try:
                alert_text = self._wait_for_alert().text
            except Exception as e:
                self._record_failure(step, f"[ALERT][ERROR] {error_message(e)}",
                                     'Alert Text Retrieval Failed', 'Get Alert Text Failed')
                return ''
            self.logger.info(f"[ALERT] Text Retrieved: {alert_text}")
            return alert_text or ''

    def type_alert(self, text: str) -> None:
        step_name = f'Type text into alert: "{text}"'
        self.logger.info(f"[ALERT] {step_name}")
        with self.report.step(step_name):
            if is_blank(text):
                msg = 'TEXT INPUT FAILED: Data is null or empty. Cannot send invalid input to the alert'
                self.logger.error(msg)
                self.report.attach_text('Alert Input Error', msg)
                raise InvalidInputError(msg)
            try:
                self._wait_for_alert().send_keys(text)
            except Exception as e:
                self.logger.error(f"[ALERT][ERROR] {error_message(e)}")
                self.report.attach_text('Type Alert Failed', error_message(e))
                self.capture_screenshot('Type Alert Failed')
                raise

    # ------------------------------------------------------------------ windows

    def switch_to_window(self, index: int) -> None:
        step_name = f"Switch to window with index: {index}"
        self.logger.info(f"[WINDOW] {step_name}")
        with self.report.step(step_name):
            try:
                handles = self.driver.window_handles
                if index < 0 or index >= len(handles):
                    raise WindowNotFoundError(
                        f"WINDOW NOT FOUND: No window exists at index [{index}]. Available handles: {len(handles)}")
                self.driver.switch_to.window(handles[index])
            except Exception as e:
                self.logger.error(f"[WINDOW][ERROR] {error_message(e)}")
                self.report.attach_text('Window Switch Failed', error_message(e))
                self.capture_screenshot('Switch Window Failed')
                raise

    def switch_to_window_by_title(self, title: str) -> bool:
        step_name = f'Switch to window with title: "{title}"'
        self.logger.info(f"[WINDOW] {step_name}")
        with self.report.step(step_name) as step:
            try:
                original_handle = self.driver.current_window_handle
                for handle in self.driver.window_handles:
                    self.driver.switch_to.window(handle)
                    if self.driver.title == title:
                        self.logger.info(f'[WINDOW] Switched to window with matching title: "{title}"')
                        return True
                self.driver.switch_to.window(original_handle)
            except Exception as e:
                self._record_failure(step, f"[WINDOW][ERROR] {error_message(e)}",
                                     'Switch to Window by Title Failed', 'Switch To Title Failed')
                return False
            self._record_failure(step, f'The window with title "{title}" was not found.', 'Window Title Not Found')
            return False

    # ------------------------------------------------------------------- frames

    def switch_to_frame(self, index: int) -> None:
        step_name = f"Switch to frame with index: {index}"
        self.logger.info(f"[FRAME] {step_name}")
        with self.report.step(step_name):
            try:
                frames = self.driver.find_elements(By.CSS_SELECTOR, 'iframe, frame')
                if index < 0 or index >= len(frames):
                    raise FrameNotFoundError(
                        f"FRAME NOT FOUND: Frame index [{index}] is out of range. Found {len(frames)} frames.")
                self.driver.switch_to.frame(frames[index])
            except Exception as e:
                self.logger.error(f"[FRAME SWITCH ERROR] {error_message(e)}")
                self.capture_screenshot('Frame Switch Failed')
                raise

    def _switch_frame(self, description: str, switch: Callable[[], None]) -> None:
        step_name = f"Switch to frame using {description}"
        self.logger.info(f"[FRAME] {step_name}")
        with self.report.step(step_name):
            try:
                switch()
            except Exception as e:
                if classify_error(e) in FRAME_NOT_FOUND_KINDS:
                    message = (f"FRAME NOT FOUND: Unable to switch to frame using {description}. "
                               f"It may not exist or is not available.")
                else:
                    message = f"UNEXPECTED ERROR: Issue occurred while switching to frame using {description}"
                self.logger.error(f"{message} {error_message(e)}")
                self.report.attach_text('Frame Switch Error', f"{message}\n{error_message(e)}")
                raise
            self.logger.info(f"[FRAME] Switched to frame using {description}")

    def switch_to_frame_by_locator(self, locator: str) -> None:
        self._switch_frame(f"locator: {locator}",
                           lambda: self.driver.switch_to.frame(self._wait_exists(locator)))

    def switch_to_frame_by_xpath(self, xpath: str) -> None:
        self._switch_frame(f"XPath: {xpath}",
                           lambda: self.driver.switch_to.frame(self._wait_exists(f"xpath={xpath}")))

    def switch_to_frame_by_id_or_name(self, id_or_name: str) -> None:
        self._switch_frame(f"id/name: {id_or_name}",
                           lambda: self._wait().until(EC.frame_to_be_available_and_switch_to_it(id_or_name)))

    def switch_to_parent_frame(self) -> None:
        with self.report.step('Switch to parent frame'):
            try:
                self.driver.switch_to.parent_frame()
            except Exception as e:
                message = ('FRAME SWITCH FAILED: Unable to switch back to parent frame. '
                           'Possible reasons: invalid frame state or browser issue.')
                self.logger.error(f"{message} {error_message(e)}")
                self.report.attach_text('Parent Frame Switch Error', f"{message}\n{error_message(e)}")
                raise
            self.logger.info('[FRAME] Switched back to parent frame')

    def switch_to_default_content(self) -> None:
        with self.report.step('Switch to default content'):
            try:
                self.driver.switch_to.default_content()
            except Exception as e:
                message = 'FRAME SWITCH FAILED: Unable to switch back to default content.'
                self.logger.error(f"{message} {error_message(e)}")
                self.report.attach_text('Default Frame Switch Error', f"{message}\n{error_message(e)}")
                raise
            self.logger.info('[FRAME] Switched back to default content')
