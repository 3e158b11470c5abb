from portal_uitest.config.settings import Config, EnvConfig, FrameworkConfig, get_env_config, get_framework_config
from portal_uitest.core.browser_utils import BrowserUtils
from portal_uitest.core.reporting import AllureReporter, MemoryReporter, ReportContext
from portal_uitest.core.retry import retry_action
from portal_uitest.services.failure_tracker import (
    FailureTracker,
    clear_failed_tests,
    get_failed_test_titles,
    log_failed_test,
)
from portal_uitest.utils.encryption import decrypt, encrypt

__version__ = '1.0.0'
