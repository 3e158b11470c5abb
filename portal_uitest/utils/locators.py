# utils/locators.py
from typing import Tuple

from selenium.webdriver.common.by import By

_PREFIXES = (
    ('xpath=', By.XPATH),
    ('css=', By.CSS_SELECTOR),
    ('id=', By.ID),
    ('name=', By.NAME),
    ('*=', By.PARTIAL_LINK_TEXT),
    ('=', By.LINK_TEXT),
)


def to_by(locator: str) -> Tuple[str, str]:
    """Resolve a locator string to a Selenium ``(By, value)`` pair.

    ``xpath=``, ``css=``, ``id=`` and ``name=`` select the strategy
    explicitly; ``//``, ``./`` and ``(`` are XPath; ``=Text`` and
    ``*=Text`` are link text and partial link text. Anything else is
    treated as a CSS selector.
    """
    for prefix, by in _PREFIXES:
        if locator.startswith(prefix):
            return by, locator[len(prefix):]
    if locator.startswith(('//', './', '(')):
        return By.XPATH, locator
    return By.CSS_SELECTOR, locator


def xpath_literal(text: str) -> str:
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    parts = text.split('"')
    return 'concat(' + ', \'"\', '.join(f'"{part}"' for part in parts) + ')'


def option_by_text_xpath(text: str) -> str:
    return f".//option[normalize-space(.) = normalize-space({xpath_literal(text)})]"
