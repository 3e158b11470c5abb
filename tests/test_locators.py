import pytest
from selenium.webdriver.common.by import By

from portal_uitest.utils.locators import option_by_text_xpath, to_by, xpath_literal


@pytest.mark.parametrize('locator, expected', [
    ('#login', (By.CSS_SELECTOR, '#login')),
    ('button.primary > span', (By.CSS_SELECTOR, 'button.primary > span')),
    ('css=div[data-id="x"]', (By.CSS_SELECTOR, 'div[data-id="x"]')),
    ('//button[text()="Save"]', (By.XPATH, '//button[text()="Save"]')),
    ('./td[2]', (By.XPATH, './td[2]')),
    ('(//li)[3]', (By.XPATH, '(//li)[3]')),
    ('xpath=//input', (By.XPATH, '//input')),
    ('id=username', (By.ID, 'username')),
    ('name=q', (By.NAME, 'q')),
    ('=Sign out', (By.LINK_TEXT, 'Sign out')),
    ('*=Sign', (By.PARTIAL_LINK_TEXT, 'Sign')),
])
def test_to_by(locator, expected):
    assert to_by(locator) == expected


def test_xpath_literal_quotes():
    assert xpath_literal('Gold') == '"Gold"'
    assert xpath_literal('Say "hi"') == '\'Say "hi"\''
    assert xpath_literal('It\'s "big"') == 'concat("It\'s ", \'"\', "big", \'"\', "")'


def test_option_by_text_xpath():
    assert option_by_text_xpath('Gold plan') == './/option[normalize-space(.) = normalize-space("Gold plan")]'
