"""
Фикстуры pytest для e2e- и unit-тестов Page Object'ов.

- Settings создаются один раз в pytest_configure и лежат в config.stash
- driver параметризуется по браузерам из Settings (или --browser)
- e2e-тесты пропускаются, пока не передан --run-e2e (или RUN_E2E=1)
- при падении e2e-теста сохраняются артефакты по политике Settings
"""
import os
import re
from unittest.mock import MagicMock

import pytest
from selenium.common.exceptions import NoSuchElementException

from browser import create_driver
from pages.base_page import BasePage
from pages.front_page import FrontPage
from settings import SUPPORTED_BROWSERS, Settings

SETTINGS_KEY = pytest.StashKey[Settings]()


# =============================================================================
# Конфигурация раннера
# =============================================================================

def pytest_addoption(parser):
    group = parser.getgroup("e2e", "hotel front page e2e")
    group.addoption(
        "--browser", action="append", default=[], choices=SUPPORTED_BROWSERS,
        help="browser profile to run e2e tests in (repeatable, default: BROWSERS env or all)"
    )
    group.addoption(
        "--run-e2e", action="store_true", default=False,
        help="run tests marked e2e against the deployed site"
    )


@pytest.hookimpl(tryfirst=True)
def pytest_cmdline_main(config):
    # Число воркеров pytest-xdist из Settings, если -n не передан явно.
    # Внутри воркера xdist параметр не трогаем.
    if hasattr(config, "workerinput") or not config.pluginmanager.hasplugin("xdist"):
        return
    workers = Settings.from_env().workers
    if workers and config.getoption("numprocesses", None) is None:
        config.option.numprocesses = workers


def pytest_configure(config):
    settings = Settings.from_env()
    if config.getoption("browser"):
        settings = settings.with_browsers(config.getoption("browser"))
    config.stash[SETTINGS_KEY] = settings

    if settings.max_failures and not config.option.maxfail:
        config.option.maxfail = settings.max_failures


def pytest_collection_modifyitems(config, items):
    settings = config.stash[SETTINGS_KEY]
    run_e2e = config.getoption("run_e2e") or os.environ.get("RUN_E2E") == "1"
    skip_e2e = pytest.mark.skip(reason="e2e tests need --run-e2e")

    for item in items:
        if item.get_closest_marker("e2e") is None:
            continue
        if not run_e2e:
            item.add_marker(skip_e2e)
            continue
        # Повторы и таймаут: на уровне всего теста, не отдельных действий
        if settings.retries:
            item.add_marker(pytest.mark.flaky(reruns=settings.retries))
        item.add_marker(pytest.mark.timeout(settings.test_timeout))


def pytest_generate_tests(metafunc):
    if "browser_name" in metafunc.fixturenames:
        settings = metafunc.config.stash[SETTINGS_KEY]
        metafunc.parametrize("browser_name", settings.browsers)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


# =============================================================================
# E2E-фикстуры
# =============================================================================

@pytest.fixture(scope="session")
def settings(pytestconfig):
    return pytestconfig.stash[SETTINGS_KEY]


@pytest.fixture
def driver(request, browser_name, settings):
    """Отдельный браузер на каждый тест; артефакты: по политике Settings."""
    drv = create_driver(browser_name, settings)
    try:
        yield drv
    finally:
        rep = getattr(request.node, "rep_call", None)
        failed = rep is not None and rep.failed
        screenshot = settings.capture_screenshot(failed)
        trace = settings.capture_trace(failed)
        try:
            if screenshot or trace:
                tag = re.sub(r"[^\w.-]+", "_", request.node.name)
                BasePage(drv, settings).save_artifacts(tag, screenshot=screenshot, trace=trace)
        finally:
            drv.quit()


@pytest.fixture
def front_page(driver, settings):
    page = FrontPage(driver, settings)
    page.goto()
    return page


# =============================================================================
# Unit-фикстуры (без браузера)
# =============================================================================

@pytest.fixture
def unit_settings(tmp_path):
    return Settings(action_timeout=0.3, navigation_timeout=0.3, artifacts_dir=str(tmp_path / "artifacts"))


@pytest.fixture
def mock_driver():
    """
    MagicMock вместо WebDriver.

    На каждый локатор: свой видимый и активный элемент (driver.elements),
    клики и ввод пишутся по порядку в driver.actions.
    Локаторы из driver.missing не находятся (NoSuchElementException).
    """
    driver = MagicMock()
    driver.elements = {}
    driver.actions = []
    driver.missing = set()

    def find_element(by, value):
        if value in driver.missing:
            raise NoSuchElementException(value)
        key = (by, value)
        if key not in driver.elements:
            el = MagicMock(name=value)
            el.is_displayed.return_value = True
            el.is_enabled.return_value = True
            el.click.side_effect = lambda v=value: driver.actions.append(("click", v))
            el.send_keys.side_effect = lambda text, v=value: driver.actions.append(("type", v, text))
            driver.elements[key] = el
        return driver.elements[key]

    driver.find_element.side_effect = find_element
    driver.current_url = "https://automationintesting.online/"
    driver.page_source = "<html></html>"
    driver.get_log.return_value = []
    driver.execute_script.return_value = "complete"
    return driver
