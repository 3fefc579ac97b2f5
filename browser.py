"""
Фабрика WebDriver'ов для десктопных профилей chrome / firefox / safari.

Драйверы chrome и firefox скачиваются через webdriver-manager;
safaridriver поставляется с macOS и ставится отдельно (safaridriver --enable).
"""
import logging

from selenium import webdriver
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager

from settings import SUPPORTED_BROWSERS

logger = logging.getLogger(__name__)


def _chrome(settings):
    options = webdriver.ChromeOptions()
    if settings.headless:
        options.add_argument("--headless=new")
    width, height = settings.window_size
    options.add_argument(f"--window-size={width},{height}")
    options.accept_insecure_certs = settings.ignore_https_errors
    # Логи консоли нужны для артефактов при падении
    options.set_capability("goog:loggingPrefs", {"browser": "ALL"})
    return webdriver.Chrome(service=ChromeService(ChromeDriverManager().install()), options=options)


def _firefox(settings):
    options = webdriver.FirefoxOptions()
    if settings.headless:
        options.add_argument("-headless")
    options.accept_insecure_certs = settings.ignore_https_errors
    driver = webdriver.Firefox(service=FirefoxService(GeckoDriverManager().install()), options=options)
    driver.set_window_size(*settings.window_size)
    return driver


def _safari(settings):
    if settings.headless:
        logger.warning("Safari не поддерживает headless-режим, запускаем с окном")
    driver = webdriver.Safari(options=webdriver.SafariOptions())
    driver.set_window_size(*settings.window_size)
    return driver


_FACTORIES = {
    "chrome": _chrome,
    "firefox": _firefox,
    "safari": _safari,
}


def create_driver(browser_name, settings):
    """
    Запускает браузер по имени профиля.

    :param browser_name: chrome, firefox или safari
    :param settings: Settings прогона
    :return: WebDriver с таймаутом загрузки страницы из settings
    """
    name = browser_name.lower()
    if name not in SUPPORTED_BROWSERS:
        raise ValueError(f"Неизвестный браузер: {browser_name}")

    logger.info("[INFO] Запуск браузера %s (headless=%s)", name, settings.headless)
    driver = _FACTORIES[name](settings)
    driver.set_page_load_timeout(settings.navigation_timeout)
    return driver
