"""
Базовый класс для всех Page Object'ов.

Предоставляет:
- Навигацию относительно base_url из Settings
- Явные ожидания с таймаутом действия из Settings
- Действия (клик, ввод)
- Проверки видимости для тестов
- Сбор артефактов (скриншот, HTML, логи браузера) для диагностики

Ошибки Selenium (TimeoutException, NoSuchElementException и т.д.) не
перехватываются: падение шага должно дойти до теста как есть.
"""
import json
import logging
import os
import time

from selenium.common.exceptions import (
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException
)
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from settings import Settings
from steps import step

logger = logging.getLogger(__name__)


class BasePage:
    # === КОНСТАНТЫ ===
    POLL_FREQUENCY = 0.25

    # Локатор, по которому видно, что страница загружена (задают наследники)
    PAGE_MARKER = None
    PAGE_NAME = "Page"
    PATH = "/"

    def __init__(self, driver, settings=None):
        """
        :param driver: WebDriver instance
        :param settings: Settings прогона (по умолчанию: значения по умолчанию)
        """
        self.driver = driver
        self.settings = settings or Settings()
        self.timeout = self.settings.action_timeout

    # === ОЖИДАНИЯ ===

    def safe_wait(self, condition, timeout=None, message=""):
        """
        Ожидание с игнорированием StaleElement (DOM перерисовался между опросами).

        :param condition: Условие (например, EC.visibility_of_element_located)
        :param timeout: Время ожидания (по умолчанию: action_timeout)
        :param message: Текст для TimeoutException
        :return: Результат условия
        """
        w = WebDriverWait(
            self.driver,
            self.timeout if timeout is None else timeout,
            poll_frequency=self.POLL_FREQUENCY,
            ignored_exceptions=(StaleElementReferenceException,)
        )
        return w.until(condition, message)

    def wait_ready(self):
        """Ожидает, пока document.readyState не станет 'complete'."""
        return self.safe_wait(
            lambda d: d.execute_script("return document.readyState") == "complete",
            timeout=self.settings.navigation_timeout,
            message="document.readyState != complete"
        )

    # === НАВИГАЦИЯ ===

    def open(self, path=None):
        """
        Открывает путь относительно base_url и ждёт маркер страницы.

        :param path: Путь (по умолчанию: PATH класса)
        """
        url = self.settings.url(self.PATH if path is None else path)
        logger.debug("GET %s", url)
        self.driver.get(url)
        self.wait_ready()
        if self.PAGE_MARKER is not None:
            self.expect_visible(self.PAGE_MARKER, f"{self.PAGE_NAME} loaded")

    # === ДЕЙСТВИЯ ===

    def find(self, locator):
        """Ждёт появления элемента в DOM и возвращает его."""
        return self.safe_wait(EC.presence_of_element_located(locator), message=f"{locator} not present")

    def click(self, locator):
        """
        Кликает по элементу после ожидания его кликабельности.

        :param locator: (By, selector)
        :return: Элемент
        """
        el = self.safe_wait(EC.element_to_be_clickable(locator), message=f"{locator} not clickable")
        el.click()
        return el

    def type(self, locator, text, clear_first=True):
        """
        Вводит текст в поле ввода.

        :param locator: (By, selector)
        :param text: Текст для ввода
        :param clear_first: Очистить поле перед вводом
        :return: Элемент
        """
        el = self.safe_wait(EC.visibility_of_element_located(locator), message=f"{locator} not visible")
        if clear_first:
            el.clear()
        el.send_keys(text)
        return el

    # === ПРОВЕРКИ ===

    def expect_visible(self, locator, message=""):
        """
        Ждёт видимости элемента; по таймауту: TimeoutException с message.

        :return: Элемент
        """
        return self.safe_wait(
            EC.visibility_of_element_located(locator),
            message=message or f"{locator} not visible"
        )

    def expect_hidden(self, locator, message=""):
        """Ждёт, пока элемент не исчезнет (или его не будет в DOM)."""
        return self.safe_wait(
            EC.invisibility_of_element_located(locator),
            message=message or f"{locator} still visible"
        )

    def is_visible(self, locator, timeout=None):
        """
        Проверяет видимость элемента, не падая по таймауту.

        :param timeout: Сколько ждать появления (0: проверить сразу)
        :return: True, если элемент стал видимым
        """
        try:
            self.safe_wait(EC.visibility_of_element_located(locator), timeout=timeout)
            return True
        except TimeoutException:
            return False

    def text_of(self, locator):
        return self.expect_visible(locator).text

    # === АРТЕФАКТЫ (ДЛЯ ДИАГНОСТИКИ) ===

    def save_artifacts(self, tag="debug", screenshot=True, trace=True):
        """
        Сохраняет артефакты для анализа при ошибках:
        - Скриншот
        - HTML страницы и логи браузера (аналог трассы)
        - Текстовый отчёт

        Сбой сохранения только логируется, чтобы не перекрыть исходную ошибку теста.

        :param tag: Метка для группировки (обычно имя теста)
        :param screenshot: Сохранять скриншот
        :param trace: Сохранять HTML и консоль браузера
        :return: Словарь с путями к артефактам
        """
        with step(f"Save artifacts '{tag}'"):
            timestamp = time.strftime("%Y%m%d_%H%M%S")
            base = os.path.join(self.settings.artifacts_dir, f"{timestamp}_{tag}")
            try:
                os.makedirs(self.settings.artifacts_dir, exist_ok=True)
            except OSError as exc:
                logger.warning("Каталог артефактов недоступен: %s", exc)
            saved = {"url": "<unknown>"}

            try:
                saved["url"] = self.driver.current_url
            except WebDriverException as exc:
                logger.warning("Не удалось получить URL: %s", exc)

            if screenshot:
                png_path = f"{base}.png"
                try:
                    if self.driver.save_screenshot(png_path) is not False:
                        saved["png"] = png_path
                except WebDriverException as exc:
                    logger.warning("Скриншот не сохранён: %s", exc)

            if trace:
                html_path = f"{base}.html"
                try:
                    with open(html_path, "w", encoding="utf-8") as f:
                        f.write(self.driver.page_source or "")
                    saved["html"] = html_path
                except (OSError, WebDriverException) as exc:
                    logger.warning("HTML не сохранён: %s", exc)

                # get_log("browser") есть только у Chromium-драйверов
                logs = []
                try:
                    logs = list(self.driver.get_log("browser"))
                except (AttributeError, WebDriverException):
                    logger.debug("Логи браузера недоступны")

                log_path = f"{base}_console.json"
                try:
                    with open(log_path, "w", encoding="utf-8") as f:
                        json.dump({"url": saved["url"], "logs": logs}, f, ensure_ascii=False, indent=2, default=str)
                    saved["log"] = log_path
                except OSError as exc:
                    logger.warning("Логи браузера не сохранены: %s", exc)

            txt_path = f"{base}.txt"
            try:
                with open(txt_path, "w", encoding="utf-8") as f:
                    f.write("".join(f"{key}: {value}\n" for key, value in saved.items()))
                saved["txt"] = txt_path
            except OSError as exc:
                logger.warning("Отчёт не сохранён: %s", exc)

            logger.info("[ART] %s -> %s", tag, " | ".join(str(v) for k, v in saved.items() if k != "url"))
            return saved
