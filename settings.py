"""
Настройки прогона e2e-тестов.

Объект Settings создаётся один раз при старте (conftest.py или main.py)
из переменных окружения и дальше передаётся явно: в фабрику браузеров,
в фикстуры и в Page Object'ы. Сами страницы окружение не читают.
"""
import os
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

DEFAULT_BASE_URL = "https://automationintesting.online/"

# Поддерживаемые десктопные профили (chrome / firefox / safari)
SUPPORTED_BROWSERS = ("chrome", "firefox", "safari")

SCREENSHOT_MODES = ("on", "off", "only-on-failure")
TRACE_MODES = ("on", "off", "retain-on-failure")
# Selenium не умеет писать видео: допускается только "off"
VIDEO_MODES = ("off",)


def _env_bool(env, name, default):
    value = env.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(env, name, default):
    value = env.get(name)
    if value is None or value == "":
        return default
    return int(value)


def _env_float(env, name, default):
    value = env.get(name)
    if value is None or value == "":
        return default
    return float(value)


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    headless: bool = True

    # Таймауты в секундах
    action_timeout: float = 15
    navigation_timeout: float = 30
    test_timeout: float = 60

    retries: int = 0
    workers: Optional[int] = None
    max_failures: Optional[int] = None

    browsers: Tuple[str, ...] = SUPPORTED_BROWSERS

    # Политика артефактов при падении
    screenshot: str = "only-on-failure"
    trace: str = "retain-on-failure"
    video: str = "off"
    artifacts_dir: str = "test-results"

    ignore_https_errors: bool = True
    window_size: Tuple[int, int] = field(default=(1280, 720))
    ci: bool = False

    def __post_init__(self):
        unknown = [b for b in self.browsers if b not in SUPPORTED_BROWSERS]
        if unknown:
            raise ValueError(f"Неизвестные браузеры: {', '.join(unknown)}")
        if not self.browsers:
            raise ValueError("Не задан ни один браузер")
        if self.screenshot not in SCREENSHOT_MODES:
            raise ValueError(f"Неизвестный режим скриншотов: {self.screenshot}")
        if self.trace not in TRACE_MODES:
            raise ValueError(f"Неизвестный режим трассировки: {self.trace}")
        if self.video not in VIDEO_MODES:
            raise ValueError(f"Запись видео не поддерживается: {self.video}")
        if self.action_timeout <= 0:
            raise ValueError("action_timeout должен быть положительным")
        if self.retries < 0:
            raise ValueError("retries не может быть отрицательным")

    @classmethod
    def from_env(cls, environ=None):
        """
        Собирает настройки из переменных окружения.

        На CI (переменная CI) по умолчанию включаются повторы,
        один воркер и лимит падений.

        :param environ: Словарь окружения (по умолчанию: os.environ)
        :return: Settings
        """
        env = os.environ if environ is None else environ

        ci = _env_bool(env, "CI", False)
        browsers = env.get("BROWSERS", "")
        browsers = tuple(b.strip().lower() for b in browsers.split(",") if b.strip()) or SUPPORTED_BROWSERS

        return cls(
            base_url=env.get("BASE_URL") or DEFAULT_BASE_URL,
            headless=_env_bool(env, "HEADLESS", True),
            action_timeout=_env_float(env, "ACTION_TIMEOUT", 15),
            navigation_timeout=_env_float(env, "NAVIGATION_TIMEOUT", 30),
            test_timeout=_env_float(env, "TEST_TIMEOUT", 60),
            retries=_env_int(env, "RETRIES", 2 if ci else 0),
            workers=_env_int(env, "WORKERS", 1 if ci else None),
            max_failures=_env_int(env, "MAX_FAILURES", 10 if ci else None),
            browsers=browsers,
            screenshot=env.get("SCREENSHOT", "only-on-failure"),
            trace=env.get("TRACE", "retain-on-failure"),
            video=env.get("VIDEO", "off"),
            artifacts_dir=env.get("ARTIFACTS_DIR", "test-results"),
            ignore_https_errors=_env_bool(env, "IGNORE_HTTPS_ERRORS", True),
            ci=ci,
        )

    def with_browsers(self, browsers):
        """Копия настроек с другим списком браузеров (для --browser)."""
        return replace(self, browsers=tuple(b.lower() for b in browsers))

    def capture_screenshot(self, failed):
        return self.screenshot == "on" or (self.screenshot == "only-on-failure" and failed)

    def capture_trace(self, failed):
        return self.trace == "on" or (self.trace == "retain-on-failure" and failed)

    def url(self, path="/"):
        """Абсолютный URL для пути относительно base_url."""
        return self.base_url.rstrip("/") + "/" + path.lstrip("/")
