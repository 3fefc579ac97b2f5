"""
Смоук-прогон главной страницы отеля вне pytest.

Логика:
1. Открытие главной страницы
2. Отправка сообщения через контактную форму
3. Повторное открытие страницы и бронирование номера
4. Проверка: сообщение об успехе и окно подтверждения бронирования

Используется Page Object Model (POM): сценарий не знает ни одного селектора.
Браузер и адрес сайта берутся из переменных окружения (см. settings.py).
"""

import logging
import sys

from browser import create_driver
from pages.front_page import FrontPage
from settings import Settings

logger = logging.getLogger("main")

CONTACT = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "phone": "1234567890",
    "subject": "Inquiry",
    "description": "Is breakfast included?",
}

BOOKING = {
    "room_name": "Single",
    "first_name": "John",
    "last_name": "Smith",
    "email": "john@example.com",
    "phone_number": "5551234567",
}


def run(driver, settings):
    """
    Прогоняет оба сценария на одном драйвере.

    :return: Словарь {сценарий: дошёл ли до ожидаемого состояния}
    """
    front_page = FrontPage(driver, settings)
    results = {}

    # --- Шаг 1: Контактная форма ---
    front_page.goto()
    front_page.send_message(**CONTACT)
    results["send_message"] = front_page.is_visible(front_page.CONTACT_SUCCESS_MESSAGE)
    logger.info("[RESULT] Сообщение отправлено: %s", "Успешно" if results["send_message"] else "Не удалось")

    # --- Шаг 2: Бронирование ---
    front_page.goto()
    front_page.book_room(**BOOKING)
    results["book_room"] = front_page.is_visible(front_page.BOOKING_CONFIRMATION_MODAL)
    logger.info("[RESULT] Бронирование номера: %s", "Успешно" if results["book_room"] else "Не удалось")

    return results


def main():
    """Основной смоук-сценарий. Код возврата 1, если какой-то сценарий не дошёл до конца."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s", level=logging.INFO)
    settings = Settings.from_env()
    driver = create_driver(settings.browsers[0], settings)

    try:
        results = run(driver, settings)
    except Exception as e:
        logger.error("[ERROR] Ошибка в основном сценарии: %s: %s", type(e).__name__, e)
        FrontPage(driver, settings).save_artifacts("smoke")
        raise
    finally:
        driver.quit()
        logger.info("[INFO] Драйвер закрыт")

    return 0 if all(results.values()) else 1


# Запуск смоук-прогона
if __name__ == "__main__":
    sys.exit(main())
