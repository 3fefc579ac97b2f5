"""
Построители XPath-локаторов.

Локатор: кортеж (By, selector), как во всех Page Object'ах проекта.
Selenium разрешает его заново при каждом ожидании, поэтому локаторы
можно держать константами класса.

Если на странице несколько одинаковых элементов, предпочитается
стабильный test-id; позиционный выбор (first/last): только там,
где сайт не даёт идентификатора.
"""
from selenium.webdriver.common.by import By

TEST_ID_ATTRIBUTE = "data-testid"


def xpath_literal(value):
    """
    Превращает строку в корректный XPath-литерал.

    XPath 1.0 не умеет экранировать кавычки, поэтому строка, в которой
    есть и ' и ", собирается через concat().

    :param value: Произвольная строка
    :return: Литерал для подстановки в XPath
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


def has_class(*names):
    """Условие XPath: у элемента есть все перечисленные CSS-классы."""
    return " and ".join(
        f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')" for name in names
    )


def by_test_id(test_id, attribute=TEST_ID_ATTRIBUTE):
    return (By.XPATH, f"//*[@{attribute}={xpath_literal(test_id)}]")


def button(name, exact=True):
    """
    Кнопка по видимому тексту.

    :param name: Текст кнопки
    :param exact: Точное совпадение (иначе: подстрока)
    """
    literal = xpath_literal(name)
    if exact:
        return (By.XPATH, f"//button[normalize-space()={literal}]")
    return (By.XPATH, f"//button[contains(normalize-space(), {literal})]")


def first(locator):
    """Первый по порядку документа элемент из совпадений XPath-локатора."""
    by, xpath = locator
    if by != By.XPATH:
        raise ValueError("Позиционный выбор поддерживается только для XPath")
    return (By.XPATH, f"({xpath})[1]")


def last(locator):
    """Последний по порядку документа элемент из совпадений XPath-локатора."""
    by, xpath = locator
    if by != By.XPATH:
        raise ValueError("Позиционный выбор поддерживается только для XPath")
    return (By.XPATH, f"({xpath})[last()]")
