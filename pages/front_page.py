"""
Page Object для главной страницы отеля (лендинг).

Отвечает за:
- Открытие страницы
- Отправку сообщения через контактную форму
- Бронирование номера: выбор номера, заполнение полей, выбор дат в календаре

Особенности:
- Статический промо-блок на сайте дублирует разметку формы бронирования,
  поэтому поля формы берутся последними в порядке документа
- Поля контактной формы имеют data-testid и берутся по нему
- Календарь (react-big-calendar) выбирает диапазон жестом
  "нажать на первой дате, провести до последней, отпустить"
"""

from selenium.webdriver import ActionChains
from selenium.webdriver.common.by import By

from steps import step
from .base_page import BasePage
from .locators import button, by_test_id, first, has_class, last, xpath_literal


class FrontPage(BasePage):
    PAGE_NAME = "Front Page"
    PATH = "/"

    # === ЛОКАТОРЫ ===

    PAGE_MARKER = (By.CSS_SELECTOR, ".hotel-description")

    # Форма бронирования (последняя: см. описание модуля)
    BOOKING_FIRST_NAME_FIELD = last((By.XPATH, f"//input[{has_class('room-firstname')}]"))
    BOOKING_LAST_NAME_FIELD = last((By.XPATH, f"//input[{has_class('room-lastname')}]"))
    BOOKING_EMAIL_FIELD = last((By.XPATH, f"//input[{has_class('room-email')}]"))
    BOOKING_PHONE_FIELD = last((By.XPATH, f"//input[{has_class('room-phone')}]"))
    BOOKING_BOOK_BUTTON = last(button("Book", exact=True))
    BOOKING_CONFIRMATION_MODAL = (By.CSS_SELECTOR, ".confirmation-modal")
    BOOKING_ERROR_MESSAGES = last((
        By.XPATH,
        f"//div[{has_class('hotel-room-info')}]//*[{has_class('alert', 'alert-danger')}]"
    ))

    # Кнопка "Book this room" внутри карточки номера; {room}: XPath-литерал.
    # У кнопок нет идентификатора, поэтому берётся последняя: промо-блок
    # выводит те же карточки раньше динамического списка номеров.
    ROOM_BOOK_BUTTON_TEMPLATE = "//div[./div/img[contains(@alt, {room})]]//button"

    # Календарь
    BOOKING_CALENDAR_NEXT_BUTTON = last(button("Next", exact=False))
    CALENDAR_LABEL = (By.CSS_SELECTOR, ".rbc-toolbar-label")
    _IN_RANGE_DAY = (By.XPATH, f"//div[{has_class('rbc-day-bg')} and not({has_class('rbc-off-range-bg')})]")
    CALENDAR_FIRST_DAY = first(_IN_RANGE_DAY)
    CALENDAR_LAST_DAY = last(_IN_RANGE_DAY)
    # Ячейка с номером дня текущего месяца; {day}: число
    CALENDAR_DATE_CELL_TEMPLATE = (
        f"//div[{has_class('rbc-date-cell')} and not({has_class('rbc-off-range')})]"
        "[number(normalize-space()) = {day}]"
    )

    # Контактная форма
    CONTACT_NAME_FIELD = by_test_id("ContactName")
    CONTACT_EMAIL_FIELD = by_test_id("ContactEmail")
    CONTACT_PHONE_FIELD = by_test_id("ContactPhone")
    CONTACT_SUBJECT_FIELD = by_test_id("ContactSubject")
    CONTACT_DESCRIPTION_FIELD = by_test_id("ContactDescription")
    CONTACT_SUBMIT_BUTTON = button("Submit", exact=False)
    CONTACT_SUCCESS_MESSAGE = (By.CSS_SELECTOR, "div.contact h2")
    CONTACT_ERROR_MESSAGES = (By.CSS_SELECTOR, "div.contact .alert.alert-danger")

    # === КОНСТАНТЫ ===

    MAX_CALENDAR_MONTHS = 12  # Максимум месяцев вперёд при поиске нужного
    CALENDAR_LABEL_FORMAT = "%B %Y"  # "October 2026"

    # === МЕТОДЫ ===

    def goto(self):
        """Открывает главную страницу и ждёт блок с описанием отеля."""
        with step("Go to Front Page"):
            self.open()

    def send_message(self, name, email, phone, subject, description):
        """
        Заполняет контактную форму и отправляет её.
        Валидации нет: ошибки формы проверяются тестом через CONTACT_ERROR_MESSAGES.
        """
        with step("Submit Message to Hotel"):
            self.type(self.CONTACT_NAME_FIELD, name)
            self.type(self.CONTACT_EMAIL_FIELD, email)
            self.type(self.CONTACT_PHONE_FIELD, phone)
            self.type(self.CONTACT_SUBJECT_FIELD, subject)
            self.type(self.CONTACT_DESCRIPTION_FIELD, description)
            self.click(self.CONTACT_SUBMIT_BUTTON)

    def room_book_buttons(self, room_name):
        """
        Локатор всех кнопок бронирования для номера, чей alt картинки содержит
        room_name (с учётом регистра). Промо-блок даёт дубли перед списком номеров.
        """
        return (By.XPATH, self.ROOM_BOOK_BUTTON_TEMPLATE.format(room=xpath_literal(room_name)))

    def room_book_button(self, room_name):
        """Кнопка бронирования номера room_name из списка номеров (последнее совпадение)."""
        return last(self.room_book_buttons(room_name))

    def click_book_this_room_button(self, room_name):
        with step(f"Click on Book this room button for Room named '{room_name}'"):
            self.click(self.room_book_button(room_name))

    def fill_booking_fields(self, first_name, last_name, email, phone_number):
        with step("Fill in booking information"):
            self.type(self.BOOKING_FIRST_NAME_FIELD, first_name)
            self.type(self.BOOKING_LAST_NAME_FIELD, last_name)
            self.type(self.BOOKING_EMAIL_FIELD, email)
            self.type(self.BOOKING_PHONE_FIELD, phone_number)

    def select_booking_dates(self, check_in=None, check_out=None):
        """
        Выбирает даты бронирования в календаре.

        Без аргументов: листает на следующий месяц и выделяет весь видимый
        диапазон (от первой до последней ячейки месяца).
        С датами: листает до месяца check_in и выделяет check_in..check_out.

        :param check_in: datetime.date заезда
        :param check_out: datetime.date выезда (тот же месяц, не раньше check_in)
        """
        if (check_in is None) != (check_out is None):
            raise ValueError("check_in и check_out задаются вместе")

        if check_in is None:
            with step("Select Booking dates"):
                self.click(self.BOOKING_CALENDAR_NEXT_BUTTON)
                self._drag_select(self.CALENDAR_FIRST_DAY, self.CALENDAR_LAST_DAY)
            return

        if check_out < check_in:
            raise ValueError(f"Дата выезда {check_out} раньше даты заезда {check_in}")
        if (check_in.year, check_in.month) != (check_out.year, check_out.month):
            raise ValueError("Календарь выделяет диапазон только внутри одного месяца")

        with step(f"Select Booking dates {check_in.isoformat()} - {check_out.isoformat()}"):
            self.show_calendar_month(check_in)
            self._drag_select(self.calendar_date_cell(check_in.day), self.calendar_date_cell(check_out.day))

    def show_calendar_month(self, day):
        """
        Листает календарь кнопкой "Next", пока не покажется месяц даты day.

        :param day: datetime.date
        """
        wanted = day.strftime(self.CALENDAR_LABEL_FORMAT)
        for _ in range(self.MAX_CALENDAR_MONTHS):
            if self.text_of(self.CALENDAR_LABEL).strip() == wanted:
                return
            self.click(self.BOOKING_CALENDAR_NEXT_BUTTON)
        if self.text_of(self.CALENDAR_LABEL).strip() != wanted:
            raise RuntimeError(f"Не удалось найти месяц: {wanted}")

    def calendar_date_cell(self, day_number):
        return (By.XPATH, self.CALENDAR_DATE_CELL_TEMPLATE.format(day=int(day_number)))

    def _drag_select(self, start_locator, end_locator):
        # Нажатие на начальной ячейке, протяжка до конечной, отпускание
        start = self.expect_visible(start_locator)
        ActionChains(self.driver).move_to_element(start).click_and_hold().perform()
        end = self.expect_visible(end_locator)
        ActionChains(self.driver).move_to_element(end).release().perform()

    def click_on_book_button(self):
        with step("Click on Book button"):
            self.click(self.BOOKING_BOOK_BUTTON)

    def book_room(self, room_name, first_name, last_name, email, phone_number, check_in=None, check_out=None):
        """
        Полный сценарий бронирования: номер -> поля -> даты -> Book.
        Отката нет: падение любого шага прерывает сценарий.
        """
        with step(f"Book a Room '{room_name}'"):
            self.click_book_this_room_button(room_name)
            self.fill_booking_fields(first_name, last_name, email, phone_number)
            self.select_booking_dates(check_in, check_out)
            self.click_on_book_button()

    def book_room_without_dates(self, room_name, first_name, last_name, email, phone_number):
        """Бронирование без выбора дат: для проверки ошибки валидации."""
        with step(f"Book a Room '{room_name}' without selecting booking dates"):
            self.click_book_this_room_button(room_name)
            self.fill_booking_fields(first_name, last_name, email, phone_number)
            self.click_on_book_button()
