"""Operator-facing text in English and Russian.

All strings shown by the menus live here, keyed by message id. Menus never
build user text themselves; they call `Messages` with a key and its fields.
"""

from __future__ import annotations

from core.domain.language import Language

EN = Language.ENGLISH
RU = Language.RUSSIAN

MESSAGES: dict[str, dict[Language, str]] = {
    # Banner
    "banner.title": {EN: "AVTORENT", RU: "АВТОРЕНТ"},
    "banner.subtitle": {
        EN: "Orders • Drivers • Vehicles",
        RU: "Заказы • Водители • Автомобили",
    },
    # Shared menu text
    "menu.choice": {EN: "Choose an action: ", RU: "Выберите действие: "},
    "menu.invalid": {EN: "Invalid input.", RU: "Некорректный ввод."},
    "menu.out_of_range": {
        EN: "Enter a number from 1 to {maximum}.",
        RU: "Введите число от 1 до {maximum}.",
    },
    "menu.back": {
        EN: "{number}) Back to main menu",
        RU: "{number}) Вернуться в главное меню",
    },
    "yes": {EN: "Yes", RU: "Да"},
    "no": {EN: "No", RU: "Нет"},
    # Main menu
    "main.title": {EN: "Main menu:", RU: "Главное меню:"},
    "main.orders": {EN: "1) Manage orders", RU: "1) Управление заказами"},
    "main.drivers": {EN: "2) Manage drivers", RU: "2) Управление водителями"},
    "main.cars": {EN: "3) Manage vehicles", RU: "3) Управление автомобилями"},
    "main.exit": {EN: "4) Exit", RU: "4) Выход"},
    "main.invalid": {
        EN: "Invalid input. Enter a number from 1 to 4.",
        RU: "Некорректный ввод. Введите число от 1 до 4.",
    },
    "main.goodbye": {EN: "Goodbye!", RU: "До свидания!"},
    "main.error": {EN: "Error: {error}", RU: "Ошибка: {error}"},
    "main.fatal": {EN: "Critical error: {error}", RU: "Критическая ошибка: {error}"},
    # Input validation
    "input.positive_int": {
        EN: "{field} must be a positive number. Try again: ",
        RU: "{field} должен быть положительным числом. Попробуйте снова: ",
    },
    "input.int_range": {
        EN: "{field} must be a number from {minimum} to {maximum}. Try again: ",
        RU: "{field} должен быть числом от {minimum} до {maximum}. Попробуйте снова: ",
    },
    "input.empty": {
        EN: "{field} cannot be empty. Try again: ",
        RU: "{field} не может быть пустым. Попробуйте снова: ",
    },
    "input.date_format": {
        EN: "Date format: dd.mm. Try again: ",
        RU: "Формат даты: дд.мм. Попробуйте снова: ",
    },
    "input.date_invalid": {
        EN: "Invalid date. Try again: ",
        RU: "Некорректная дата. Попробуйте снова: ",
    },
    "input.time_format": {
        EN: "Time format: hh:mm. Try again: ",
        RU: "Формат времени: чч:мм. Попробуйте снова: ",
    },
    "input.time_invalid": {
        EN: "Invalid time. Try again: ",
        RU: "Некорректное время. Попробуйте снова: ",
    },
    "input.bool": {
        EN: "Enter 'true' or 'false'. Try again: ",
        RU: "Введите 'true' или 'false'. Попробуйте снова: ",
    },
    # Orders
    "orders.title": {EN: "--- Order management ---", RU: "--- Управление заказами ---"},
    "orders.add": {EN: "1) Add order", RU: "1) Добавить заказ"},
    "orders.list": {EN: "2) View all orders", RU: "2) Просмотреть все заказы"},
    "orders.prompt.id": {EN: "Enter order number: ", RU: "Введите номер заказа: "},
    "orders.prompt.date": {
        EN: "Enter order date (dd.mm): ",
        RU: "Введите дату заказа (дд.мм): ",
    },
    "orders.prompt.start": {
        EN: "Enter start time (hh:mm): ",
        RU: "Введите время начала (чч:мм): ",
    },
    "orders.prompt.end": {
        EN: "Enter end time (hh:mm): ",
        RU: "Введите время окончания (чч:мм): ",
    },
    "orders.prompt.driver": {EN: "Enter driver number: ", RU: "Введите номер водителя: "},
    "orders.prompt.car": {EN: "Enter car number: ", RU: "Введите номер машины: "},
    "orders.field.id": {EN: "Order number", RU: "Номер заказа"},
    "orders.field.driver": {EN: "Driver number", RU: "Номер водителя"},
    "orders.field.car": {EN: "Car number", RU: "Номер машины"},
    "orders.duplicate": {
        EN: "An order with this number already exists.",
        RU: "Заказ с таким номером уже существует.",
    },
    "orders.bad_range": {
        EN: "End time must be later than start time.",
        RU: "Время окончания должно быть позже времени начала.",
    },
    "orders.added": {EN: "Order added successfully!", RU: "Заказ успешно добавлен!"},
    "orders.add_failed": {
        EN: "Error while adding the order: {error}",
        RU: "Ошибка при добавлении заказа: {error}",
    },
    "orders.empty": {EN: "No orders.", RU: "Заказов нет."},
    "orders.header": {EN: "All orders", RU: "Список всех заказов"},
    "orders.total": {EN: "Total orders: {count}", RU: "Всего заказов: {count}"},
    "orders.col.id": {EN: "Order", RU: "Заказ"},
    "orders.col.date": {EN: "Date", RU: "Дата"},
    "orders.col.start": {EN: "From", RU: "С"},
    "orders.col.end": {EN: "To", RU: "До"},
    "orders.col.driver": {EN: "Driver", RU: "Водитель"},
    "orders.col.car": {EN: "Car", RU: "Авто"},
    # Drivers
    "drivers.title": {EN: "--- Driver management ---", RU: "--- Управление водителями ---"},
    "drivers.add": {EN: "1) Add driver", RU: "1) Добавить водителя"},
    "drivers.edit": {EN: "2) Edit driver", RU: "2) Изменить водителя"},
    "drivers.delete": {EN: "3) Delete driver", RU: "3) Удалить водителя"},
    "drivers.list": {EN: "4) View all drivers", RU: "4) Просмотреть всех водителей"},
    "drivers.prompt.id": {EN: "Enter driver ID: ", RU: "Введите ID водителя: "},
    "drivers.prompt.first": {EN: "Enter first name: ", RU: "Введите имя: "},
    "drivers.prompt.last": {EN: "Enter last name: ", RU: "Введите фамилию: "},
    "drivers.prompt.edit_id": {
        EN: "Enter ID of the driver to edit: ",
        RU: "Введите ID водителя для редактирования: ",
    },
    "drivers.prompt.new_first": {
        EN: "Enter new first name (Enter - keep current): ",
        RU: "Введите новое имя (Enter - оставить текущее): ",
    },
    "drivers.prompt.new_last": {
        EN: "Enter new last name (Enter - keep current): ",
        RU: "Введите новую фамилию (Enter - оставить текущую): ",
    },
    "drivers.prompt.delete_id": {
        EN: "Enter ID of the driver to delete: ",
        RU: "Введите ID водителя для удаления: ",
    },
    "drivers.field.id": {EN: "Driver ID", RU: "ID водителя"},
    "drivers.field.first": {EN: "First name", RU: "Имя"},
    "drivers.field.last": {EN: "Last name", RU: "Фамилия"},
    "drivers.duplicate": {
        EN: "A driver with this ID already exists.",
        RU: "Водитель с таким ID уже существует.",
    },
    "drivers.not_found": {
        EN: "No driver with this ID was found.",
        RU: "Водитель с таким ID не найден.",
    },
    "drivers.added": {EN: "Driver added successfully!", RU: "Водитель успешно добавлен!"},
    "drivers.updated": {
        EN: "Driver details updated successfully!",
        RU: "Данные водителя успешно обновлены!",
    },
    "drivers.deleted": {EN: "Driver deleted successfully!", RU: "Водитель успешно удален!"},
    "drivers.edit_empty": {EN: "No drivers to edit.", RU: "Нет водителей для редактирования."},
    "drivers.delete_empty": {EN: "No drivers to delete.", RU: "Нет водителей для удаления."},
    "drivers.add_failed": {
        EN: "Error while adding the driver: {error}",
        RU: "Ошибка при добавлении водителя: {error}",
    },
    "drivers.edit_failed": {
        EN: "Error while editing the driver: {error}",
        RU: "Ошибка при редактировании водителя: {error}",
    },
    "drivers.empty": {EN: "No drivers.", RU: "Водителей нет."},
    "drivers.header": {EN: "All drivers", RU: "Список всех водителей"},
    "drivers.total": {EN: "Total drivers: {count}", RU: "Всего водителей: {count}"},
    "drivers.col.id": {EN: "ID", RU: "ID"},
    "drivers.col.first": {EN: "First name", RU: "Имя"},
    "drivers.col.last": {EN: "Last name", RU: "Фамилия"},
    # Vehicles
    "cars.title": {EN: "--- Vehicle management ---", RU: "--- Управление автомобилями ---"},
    "cars.add": {EN: "1) Add vehicle", RU: "1) Добавить автомобиль"},
    "cars.delete": {EN: "2) Delete vehicle", RU: "2) Удалить автомобиль"},
    "cars.list": {EN: "3) View all vehicles", RU: "3) Просмотреть все автомобили"},
    "cars.choose_type": {EN: "Choose vehicle type:", RU: "Выберите тип автомобиля:"},
    "cars.type.passenger": {EN: "1) Passenger car", RU: "1) Легковой автомобиль"},
    "cars.type.minibus": {EN: "2) Minibus", RU: "2) Микроавтобус"},
    "cars.prompt.type": {EN: "Your choice: ", RU: "Ваш выбор: "},
    "cars.prompt.child_seat": {
        EN: "Child seat available (true/false): ",
        RU: "Можно ли с детьми (true/false): ",
    },
    "cars.prompt.seats": {EN: "Enter number of seats: ", RU: "Введите количество мест: "},
    "cars.prompt.id": {EN: "Enter vehicle number: ", RU: "Введите номер: "},
    "cars.prompt.brand": {EN: "Enter brand: ", RU: "Введите марку: "},
    "cars.prompt.model": {EN: "Enter model: ", RU: "Введите модель: "},
    "cars.prompt.year": {EN: "Enter manufacture year: ", RU: "Введите год выпуска: "},
    "cars.prompt.delete_id": {
        EN: "Enter number of the vehicle to delete: ",
        RU: "Введите номер автомобиля для удаления: ",
    },
    "cars.field.type": {EN: "Vehicle type", RU: "Тип автомобиля"},
    "cars.field.seats": {EN: "Number of seats", RU: "Количество мест"},
    "cars.field.id": {EN: "Vehicle number", RU: "Номер автомобиля"},
    "cars.field.brand": {EN: "Brand", RU: "Марка"},
    "cars.field.model": {EN: "Model", RU: "Модель"},
    "cars.field.year": {EN: "Manufacture year", RU: "Год выпуска"},
    "cars.duplicate": {
        EN: "A vehicle with this number already exists.",
        RU: "Автомобиль с таким номером уже существует.",
    },
    "cars.not_found": {
        EN: "No vehicle with this number was found.",
        RU: "Автомобиль с таким номером не найден.",
    },
    "cars.added": {EN: "Vehicle added successfully!", RU: "Автомобиль успешно добавлен!"},
    "cars.deleted": {EN: "Vehicle deleted successfully!", RU: "Автомобиль успешно удален!"},
    "cars.delete_empty": {EN: "No vehicles to delete.", RU: "Нет автомобилей для удаления."},
    "cars.add_failed": {
        EN: "Error while adding the vehicle: {error}",
        RU: "Ошибка при добавлении автомобиля: {error}",
    },
    "cars.empty": {EN: "No vehicles.", RU: "Автомобилей нет."},
    "cars.header": {EN: "All vehicles", RU: "Список всех автомобилей"},
    "cars.group.passenger": {EN: "Passenger cars", RU: "Легковые автомобили"},
    "cars.group.minibus": {EN: "Minibuses", RU: "Микроавтобусы"},
    "cars.total": {EN: "Total vehicles: {count}", RU: "Всего автомобилей: {count}"},
    "cars.breakdown": {
        EN: "Passenger cars: {passenger}, minibuses: {minibus}",
        RU: "Легковых: {passenger}, Микроавтобусов: {minibus}",
    },
    "cars.col.id": {EN: "Number", RU: "Номер"},
    "cars.col.brand": {EN: "Brand", RU: "Марка"},
    "cars.col.model": {EN: "Model", RU: "Модель"},
    "cars.col.year": {EN: "Year", RU: "Год"},
    "cars.col.child_seat": {EN: "Child seat", RU: "Детское кресло"},
    "cars.col.seats": {EN: "Seats", RU: "Мест"},
}


def get_message(key: str, language: Language = Language.ENGLISH, **fields: object) -> str:
    """Return the text for `key` in `language`, formatted with `fields`.

    Falls back to English when a translation is missing. Unknown keys raise
    `KeyError`.
    """

    variants = MESSAGES[key]
    template = variants.get(language) or variants[Language.ENGLISH]
    return template.format(**fields) if fields else template


class Messages:
    """Catalog bound to one language: `t = Messages(lang); t("orders.added")`."""

    def __init__(self, language: Language = Language.ENGLISH) -> None:
        self.language = language

    def __call__(self, key: str, **fields: object) -> str:
        return get_message(key, self.language, **fields)
