"""
Errors — Таксономия ошибок геометрических типов

Все ошибки поднимаются синхронно в точке конструирования или конверсии.
Частично сконструированных значений не бывает: объект либо создан
с валидными инвариантами, либо не существует.

Виды ошибок:
- InvalidArgumentError: NaN/Inf там, где требуется конечное значение
- OutOfRangeError: конечное значение вне допустимых границ
- InvalidConversionError: неудачная конверсия внешнего числа в Portion
- GeometryFormatError: неразбираемая текстовая форма
"""


class GeometryError(Exception):
    """Базовый класс всех ошибок библиотеки."""

    pass


class InvalidArgumentError(GeometryError, ValueError):
    """
    Аргумент не является конечным числом (NaN или ±Inf).

    Attributes:
        param_name: Имя параметра, получившего невалидное значение
        value: Переданное значение
    """

    def __init__(
        self,
        param_name: str,
        value: object,
        message: str = "value cannot be NaN or infinity",
    ) -> None:
        self.param_name = param_name
        self.value = value
        super().__init__(f"{param_name}: {message}, got {value!r}")


class OutOfRangeError(GeometryError, ValueError):
    """
    Конечное значение вне допустимого диапазона.

    Attributes:
        param_name: Имя параметра, получившего невалидное значение
        value: Переданное значение
    """

    def __init__(self, param_name: str, value: object, message: str) -> None:
        self.param_name = param_name
        self.value = value
        super().__init__(f"{param_name}: {message}, got {value!r}")


class InvalidConversionError(GeometryError, TypeError):
    """
    Внешнее значение не может быть приведено к целевому типу.

    Отличается от ошибок конструктора: вызывающий код, использующий
    конверсионные точки входа, ловит один вид ошибки.

    Attributes:
        value: Исходное значение
        target: Имя целевого типа
    """

    def __init__(self, value: object, target: str) -> None:
        self.value = value
        self.target = target
        super().__init__(f"Cannot convert {value!r} to {target}")


class GeometryFormatError(GeometryError, ValueError):
    """
    Текст не соответствует ожидаемому формату.

    Attributes:
        text: Разбираемый текст
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        super().__init__(f"Invalid format ({reason}): {text!r}")
