"""
Тесты для моделей Point / IntPoint / FPoint

Проверяет:
1. Создание и валидацию конечности координат
2. replace, распаковку, равенство и хеш
3. Сложение
4. Конверсии float ↔ int с правилами округления
5. Текстовую форму и сериализацию Pydantic
"""

import pytest
from pydantic import ValidationError

from geometry_primitives import (
    FPoint,
    IntPoint,
    InvalidArgumentError,
    MidpointRounding,
    Point,
)

NON_FINITE = (float("nan"), float("inf"), float("-inf"))


# =============================================================================
# POINT
# =============================================================================


class TestPointCreation:
    """Тесты создания Point"""

    def test_create(self) -> None:
        """Координаты сохраняются"""
        point = Point(0.3, 0.2)
        assert point.x == 0.3
        assert point.y == 0.2

    def test_keywords(self) -> None:
        """Координаты по имени"""
        assert Point(x=1.5, y=-2.0) == Point(1.5, -2.0)

    def test_non_finite_raises(self) -> None:
        """NaN/±Inf в любой координате → InvalidArgumentError"""
        for value in NON_FINITE:
            with pytest.raises(InvalidArgumentError, match="x"):
                Point(value, 0.0)
            with pytest.raises(InvalidArgumentError, match="y"):
                Point(0.0, value)

    def test_empty(self) -> None:
        """Point.EMPTY — начало координат"""
        assert Point.EMPTY == Point(0.0, 0.0)

    def test_fpoint_is_point(self) -> None:
        """FPoint — тот же тип"""
        assert FPoint is Point
        assert FPoint(1.0, 2.0) == Point(1.0, 2.0)

    def test_immutable(self) -> None:
        """Point immutable (frozen=True)"""
        point = Point(1.0, 2.0)
        with pytest.raises(ValidationError):
            point.x = 5.0  # type: ignore[misc]


class TestPointOperations:
    """Тесты операций Point"""

    def test_replace(self) -> None:
        """replace меняет только указанные координаты"""
        point = Point(0.3, 0.2)
        assert point.replace(y=2.0) == Point(0.3, 2.0)
        assert point.replace(x=-1.0) == Point(-1.0, 0.2)
        assert point.replace() == point
        assert point == Point(0.3, 0.2)

    def test_replace_validates(self) -> None:
        """replace проверяет новые значения"""
        with pytest.raises(InvalidArgumentError):
            Point(1.0, 1.0).replace(x=float("nan"))

    def test_unpacking(self) -> None:
        """Распаковка в (x, y)"""
        x, y = Point(3.0, 4.0)
        assert (x, y) == (3.0, 4.0)

    def test_equality_and_hash(self) -> None:
        """Равенство и хеш по обеим координатам"""
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert Point(1.0, 2.0) != Point(2.0, 1.0)
        assert hash(Point(1.0, 2.0)) == hash(Point(1.0, 2.0))
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(0.0, 0.0)}) == 2

    def test_add(self) -> None:
        """Покомпонентное сложение"""
        assert Point(1, 2.5) + Point(11, 12) == Point(12, 14.5)
        assert Point(-1, 2) + Point(11, -12.8) == Point(10, -10.8)

    def test_add_overflow_raises(self) -> None:
        """Переполнение при сложении → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError):
            Point(1e308, 0.0) + Point(1e308, 0.0)

    def test_add_mismatched_type(self) -> None:
        """Сложение с IntPoint не поддерживается"""
        with pytest.raises(TypeError):
            Point(1.0, 1.0) + IntPoint(1, 1)  # type: ignore[operator]


class TestPointConversions:
    """Тесты конверсий Point ↔ IntPoint"""

    def test_to_int_point_rounding(self) -> None:
        """Округление каждой координаты независимо"""
        assert Point(5.8, -1.1).to_int_point() == IntPoint(6, -1)
        assert Point(5.5, 4.5).to_int_point() == IntPoint(6, 5)
        assert Point(5.5, 4.5).to_int_point(MidpointRounding.TO_EVEN) == IntPoint(6, 4)
        assert Point(-5.5, -4.5).to_int_point() == IntPoint(-6, -5)

    def test_from_int_point_exact(self) -> None:
        """Конверсия IntPoint → Point точная"""
        assert Point.from_int_point(IntPoint(3, -7)) == Point(3.0, -7.0)
        assert IntPoint(3, -7).to_point() == Point(3.0, -7.0)

    def test_int_round_trip(self) -> None:
        """IntPoint → Point → IntPoint без потерь"""
        for point in (IntPoint(0, 0), IntPoint(-5, 12), IntPoint(2**40, -(2**40))):
            assert point.to_point().to_int_point() == point


class TestPointFormatting:
    """Тесты текстовой формы и сериализации"""

    def test_str(self) -> None:
        """str() — "x,y" """
        assert str(Point(0.3, 2.0)) == "0.3,2"

    def test_format(self) -> None:
        """Числовой формат применяется к обеим координатам"""
        assert Point(1.0, 2.5).to_string("F2") == "1.00,2.50"
        assert f"{Point(1.0, 2.5):F1}" == "1.0,2.5"

    def test_model_dump_round_trip(self) -> None:
        """model_dump / model_validate"""
        point = Point(1.5, -2.25)
        data = point.model_dump()
        assert data == {"x": 1.5, "y": -2.25}
        assert Point.model_validate(data) == point

    def test_model_validate_rejects_non_finite(self) -> None:
        """model_validate отклоняет NaN"""
        with pytest.raises(ValidationError):
            Point.model_validate({"x": float("nan"), "y": 0.0})

    def test_json_round_trip(self) -> None:
        """model_dump_json / model_validate_json"""
        point = Point(0.1, 1e-5)
        assert Point.model_validate_json(point.model_dump_json()) == point


# =============================================================================
# INT POINT
# =============================================================================


class TestIntPoint:
    """Тесты для IntPoint"""

    def test_create(self) -> None:
        """Целые координаты без ограничения диапазона"""
        point = IntPoint(2**40, -3)
        assert point.x == 2**40
        assert point.y == -3

    def test_empty(self) -> None:
        """IntPoint.EMPTY"""
        assert IntPoint.EMPTY == IntPoint(0, 0)

    def test_replace_and_unpacking(self) -> None:
        """replace и распаковка"""
        x, y = IntPoint(1, 2).replace(y=5)
        assert (x, y) == (1, 5)

    def test_add(self) -> None:
        """Покомпонентное сложение"""
        assert IntPoint(1, 2) + IntPoint(10, -20) == IntPoint(11, -18)

    def test_non_integer_rejected(self) -> None:
        """Дробная координата отклоняется"""
        with pytest.raises(ValidationError):
            IntPoint(1.5, 2)  # type: ignore[arg-type]

    def test_str(self) -> None:
        """str() — "x,y" """
        assert str(IntPoint(3, -4)) == "3,-4"
        assert IntPoint(3, 4).to_string("D3") == "003,004"
