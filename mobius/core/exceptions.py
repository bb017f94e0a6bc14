"""
Exceptions — Ошибки Möbius engine

Единственная восстанавливаемая ошибка на границе core/command — DoesNotExist.
Остальные сигнализируют о нарушении инвариантов на стороне производителя
(NaN при сериализации) или о некорректном запросе.
"""

from typing import Any, Final

KIND_DOES_NOT_EXIST: Final[str] = "DoesNotExist"


class MobiusError(Exception):
    """Базовая ошибка пакета."""


class TransformDoesNotExist(MobiusError):
    """
    Не существует Möbius преобразования для заданных пар вход/выход.

    Возникает, когда три выходные (или входные) точки не попарно различны
    в пределах допуска, т.е. соответствие не взаимно однозначно.
    Кодируется на границе API как {"kind": "DoesNotExist"}.
    """

    kind: Final[str] = KIND_DOES_NOT_EXIST

    def __init__(self, message: str = "transformation does not exist"):
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind}


class InvalidValueError(MobiusError, ValueError):
    """Значение не может быть сериализовано (например, содержит NaN)."""


class InvalidRequestError(MobiusError, ValueError):
    """Запрос не соответствует контракту generate_mobius_request."""
