"""
Command — generate_mobius_transformation

Единственная команда, связывающая пользовательский ввод с Möbius engine:
1. По трём парам вход/выход вычисляется ОБРАТНОЕ преобразование
   (compute_mobius_transform(outputs, inputs))
2. Каждая матрица C запрошенного семейства переводится в C · T⁻¹
3. Результат превращается в Line/Circle через matrix_to_curve

Кривые задаются ограничением на ВХОД отображения, поэтому они
контравариантны: для переноса кривой применяется обратное преобразование.

Неизвестные имена семейств пропускаются (не ошибка).
Отсутствие преобразования → TransformDoesNotExist.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Sequence

from mobius.core.contracts.models import GenerateMobiusResponse
from mobius.core.domain.curve import Curve
from mobius.core.domain.ext_complex import ExtComplex
from mobius.core.exceptions import TransformDoesNotExist
from mobius.core.math.curves import matrix_to_curve
from mobius.core.math.matrix import Matrix2
from mobius.core.math.mobius_tform import apply_mobius_transform, compute_mobius_transform
from mobius.core.math.numerical_safeguards import EPS_TRANSFORM_DET, LINE_RATIO_REL_TOL
from mobius.data.curve_families import CURVE_FAMILIES, get_curve_family

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


def _default_families() -> Mapping[str, tuple[Matrix2, ...]]:
    return CURVE_FAMILIES


@dataclass(frozen=True)
class TransformerConfig:
    """Конфигурация MobiusTransformer.

    Значения по умолчанию совпадают с константами numerical_safeguards.
    """

    # Порог |det T| для отказа в преобразовании
    det_eps: float = EPS_TRANSFORM_DET

    # Относительный допуск line/circle в matrix_to_curve
    line_rel_tol: float = LINE_RATIO_REL_TOL

    # Таблица семейств кривых (имя → матрицы)
    families: Mapping[str, tuple[Matrix2, ...]] = field(default_factory=_default_families)


# =============================================================================
# TRANSFORMER
# =============================================================================


class MobiusTransformer:
    """Вычисление Möbius преобразований и их действия на семейства кривых.

    Не хранит изменяемого состояния: один экземпляр безопасно
    использовать из нескольких потоков.
    """

    def __init__(self, config: Optional[TransformerConfig] = None):
        """
        Args:
            config: Конфигурация (default: TransformerConfig())
        """
        self.config = config or TransformerConfig()

    def transform(
        self,
        inputs: Sequence[ExtComplex],
        outputs: Sequence[ExtComplex],
    ) -> Matrix2:
        """Матрица T с T(inputs[i]) = outputs[i].

        Raises:
            TransformDoesNotExist: Если преобразование не существует
        """
        tform = compute_mobius_transform(inputs, outputs, eps=self.config.det_eps)
        if tform is None:
            raise TransformDoesNotExist()
        return tform

    def evaluate(
        self,
        inputs: Sequence[ExtComplex],
        outputs: Sequence[ExtComplex],
        point: ExtComplex,
    ) -> ExtComplex:
        """Образ point под преобразованием inputs → outputs.

        Raises:
            TransformDoesNotExist: Если преобразование не существует
        """
        return apply_mobius_transform(self.transform(inputs, outputs), point)

    def transform_family(self, inv_tform: Matrix2, family: Iterable[Matrix2]) -> list[Curve]:
        """Перенос каждой кривой семейства обратным преобразованием inv_tform."""
        return [
            matrix_to_curve(curve_matrix @ inv_tform, line_rel_tol=self.config.line_rel_tol)
            for curve_matrix in family
        ]

    def generate(
        self,
        inputs: Sequence[ExtComplex],
        outputs: Sequence[ExtComplex],
        curves: Iterable[str] = (),
    ) -> GenerateMobiusResponse:
        """Преобразованные семейства кривых.

        Args:
            inputs: Три исходные точки
            outputs: Три образа
            curves: Имена запрошенных семейств

        Returns:
            GenerateMobiusResponse только с существующими семействами

        Raises:
            TransformDoesNotExist: Если преобразование не существует
            InvalidValueError: Если перенесённая кривая содержит NaN/Inf (переполнение)
        """
        # обратное преобразование: кривые контравариантны
        inv_tform = self.transform(outputs, inputs)

        result: dict[str, list[Curve]] = {}
        for name in curves:
            if name in result:
                continue
            family = get_curve_family(name, self.config.families)
            if family is None:
                logger.debug("Unknown curve family %r skipped", name)
                continue
            result[name] = self.transform_family(inv_tform, family)

        logger.info(
            "Transformed %d curve families (%d curves)",
            len(result),
            sum(len(family) for family in result.values()),
        )
        return GenerateMobiusResponse.from_curves(result)


def generate_mobius_transformation(
    inputs: Sequence[ExtComplex],
    outputs: Sequence[ExtComplex],
    curves: Iterable[str] = (),
    *,
    config: Optional[TransformerConfig] = None,
) -> GenerateMobiusResponse:
    """Визуализация Möbius преобразования по трём парам вход/выход.

    Raises:
        TransformDoesNotExist: Если преобразование не существует
    """
    return MobiusTransformer(config).generate(inputs, outputs, curves)
