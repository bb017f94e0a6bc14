"""
Dispatch — JSON-in / JSON-out обёртка над generate_mobius_transformation

Порядок обработки:
1. JSON парсинг стандартным json (1e1000 → float inf → INF)
2. Проверка JSON Schema контракта generate_mobius_request
3. Построение pydantic модели GenerateMobiusRequest
4. Выполнение команды
5. Ответ {"curves": {...}} или ошибка {"kind": "DoesNotExist"}
"""

import json
import logging
from typing import Any, Optional, Union

import pydantic
from jsonschema import ValidationError

from mobius.api.command import MobiusTransformer
from mobius.core.contracts.models import ApiError, GenerateMobiusRequest
from mobius.core.contracts.validators import validate_generate_mobius_request
from mobius.core.exceptions import InvalidRequestError, TransformDoesNotExist

logger = logging.getLogger(__name__)


def parse_request(payload: Union[str, bytes, dict[str, Any]]) -> GenerateMobiusRequest:
    """
    Разбор и валидация запроса.

    Args:
        payload: JSON документ (str/bytes) или уже разобранный dict

    Returns:
        GenerateMobiusRequest

    Raises:
        InvalidRequestError: Если запрос не является валидным JSON или
            не соответствует контракту
    """
    if isinstance(payload, (str, bytes)):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise InvalidRequestError(f"request is not valid JSON: {e}") from e
    else:
        data = payload

    try:
        validate_generate_mobius_request(data)
    except ValidationError as e:
        raise InvalidRequestError(f"request violates contract: {e.message}") from e

    try:
        return GenerateMobiusRequest.model_validate(data)
    except pydantic.ValidationError as e:
        raise InvalidRequestError(f"invalid request: {e}") from e


def handle_request(
    payload: Union[str, bytes, dict[str, Any]],
    transformer: Optional[MobiusTransformer] = None,
) -> dict[str, Any]:
    """
    Обработка запроса generate_mobius_transformation.

    Returns:
        {"curves": {name: [curve, ...]}} или {"kind": "DoesNotExist"}

    Raises:
        InvalidRequestError: Если запрос некорректен
        InvalidValueError: Если вычисленные кривые не представимы в JSON
    """
    request = parse_request(payload)
    transformer = transformer or MobiusTransformer()

    try:
        response = transformer.generate(request.inputs, request.outputs, request.curves)
    except TransformDoesNotExist:
        logger.info(
            "No Möbius transformation for inputs=%s outputs=%s", request.inputs, request.outputs
        )
        return ApiError().model_dump(mode="json")

    return response.model_dump(mode="json")
