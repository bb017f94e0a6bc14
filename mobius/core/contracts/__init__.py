"""
Contract Module

Wire-кодек ExtComplex/complex, pydantic модели запроса/ответа и
JSON Schema валидаторы контрактов generate_mobius_transformation.
"""

from .codec import (
    INF_MARKER,
    WireComplex,
    WireExtComplex,
    decode_complex,
    decode_ext_complex,
    encode_complex,
    encode_ext_complex,
)
from .models import (
    ApiError,
    CircleModel,
    CurveModel,
    GenerateMobiusRequest,
    GenerateMobiusResponse,
    LineModel,
    curve_to_model,
    model_to_curve,
)
from .validators import (
    ApiErrorValidator,
    ContractValidator,
    CurveValidator,
    ExtComplexValidator,
    GenerateMobiusRequestValidator,
    GenerateMobiusResponseValidator,
    SchemaLoader,
    validate_api_error,
    validate_curve,
    validate_ext_complex,
    validate_generate_mobius_request,
    validate_generate_mobius_response,
)

__all__ = [
    # Codec
    "INF_MARKER",
    "WireComplex",
    "WireExtComplex",
    "decode_complex",
    "decode_ext_complex",
    "encode_complex",
    "encode_ext_complex",
    # Models
    "ApiError",
    "CircleModel",
    "CurveModel",
    "GenerateMobiusRequest",
    "GenerateMobiusResponse",
    "LineModel",
    "curve_to_model",
    "model_to_curve",
    # Validator classes
    "SchemaLoader",
    "ContractValidator",
    "ExtComplexValidator",
    "CurveValidator",
    "GenerateMobiusRequestValidator",
    "GenerateMobiusResponseValidator",
    "ApiErrorValidator",
    # Validator functions
    "validate_ext_complex",
    "validate_curve",
    "validate_generate_mobius_request",
    "validate_generate_mobius_response",
    "validate_api_error",
]
