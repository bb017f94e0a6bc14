"""API — команда generate_mobius_transformation и JSON dispatcher.

Граница между Möbius engine и внешним слоем (frontend, CLI):
- generate_mobius_transformation / MobiusTransformer
- handle_request для JSON документов
"""

from .command import (
    MobiusTransformer,
    TransformerConfig,
    generate_mobius_transformation,
)
from .dispatch import handle_request, parse_request

__all__ = [
    "MobiusTransformer",
    "TransformerConfig",
    "generate_mobius_transformation",
    "handle_request",
    "parse_request",
]
