"""CSS Unity: inline stylesheet images as data URIs and MHTML."""
from __future__ import annotations

__version__ = "0.1.0"

from css_unity.config import CSSUnityConfig
from css_unity.engine import transform
from css_unity.errors import (
    CSSUnityError,
    InvalidInputTypeError,
    MissingInputError,
    ResourceNotFoundError,
)
from css_unity.model import OutputType, SeparateOutput
from css_unity.resolver import ResourceResolver
from css_unity.unity import CSSUnity

__all__ = [
    "__version__",
    "CSSUnity",
    "CSSUnityConfig",
    "OutputType",
    "SeparateOutput",
    "ResourceResolver",
    "transform",
    # errors
    "CSSUnityError",
    "MissingInputError",
    "InvalidInputTypeError",
    "ResourceNotFoundError",
]
