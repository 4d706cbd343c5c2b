"""
Formatting — текстовое представление матриц и скаляров.
"""

from matrix_calc.formatting.render import (
    DEFAULT_RENDER_CONFIG,
    RenderConfig,
    format_value,
    render,
)

__all__ = [
    "DEFAULT_RENDER_CONFIG",
    "RenderConfig",
    "format_value",
    "render",
]
