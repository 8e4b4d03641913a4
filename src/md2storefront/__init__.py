"""md2storefront - render loosely formatted catalog text as storefront HTML."""

__version__ = "0.1.0"

from md2storefront.converter import NO_DESCRIPTION, Converter, normalise_text  # noqa: E402
from md2storefront.profiles import RenderProfile  # noqa: E402

__all__ = [
    "NO_DESCRIPTION",
    "Converter",
    "RenderProfile",
    "normalise_text",
    "__version__",
]
