from elemental.stylesheet.parser import extract_declarations
from elemental.stylesheet.model import Declaration
from elemental.stylesheet.translate import camelize, translate_style

__all__ = ["extract_declarations", "Declaration", "camelize", "translate_style"]
