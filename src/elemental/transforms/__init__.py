from elemental.transforms.attributes import normalize_attributes
from elemental.transforms.tree import collapse_whitespace, convert_tree

__all__ = ["collapse_whitespace", "convert_tree", "normalize_attributes"]
