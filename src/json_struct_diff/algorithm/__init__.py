"""Algorithm subpackage: configuration and the structural differ."""

from json_struct_diff.algorithm.config import DiffConfig
from json_struct_diff.algorithm.differ import NestingDepthError, StructuralDiffer

__all__ = ["DiffConfig", "NestingDepthError", "StructuralDiffer"]
