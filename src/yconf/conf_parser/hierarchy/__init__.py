from .config_registry import ConfigRegistry
from .hierarchy_builder import HierarchyBuilder, ParseFrame

__all__ = ['ConfigRegistry', 'HierarchyBuilder', 'ParseFrame']
