"""Boundary classifier - Classify project files and imports into architectural element types."""

__all__ = (
    "AncestorElement",
    "BuiltinRegistry",
    "ConfigurationError",
    "ElementClassification",
    "ElementClassifier",
    "FileClassification",
    "FileSystemResolver",
    "ImportClassification",
    "MatchStrategy",
    "NodeCoreModules",
    "PythonStdlibModules",
    "ResolutionError",
    "Settings",
    "TypeDeclaration",
    "classify_import",
    "classify_path",
    "find_project_root",
    "load_settings",
    "normalize_types",
    "type_names",
)

from .classifier import ElementClassifier
from .imports import classify_import
from .registry import BuiltinRegistry, NodeCoreModules, PythonStdlibModules
from .resolution import FileSystemResolver, ResolutionError
from .resolver import classify_path
from .settings import ConfigurationError, Settings, load_settings, normalize_types, type_names
from .types import (
    AncestorElement,
    ElementClassification,
    FileClassification,
    ImportClassification,
    MatchStrategy,
    TypeDeclaration,
)
from .utils import find_project_root
