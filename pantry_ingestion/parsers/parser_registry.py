"""Parser registry for dynamic parser registration and retrieval."""
from pathlib import Path
from typing import Dict, Type, Optional
from pantry_ingestion.parsers.base_parser import ParserInterface
from pantry_ingestion.errors.exceptions import ParserError


# Global registry mapping parser type strings to parser classes
_parser_registry: Dict[str, Type[ParserInterface]] = {}

# File suffix to parser type
_SUFFIX_TYPES = {
    ".csv": "csv",
    ".txt": "csv",
    ".xlsx": "excel",
    ".xlsm": "excel",
}


def register_parser(parser_type: str, parser_class: Type[ParserInterface]) -> None:
    """Register a parser class for a given parser type.
    
    Raises:
        ValueError: If parser_type is already registered
        TypeError: If parser_class does not inherit from ParserInterface
    """
    if not issubclass(parser_class, ParserInterface):
        raise TypeError(
            f"Parser class {parser_class.__name__} must inherit from ParserInterface"
        )
    
    if parser_type in _parser_registry:
        raise ValueError(
            f"Parser type '{parser_type}' is already registered. "
            f"Existing: {_parser_registry[parser_type].__name__}"
        )
    
    _parser_registry[parser_type] = parser_class


def get_parser(parser_type: str) -> Optional[Type[ParserInterface]]:
    """Get parser class for a given parser type, or None."""
    return _parser_registry.get(parser_type)


def create_parser_instance(parser_type: str, **kwargs) -> ParserInterface:
    """Create an instance of a parser for a given parser type.
    
    Raises:
        ParserError: If parser type is not registered
    """
    parser_class = get_parser(parser_type)
    if parser_class is None:
        available = ", ".join(_parser_registry.keys()) if _parser_registry else "none"
        raise ParserError(
            f"Parser type '{parser_type}' is not registered. "
            f"Available parsers: {available}"
        )
    
    try:
        return parser_class(**kwargs)
    except Exception as e:
        raise ParserError(
            f"Failed to create parser instance for '{parser_type}': {e}"
        ) from e


def parser_type_for_path(file_path: str) -> str:
    """Pick the parser type from a file's suffix.
    
    Raises:
        ParserError: If the suffix is not a supported import format
    """
    suffix = Path(file_path).suffix.lower()
    parser_type = _SUFFIX_TYPES.get(suffix)
    if parser_type is None:
        raise ParserError(
            f"Unsupported import file type '{suffix or file_path}'. "
            f"Supported: {', '.join(sorted(_SUFFIX_TYPES))}"
        )
    return parser_type


def list_registered_parsers() -> list[str]:
    """List all registered parser types."""
    return list(_parser_registry.keys())
