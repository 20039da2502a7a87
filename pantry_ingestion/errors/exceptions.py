"""Custom exception hierarchy for import errors."""


class PantryIngestionError(Exception):
    """Base exception for all import pipeline errors."""
    
    def __init__(self, message: str, *args, **kwargs):
        """Initialize error with message."""
        self.message = message
        super().__init__(message, *args, **kwargs)


class ParserError(PantryIngestionError):
    """Raised when an import file cannot be read or parsed."""
    pass


class ValidationError(PantryIngestionError):
    """Raised when configuration or row validation fails."""
    pass


class DatabaseError(PantryIngestionError):
    """Raised when database operations fail."""
    pass


class CategoryRegistryError(PantryIngestionError):
    """Raised when a required category is not registered in the store."""
    
    def __init__(self, category_name: str):
        self.category_name = category_name
        super().__init__(f"Category '{category_name}' is not registered")
