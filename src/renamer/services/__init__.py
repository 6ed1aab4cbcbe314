from .naming_service import NamingService
from .pattern_service import PatternService
from .rename_service import RenameService
from .scanner_service import ScannerService

__all__ = ["NamingService", "PatternService", "RenameService", "ScannerService"]
