from .sanitization import SanitizationResult

__all__ = ["SanitizationResult"]
