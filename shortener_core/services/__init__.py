from .normalizer import normalize, contains_secret_url
from .reserved_codes import ReservedCodeRegistry, is_reserved
from .tracking_sanitizer import TrackingParamClassifier, sanitize
from .short_code_generator import ShortCodeGenerator

__all__ = [
    "normalize",
    "contains_secret_url",
    "ReservedCodeRegistry",
    "is_reserved",
    "TrackingParamClassifier",
    "sanitize",
    "ShortCodeGenerator",
]
