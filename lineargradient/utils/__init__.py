from .validation import value_or_default, ensure_same_length, validate_stops

__all__ = ["value_or_default", "ensure_same_length", "validate_stops"]
