"""Validation utilities for HyperRoute graph input."""
import math
from typing import Tuple, Any

from ..exceptions import ValidationError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_coordinates(x: float, y: float, bounds: Tuple[float, float, float, float] = None) -> None:
    """Validate coordinate values.
    
    Args:
        x: X coordinate
        y: Y coordinate  
        bounds: Optional bounds as (min_x, min_y, max_x, max_y)
        
    Raises:
        ValidationError: If coordinates are invalid
    """
    if not _is_number(x) or not math.isfinite(x):
        raise ValidationError(f"X coordinate must be a finite number, got {x!r}", field="x", value=x)
    
    if not _is_number(y) or not math.isfinite(y):
        raise ValidationError(f"Y coordinate must be a finite number, got {y!r}", field="y", value=y)
    
    if bounds:
        min_x, min_y, max_x, max_y = bounds
        
        if x < min_x or x > max_x:
            raise ValidationError(
                f"X coordinate {x} out of bounds [{min_x}, {max_x}]",
                field="x", value=x
            )
        
        if y < min_y or y > max_y:
            raise ValidationError(
                f"Y coordinate {y} out of bounds [{min_y}, {max_y}]",
                field="y", value=y
            )


def validate_identifier(value: str, field_name: str = "id") -> None:
    """Validate a port, region or connection identifier.
    
    Raises:
        ValidationError: If the identifier is not a non-empty string
    """
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be string, got {type(value).__name__}",
            field=field_name, value=value
        )
    
    if not value.strip():
        raise ValidationError(f"{field_name} cannot be empty", field=field_name, value=value)


def validate_bounds(min_x: float, max_x: float, min_y: float, max_y: float) -> None:
    """Validate an axis-aligned box.
    
    Raises:
        ValidationError: If a bound is not numeric or min exceeds max
    """
    validate_coordinates(min_x, min_y)
    validate_coordinates(max_x, max_y)
    
    if min_x > max_x:
        raise ValidationError(f"min_x {min_x} exceeds max_x {max_x}", field="min_x", value=min_x)
    
    if min_y > max_y:
        raise ValidationError(f"min_y {min_y} exceeds max_y {max_y}", field="min_y", value=min_y)
