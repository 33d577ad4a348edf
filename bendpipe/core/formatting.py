"""Formatting utilities for command values and program rows."""

from __future__ import annotations

import math

from .. import config
from ..models.bend_data import BendStep, Opcode

# Progress line label and unit for each opcode
_COMMAND_LABELS: dict[Opcode, tuple[str, str]] = {
    Opcode.ROTATE: ('Rot ANGLE', 'deg'),
    Opcode.RADIUS: ('Radius', 'mm'),
    Opcode.ANGLE: ('Bend ANGLE', 'deg'),
    Opcode.MOVE: ('MOVE', 'mm'),
}


def format_value(value: float, decimal_places: int = config.DISPLAY_DECIMALS) -> str:
    """
    Format a value with a fixed number of decimal places.

    Args:
        value: Value to format
        decimal_places: Number of decimal places

    Returns:
        Formatted string like "78.000"
        Returns "ERROR" if value is NaN or infinity
    """
    # Guard against invalid float values
    if math.isnan(value) or math.isinf(value):
        return "ERROR"
    return f"{value:.{decimal_places}f}"


def format_command(opcode: int, value: float,
                   decimal_places: int = config.DISPLAY_DECIMALS) -> str:
    """
    Format one emitted command as a progress line.

    Returns:
        String like "Rot ANGLE 30.000 deg" or "MOVE 105.928 mm"
    """
    label, unit = _COMMAND_LABELS[Opcode(opcode)]
    return f"{label} {format_value(value, decimal_places)} {unit}"


def format_step(step: BendStep, decimal_places: int = config.DISPLAY_DECIMALS) -> str:
    """Format a bend program row as "L .. R .. A .. CLR ..."."""
    return (
        f"L {format_value(step.feed, decimal_places)} "
        f"R {format_value(step.rotation, decimal_places)} "
        f"A {format_value(step.angle, decimal_places)} "
        f"CLR {format_value(step.clr, decimal_places)}"
    )
