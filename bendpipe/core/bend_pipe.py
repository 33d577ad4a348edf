"""BendPipe: a bent tube read from a STEP model, ready for CNC output."""

from __future__ import annotations

import logging

from ..lib.log_utils import log
from ..models.bend_data import BendOperation, BendStep
from ..models.profiles import CircleProfile, ToroidalProfile
from .bend_classification import classify_segment
from .bend_program import build_bend_program
from .calculations import generate_commands
from .demo import DEMO_PIPE_STEP
from .formatting import format_command
from .geometry_extraction import extract_circle_profiles, extract_toroidal_profiles
from .path_ordering import (
    build_bend_operations,
    calculate_pipe_radius,
    filter_circles,
    filter_toroids,
)
from .step_table import StepTable, parse_step
from .tolerances import MATCH_TOLERANCE


class BendPipe:
    """
    A tube model broken down into ordered, classified bend operations.

    Extraction, filtering, pairing and classification all happen in the
    constructor. ``generate_cnc()`` is a separate pass that appends to
    ``opcodes``/``values``; it does not clear them first, so calling it
    twice doubles the output.

    Attributes:
        tolerance: Pivot circle matching tolerance
        n_radius: Dominant tube radius (-inf for a model without circles)
        prof_circles: Circles of the dominant radius, sorted by id
        prof_bends: Toroids whose minor radius is the dominant radius, sorted by id
        bend_ops: Ordered bend operations
        opcodes: Emitted opcodes (see Opcode)
        values: Emitted values, parallel to ``opcodes``
    """

    def __init__(self, step_text: str | None = None, *, table: StepTable | None = None) -> None:
        """
        Build the pipe from a STEP document or a ready entity table.

        Args:
            step_text: ISO-10303-21 text; the embedded demo model when None
            table: Already populated entity table; takes precedence over
                   ``step_text``

        Raises:
            StepDocumentError: If the document cannot be parsed
        """
        if table is None:
            table = parse_step(DEMO_PIPE_STEP if step_text is None else step_text)

        self.tolerance: float = MATCH_TOLERANCE
        self._prof_circles_raw: list[CircleProfile] = extract_circle_profiles(table)
        self._prof_bends_raw: list[ToroidalProfile] = extract_toroidal_profiles(table)
        self.n_radius: float = calculate_pipe_radius(self._prof_circles_raw)
        self.prof_circles: list[CircleProfile] = filter_circles(self._prof_circles_raw, self.n_radius)
        self.prof_bends: list[ToroidalProfile] = filter_toroids(self._prof_bends_raw, self.n_radius)
        self.bend_ops: list[BendOperation] = build_bend_operations(
            self.prof_circles,
            lambda start, end: classify_segment(start, end, self.prof_bends, self.tolerance),
        )
        self.opcodes: list[int] = []
        self.values: list[float] = []

        log(
            f"BendPipe: radius {self.n_radius}, {len(self.prof_circles)} of "
            f"{len(self._prof_circles_raw)} circles, {len(self.prof_bends)} of "
            f"{len(self._prof_bends_raw)} toroids, {len(self.bend_ops)} operations",
            logging.DEBUG,
        )

    @property
    def prof_circles_raw(self) -> list[CircleProfile]:
        """All circle profiles, before radius filtering."""
        return list(self._prof_circles_raw)

    @property
    def prof_bends_raw(self) -> list[ToroidalProfile]:
        """All toroid profiles, before radius filtering."""
        return list(self._prof_bends_raw)

    def generate_cnc(self) -> None:
        """
        Append the CNC command stream for all operations to ``opcodes``/``values``.

        An angle that cannot be computed (unresolved direction) is
        emitted as NaN and shows up as "ERROR" in the progress line.
        """
        for command in generate_commands(self.bend_ops):
            self.opcodes.append(int(command.opcode))
            self.values.append(command.value)
            log(format_command(command.opcode, command.value))

    def bend_program(self) -> list[BendStep]:
        """Group the current command output into bend program rows."""
        return build_bend_program(self.opcodes, self.values, self.n_radius)
