"""Core extraction, classification and command generation."""

from .geometry import (
    ZeroVectorError,
    dot_product,
    magnitude,
    angle_between_vectors,
    distance_between_points,
    distance_matches,
)
from .step_table import (
    StepDocumentError,
    StepTable,
    CircleEntity,
    ToroidalSurfaceEntity,
    Axis2Placement3DEntity,
    build_table,
    parse_step,
)
from .geometry_extraction import (
    chase,
    resolve_placement,
    extract_circle_profiles,
    extract_toroidal_profiles,
)
from .path_ordering import (
    calculate_pipe_radius,
    filter_circles,
    filter_toroids,
    pair_circles,
    build_bend_operations,
)
from .bend_classification import (
    state_from_matches,
    classify_segment,
)
from .calculations import (
    initial_reference_vector,
    step_commands,
    fold_commands,
    generate_commands,
)
from .bend_program import (
    build_bend_program,
    normalize_rotation,
    normalize_rotations,
    total_length,
    round_by_decimals,
    program_to_array,
)
from .formatting import (
    format_value,
    format_command,
    format_step,
)
from .demo import DEMO_PIPE_STEP
from .bend_pipe import BendPipe
from .tolerances import (
    MATCH_TOLERANCE,
    ZERO_MAGNITUDE,
)

__all__ = [
    # Geometry
    'ZeroVectorError',
    'dot_product',
    'magnitude',
    'angle_between_vectors',
    'distance_between_points',
    'distance_matches',
    # Entity table
    'StepDocumentError',
    'StepTable',
    'CircleEntity',
    'ToroidalSurfaceEntity',
    'Axis2Placement3DEntity',
    'build_table',
    'parse_step',
    # Geometry extraction
    'chase',
    'resolve_placement',
    'extract_circle_profiles',
    'extract_toroidal_profiles',
    # Path ordering
    'calculate_pipe_radius',
    'filter_circles',
    'filter_toroids',
    'pair_circles',
    'build_bend_operations',
    # Classification
    'state_from_matches',
    'classify_segment',
    # CNC commands
    'initial_reference_vector',
    'step_commands',
    'fold_commands',
    'generate_commands',
    # Bend program
    'build_bend_program',
    'normalize_rotation',
    'normalize_rotations',
    'total_length',
    'round_by_decimals',
    'program_to_array',
    # Formatting
    'format_value',
    'format_command',
    'format_step',
    # Pipe
    'DEMO_PIPE_STEP',
    'BendPipe',
    # Tolerances
    'MATCH_TOLERANCE',
    'ZERO_MAGNITUDE',
]
