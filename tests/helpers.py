"""
Shared test helpers for bendpipe tests.

Builders for synthetic profiles and STEP documents with known geometry.
"""
from __future__ import annotations

from models import BendOperation, BendState, CircleProfile, ToroidalProfile
from models.types import Point3D, Vector3D


def make_circle(
    id: int,
    center: Point3D,
    radius: float = 8.0,
    direction: Vector3D = (1.0, 0.0, 0.0),
    direction_ref: Vector3D = (0.0, 1.0, 0.0),
) -> CircleProfile:
    """Circle profile with sensible defaults for the fields a test does not care about."""
    return CircleProfile(
        id=id,
        radius=radius,
        direction=direction,
        direction_ref=direction_ref,
        center_point=center,
    )


def make_toroid(
    id: int,
    center: Point3D,
    major_radius: float = 50.0,
    minor_radius: float = 8.0,
    direction: Vector3D = (0.0, 0.0, 1.0),
) -> ToroidalProfile:
    """Toroid profile whose pivot circle lies in the XY plane by default."""
    return ToroidalProfile(
        id=id,
        minor_radius=minor_radius,
        major_radius=major_radius,
        direction=direction,
        direction_ref=(1.0, 0.0, 0.0),
        center_point=center,
    )


def make_operation(id: int, start: CircleProfile, end: CircleProfile,
                   state: BendState | None = None) -> BendOperation:
    return BendOperation(
        id=id,
        start_position=start,
        end_position=end,
        bend_state=state or BendState.straight(),
    )


def step_document(data_lines: list[str]) -> str:
    """Wrap DATA section lines in a minimal ISO-10303-21 document."""
    return "\n".join([
        "ISO-10303-21;",
        "HEADER;",
        "FILE_DESCRIPTION((''),'2;1');",
        "FILE_NAME('test','2024-01-01T00:00:00',(''),(''),'','','');",
        "FILE_SCHEMA(('AUTOMOTIVE_DESIGN'));",
        "ENDSEC;",
        "DATA;",
        *data_lines,
        "ENDSEC;",
        "END-ISO-10303-21;",
        "",
    ])


# A straight tube: two radius-5 rings 100 apart along X, plus one smaller
# inner-wall ring that must be filtered out.
STRAIGHT_TUBE_LINES: list[str] = [
    "#1=CIRCLE('',#10,5.);",
    "#2=CIRCLE('',#11,5.);",
    "#3=CIRCLE('',#12,4.);",
    "#10=AXIS2_PLACEMENT_3D('',#20,#30,#31);",
    "#11=AXIS2_PLACEMENT_3D('',#21,#30,#31);",
    "#12=AXIS2_PLACEMENT_3D('',#20,#30,#31);",
    "#20=CARTESIAN_POINT('',(0.,0.,0.));",
    "#21=CARTESIAN_POINT('',(100.,0.,0.));",
    "#30=DIRECTION('',(1.,0.,0.));",
    "#31=DIRECTION('',(0.,0.,1.));",
]

# One 90 degree bend of centerline radius 50 around (0, 50, 0):
# straight from (-100, 0, 0) to the origin, bend, straight up to (50, 150, 0).
L_TUBE_LINES: list[str] = [
    "#1=CIRCLE('',#10,5.);",
    "#2=CIRCLE('',#11,5.);",
    "#3=CIRCLE('',#12,5.);",
    "#4=CIRCLE('',#13,5.);",
    "#5=TOROIDAL_SURFACE('',#14,50.,5.);",
    "#10=AXIS2_PLACEMENT_3D('',#20,#30,#32);",
    "#11=AXIS2_PLACEMENT_3D('',#21,#30,#32);",
    "#12=AXIS2_PLACEMENT_3D('',#22,#31,#32);",
    "#13=AXIS2_PLACEMENT_3D('',#23,#31,#32);",
    "#14=AXIS2_PLACEMENT_3D('',#24,#32,#30);",
    "#20=CARTESIAN_POINT('',(-100.,0.,0.));",
    "#21=CARTESIAN_POINT('',(0.,0.,0.));",
    "#22=CARTESIAN_POINT('',(50.,50.,0.));",
    "#23=CARTESIAN_POINT('',(50.,150.,0.));",
    "#24=CARTESIAN_POINT('',(0.,50.,0.));",
    "#30=DIRECTION('',(1.,0.,0.));",
    "#31=DIRECTION('',(0.,1.,0.));",
    "#32=DIRECTION('',(0.,0.,1.));",
]
