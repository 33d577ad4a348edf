"""bendpipe - CNC parameters for a pipe-bending machine from a STEP tube model.

Reads the circular cross-sections and toroidal bend surfaces of a tube
solid and turns them into rotate / bend-radius / bend-angle / feed
commands.
"""

from . import core
from . import models
from .core import BendPipe, StepDocumentError
from .models import Opcode

__all__ = ['core', 'models', 'BendPipe', 'StepDocumentError', 'Opcode']
