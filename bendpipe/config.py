# Package Global Variables
# This module serves as a way to share settings across the different
# modules of the package.

import os

# Flag that indicates to run in Debug mode or not. When running in Debug mode
# every diagnostic message is also echoed to the console. Generally, it's
# useful to set this to True while developing and False for production use.
DEBUG = False

# Gets the name of the package from the name of the folder the py file is in.
# Used as the logger name so host applications can route diagnostics.
PACKAGE_NAME = os.path.basename(os.path.dirname(__file__))

# Reference vector used for the first rotation when the model has no
# Bend-classified segment.
DEFAULT_REFERENCE_VECTOR = (0.0, 1.0, 0.0)

# Bend program integer encoding: values are rounded to PROGRAM_DECIMALS
# and scaled by PROGRAM_SCALE before truncation.
PROGRAM_DECIMALS = 3
PROGRAM_SCALE = 1000

# Decimal places used in progress lines.
DISPLAY_DECIMALS = 3
