"""
Pytest configuration for bendpipe tests.

This conftest.py sets up the Python path and module aliases so that tests can
import project modules using simple names (e.g., `from core.x import y`)
while the package code uses relative imports.

How it works:
1. Adds the repository root to sys.path
2. Imports bendpipe as a package (triggering __init__.py)
3. Creates module aliases so `import core` resolves to `bendpipe.core`
"""
import sys
from pathlib import Path

# Add the repository root to sys.path so `import bendpipe` works
# without an editable install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import package submodules and create aliases
import bendpipe.core as core
import bendpipe.models as models

sys.modules['core'] = core
sys.modules['models'] = models

# Also alias the submodules for imports like `from core.calculations import x`
sys.modules['core.geometry'] = core.geometry
sys.modules['core.step_table'] = core.step_table
sys.modules['core.geometry_extraction'] = core.geometry_extraction
sys.modules['core.path_ordering'] = core.path_ordering
sys.modules['core.bend_classification'] = core.bend_classification
sys.modules['core.calculations'] = core.calculations
sys.modules['core.bend_program'] = core.bend_program
sys.modules['core.formatting'] = core.formatting
sys.modules['core.bend_pipe'] = core.bend_pipe
sys.modules['core.demo'] = core.demo
sys.modules['core.tolerances'] = core.tolerances

sys.modules['models.types'] = models.types
sys.modules['models.profiles'] = models.profiles
sys.modules['models.bend_data'] = models.bend_data

# Import and alias test helpers module
sys.path.insert(0, str(Path(__file__).parent))
import helpers  # noqa: E402,F401
