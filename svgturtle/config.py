"""
Default values shared by the geometry, svg and turtle modules.

Modules read these constants directly; callers override them through
constructor arguments.
"""

# ---------------------------------------------------------------
# OUTPUT DOCUMENT
# ---------------------------------------------------------------

FILE_NAME = "output_image.svg"
IMAGE_HEIGHT = 1080
IMAGE_WIDTH = 1920
BACKGROUND_COLOR = "white"

# Stroke/fill color used when a shape is given none
DEFAULT_COLOR = "black"


# ---------------------------------------------------------------
# GEOMETRY TOLERANCES
# ---------------------------------------------------------------

VECTOR_TOLERANCE = 0.001           # per-component, for Vec2d equality
ANGLE_SAFETY_FACTOR = 0.9999       # keeps the cosine inside acos' domain
INTERSECTION_MARGIN = 0.01         # fraction of a segment near each endpoint
