"""Library-wide constants."""

# Tolerance used when comparing angles (radians) and other float quantities
ANGLE_EPSILON = 1e-6

# Resize defaults
DEFAULT_RESIZE_HANDLE = "bottom_right"
DEFAULT_RESIZE_MODE = "scale_shape"

# Shapes never collapse below this many units on either axis
MIN_SHAPE_SIZE = 1.0

# Floor for the uniform factor applied to scaled (text-like) shapes
MIN_SCALE_FACTOR = 0.01

# Number of polygon segments used to approximate an ellipse outline
ELLIPSE_SEGMENTS = 32

# Default shape properties
DEFAULT_GEO_WIDTH = 100.0
DEFAULT_GEO_HEIGHT = 100.0
DEFAULT_GEO_KIND = "rectangle"
DEFAULT_IMAGE_WIDTH = 100.0
DEFAULT_IMAGE_HEIGHT = 100.0
DEFAULT_TEXT_WIDTH = 200.0
DEFAULT_TEXT_HEIGHT = 24.0
