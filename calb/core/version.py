"""CALB - version constants.

Keep this module tiny and dependency-free. It is imported by core models,
the Qt widget and the render harness, and must not have side effects.
"""

APP_NAME = "CircularAnimatedLoadingButton"
APP_SHORT = "CALB"

APP_VERSION = "0.1.0"

# Defaults of the loading button (pixels / fractions / ms).
# NOTE: keep these stable; they are the reference look of the button.
DEFAULT_BORDER_WIDTH_PX = 12.0
DEFAULT_PROGRESSION_PERCENT = 0.3
DEFAULT_PERIOD_MS = 3000

# Paint colors (RGB): border = neutral, progress = accent, background = surface.
DEFAULT_BORDER_RGB = (128, 128, 128)
DEFAULT_PROGRESS_RGB = (255, 255, 0)
DEFAULT_BACKGROUND_RGB = (255, 255, 255)
