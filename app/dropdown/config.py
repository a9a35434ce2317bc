"""
Configuration for the dropdown selector
"""

# Geometry
ROW_HEIGHT = 55  # px per row
DEFAULT_WIDTH = 130  # px

# Interaction
COMMIT_DELAY = 0.25  # seconds - non-dynamic mode writes the selection after the collapse

# Spring animation
SPRING_RESPONSE = 0.6  # seconds per oscillation
SPRING_DAMPING = 0.7
SPRING_DURATION = 1.0  # seconds - long enough for the spring to settle

# Rows
ROW_FONT_SIZE = "20sp"
ROW_PADDING_X = 16
ROW_TEXT_COLOR = (1, 1, 1, 1)

# Chevron
CHEVRON_PADDING = 10  # px from trailing edge
CHEVRON_SIZE = 12
CHEVRON_COLOR = (0.85, 0.85, 0.85, 1)
CHEVRON_WIDTH = 1.5

# Fills
ACTIVE_FILL = (1, 1, 1, 0.1)
INACTIVE_FILL = (1, 1, 1, 0.05)

# Demo
DEMO_OPTIONS = ["Easy", "Normal", "Hard", "Expert"]
DEMO_SELECTION = "Easy"
DEMO_DYNAMIC = False
DEMO_TOP_PADDING = 80
BACKGROUND_COLOR = (0.09, 0.09, 0.11, 1)
