# Values shown by the demo screen: one 342 x 155 box per angle.
DEMO_ANGLES = (0.0, 22.5, 45.0, 60.0, 90.0, 135.0, 180.0, 225.0, 270.0, 315.0, 360.0, 390.0)

DEMO_WIDTH = 342.0
DEMO_HEIGHT = 155.0

# 0xAARRGGBB
DEMO_COLORS = (0xFF3690EA, 0xFF94B3FF)
DEMO_STOPS = (0.1205, 0.8785)

# Background behind the list of boxes
DEMO_BACKGROUND = 0xFF0000FF
