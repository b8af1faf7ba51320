'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

# Note geometry (canvas units)
DEFAULT_WIDTH = 220
DEFAULT_HEIGHT = 160
MIN_NOTE_WIDTH = 120
MAX_NOTE_WIDTH = 600
MIN_NOTE_HEIGHT = 80
MAX_NOTE_HEIGHT = 500

# Stack layout
STACK_GAP = 10

# Snapping
SNAP_X_THRESHOLD = 120
SNAP_Y_ABOVE = 50
SNAP_PADDING_EXPANDED = 100
SNAP_PADDING_COLLAPSED = 30
MARKER_OFFSET = 5

# Reading order: items closer than this vertically count as one row
SAME_ROW_TOLERANCE = 30

# Term / definition split
CONTENT_SEP = "\n---\n"
DEFAULT_SPLIT_RATIO = 0.5
MIN_SPLIT_RATIO = 0.1
MAX_SPLIT_RATIO = 0.9

# Import placement grid
IMPORT_COLUMNS = 4
IMPORT_ORIGIN_X = 100
IMPORT_ORIGIN_Y = 80
IMPORT_COL_PITCH = 260
IMPORT_ROW_PITCH = 400
IMPORT_CHILD_DROP = 180
IMPORT_MAX_HEIGHT = 400
IMPORT_BASE_HEIGHT = 120
IMPORT_LINE_HEIGHT = 20

# Auto-organize
ORGANIZE_ORIGIN_X = 60
ORGANIZE_ORIGIN_Y = 160
ORGANIZE_COL_PITCH = 260
ORGANIZE_ROOT_ROW_GAP = 80
ORGANIZE_ROW_GAP = 30

# z-order starts above the renderer's own chrome
BASE_Z = 100

# Empty-state placeholders used by the text formats
EMPTY_ROOT_TEXT = "(Empty Pin)"
EMPTY_NOTE_TEXT = "(Empty Note)"
