'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import wx

# Card chrome (pixels)
HEADER_H = 24
BUTTON_W = 20
PADDING = 6
HANDLE_W = 8
CORNER_R = 6
INDICATOR_H = 20
MARKER_W = 240
MARKER_H = 4

# Colours
CANVAS_BG_COLOR = wx.Colour(245, 243, 238)
NOTE_COLOR = wx.Colour(255, 244, 170)
ROOT_COLOR = wx.Colour(204, 229, 255)
STACKED_COLOR = wx.Colour(255, 236, 150)
HEADER_COLOR = wx.Colour(0, 0, 0, 24)
BORDER_COLOR = wx.Colour(160, 150, 110)
SNAP_BORDER_COLOR = wx.Colour(79, 70, 229)
MARKER_COLOR = wx.Colour(79, 70, 229)
TEXT_COLOR = wx.Colour(40, 40, 40)
HINT_COLOR = wx.Colour(140, 140, 140)
OVERLAY_COLOR = wx.Colour(255, 255, 255, 235)
