"""Central settings and UI constants for Dice Clicker."""
import pygame

WIDTH, HEIGHT = 900, 640
FPS = 60
MARGIN = 20

# === DICE CANVAS ===
CANVAS_WIDTH, CANVAS_HEIGHT = 600, 400
CANVAS_POS = ((WIDTH - CANVAS_WIDTH) // 2, 90)
DICE_SIZE = 100
DICE_DOT_RADIUS = 8
DICE_BORDER_WIDTH = 3
CANVAS_GRID_SPACING = 50
ROLL_ANIMATION_FRAMES = 20

# === TIMINGS (ms) ===
PANEL_FADE_MS = 300
TOAST_DURATION_MS = 2000
TOAST_RISE_PX = 100

# === COLOR PALETTE ===

# Background
BG_COLOR = (45, 52, 84)
CANVAS_BG = (34, 40, 66)
CANVAS_GRID_DOT = (255, 255, 255, 26)  # 10% white

# Dice colors
DICE_FACE = (255, 255, 255)
DICE_BORDER = (51, 51, 51)
DICE_PIPS = (51, 51, 51)

# Text colors
TEXT_PRIMARY = (236, 240, 241)
TEXT_MUTED = (160, 170, 185)

# Toast tones
TOAST_COLORS = {
    'coins': (0, 184, 148),
    'level': (108, 92, 231),
    'skill': (238, 90, 36),
    'error': (231, 76, 60),
}
TOAST_DEFAULT_COLOR = TEXT_PRIMARY

# Button colors
BTN_ROLL_COLOR = (253, 203, 110)
BTN_MENU_COLOR = (116, 185, 255)
BTN_COMBAT_COLOR = (214, 48, 49)
BTN_BUY_COLOR = (0, 184, 148)
BTN_UPGRADE_COLOR = (238, 90, 36)
BTN_RESET_COLOR = (231, 76, 60)
BTN_CONFIRM_COLOR = (0, 184, 148)
BTN_TEXT = (20, 24, 40)

# HUD/Panel colors
HUD_BG = (30, 36, 60)
HUD_BORDER = (90, 110, 170)
PANEL_BG = (38, 44, 72)
PANEL_BORDER = (116, 185, 255)
MODAL_DIM = (0, 0, 0, 150)
SLIDER_TRACK = (70, 80, 110)
SLIDER_FILL = (116, 185, 255)
SLIDER_KNOB = (236, 240, 241)

# Font sizes
FONT_SIZE_HUD = 26
FONT_SIZE_SMALL = 22
FONT_SIZE_TOAST = 32

# Border radius values
BORDER_RADIUS_BUTTON = 8
BORDER_RADIUS_PANEL = 12
BORDER_RADIUS_HUD = 8

# Layout rectangles (created once)
ROLL_BTN = pygame.Rect(WIDTH // 2 - 90, CANVAS_POS[1] + CANVAS_HEIGHT + 20, 180, 56)
MENU_BTN_Y = HEIGHT - 60
SHOP_BTN = pygame.Rect(MARGIN, MENU_BTN_Y, 130, 44)
SKILLS_BTN = pygame.Rect(MARGIN + 145, MENU_BTN_Y, 130, 44)
COMBAT_BTN = pygame.Rect(MARGIN + 290, MENU_BTN_Y, 130, 44)
SETTINGS_BTN = pygame.Rect(WIDTH - MARGIN - 130, MENU_BTN_Y, 130, 44)

PANEL_RECT = pygame.Rect(WIDTH // 2 - 220, 110, 440, 340)
PANEL_ROW_HEIGHT = 64
PANEL_HEADER_HEIGHT = 56
CONFIRM_RECT = pygame.Rect(WIDTH // 2 - 210, HEIGHT // 2 - 90, 420, 180)
