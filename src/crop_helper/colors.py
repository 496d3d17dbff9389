from __future__ import annotations

# Basic palette
WHITE: tuple[int, int, int] = (255, 255, 255)
GRAY: tuple[int, int, int] = (128, 128, 128)

# Theme colors
BACKGROUND: tuple[int, int, int] = (247, 248, 243)
FOREGROUND: tuple[int, int, int] = (30, 41, 31)
MUTED: tuple[int, int, int] = (236, 239, 230)
MUTED_FOREGROUND: tuple[int, int, int] = (104, 116, 103)
CARD: tuple[int, int, int] = (255, 255, 255)
BORDER: tuple[int, int, int] = (214, 220, 206)
PRIMARY: tuple[int, int, int] = (46, 125, 50)
PRIMARY_FOREGROUND: tuple[int, int, int] = (255, 255, 255)
SECONDARY: tuple[int, int, int] = (245, 158, 11)
SECONDARY_FOREGROUND: tuple[int, int, int] = (66, 41, 0)
DESTRUCTIVE: tuple[int, int, int] = (220, 38, 38)
FOCUS_RING: tuple[int, int, int] = (250, 204, 21)

# Status colors
GOOD_GREEN: tuple[int, int, int] = (22, 163, 74)
WARN_YELLOW: tuple[int, int, int] = (202, 138, 4)
BAD_RED: tuple[int, int, int] = (220, 38, 38)
RAIN_BLUE: tuple[int, int, int] = (37, 99, 235)
STAR_YELLOW: tuple[int, int, int] = (234, 179, 8)
STAR_EMPTY: tuple[int, int, int] = (209, 213, 219)
SUCCESS_BG: tuple[int, int, int] = (220, 252, 231)
