# Font fallback configuration for Emoji Banner TrueType rendering
FONT_FALLBACKS = {
    "VT323-Regular.ttf": ["DejaVuSansMono.ttf", "LiberationMono-Regular.ttf"],
    "PressStart2P-Regular.ttf": ["DejaVuSansMono-Bold.ttf", "DejaVuSansMono.ttf"],
    "ShareTechMono-Regular.ttf": ["DejaVuSansMono.ttf", "LiberationMono-Regular.ttf"],
    "Orbitron-Regular.ttf": ["DejaVuSans-Bold.ttf", "LiberationSans-Bold.ttf"],
    "Creepster-Regular.ttf": ["DejaVuSans.ttf", "LiberationSans-Regular.ttf"],
}

# Searched in order after the package fonts directory
SYSTEM_FONT_DIRS = [
    "/usr/share/fonts/truetype/dejavu",
    "/usr/share/fonts/truetype/liberation",
    "/usr/share/fonts/dejavu",
    "/usr/share/fonts/TTF",
    "/Library/Fonts",
    "/System/Library/Fonts",
    "C:/Windows/Fonts",
    "/data/data/com.termux/files/usr/share/fonts/TTF",
]
