"""mIRC style control codes and the 16-color palette."""

BOLD = '\x02'
COLOR = '\x03'
HEX_COLOR = '\x04'
RESET = '\x0f'
MONOSPACE = '\x11'
REVERSE = '\x16'
ITALIC = '\x1d'
STRIKETHROUGH = '\x1e'
UNDERLINE = '\x1f'

# Codes that flip a single boolean attribute
TOGGLES: dict[str, str] = {
    BOLD: 'bold',
    ITALIC: 'italic',
    UNDERLINE: 'underline',
    STRIKETHROUGH: 'strikethrough',
    MONOSPACE: 'monospace',
}

PALETTE_SIZE = 16

# Default mIRC palette, index -> RGB hex
PALETTE: tuple[str, ...] = (
    'FFFFFF',  # 0 white
    '000000',  # 1 black
    '00007F',  # 2 blue
    '009300',  # 3 green
    'FF0000',  # 4 red
    '7F0000',  # 5 brown
    '9C009C',  # 6 purple
    'FC7F00',  # 7 orange
    'FFFF00',  # 8 yellow
    '00FC00',  # 9 light green
    '009393',  # 10 cyan
    '00FFFF',  # 11 light cyan
    '0000FC',  # 12 light blue
    'FF00FF',  # 13 pink
    '7F7F7F',  # 14 grey
    'D2D2D2',  # 15 light grey
)
