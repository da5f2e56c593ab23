"""Catppuccin Mocha color scheme for the timesince TUI."""

# Catppuccin Mocha Palette
CATPPUCCIN = {
    "red": "#f38ba8",
    "green": "#a6e3a1",
    # Surface & background
    "text": "#cdd6f4",
    "overlay1": "#7f849c",
    "surface1": "#45475a",
    "base": "#1e1e2e",
    "mantle": "#181825",
}

COLORS = {
    # Item states
    "due": CATPPUCCIN["red"],
    "reminding": CATPPUCCIN["green"],
    # UI elements
    "muted": CATPPUCCIN["overlay1"],
}

# Textual CSS theme
CATPPUCCIN_THEME = f"""
Screen {{
    background: {CATPPUCCIN["base"]};
}}

Footer {{
    background: {CATPPUCCIN["mantle"]};
    color: {CATPPUCCIN["overlay1"]};
    dock: bottom;
    height: 1;
}}

DataTable {{
    background: {CATPPUCCIN["base"]};
}}

DataTable > .datatable--header {{
    background: {CATPPUCCIN["mantle"]};
    color: {CATPPUCCIN["text"]};
    text-style: bold;
}}

DataTable > .datatable--cursor {{
    background: {CATPPUCCIN["surface1"]};
    color: {CATPPUCCIN["text"]};
}}
"""
