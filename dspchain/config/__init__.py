"""
Central Configuration
Constants for the DSP preset catalog and its on-disk layout.
"""

APP_NAME = "dspchain"

# === PRESET DOMAIN ===
PRESET_DOMAIN = "dsp"

# Live chain, always first in the catalog
CURRENT_PRESET_NAME = "current"
CURRENT_PRESET_FILENAME = "dspconfig"

# Named presets: <config dir>/presets/dsp/**/*.txt
PRESETS_SUBDIR = ("presets", "dsp")
PRESET_SUFFIX = ".txt"

# === PRESET TEXT FORMAT ===
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"
FLAG_DISABLED = "0"
FLAG_ENABLED = "1"

# Header token counts
HEADER_TOKENS_NAMED = 2     # <type> {
HEADER_TOKENS_CURRENT = 3   # <type> <enabled> {

# === PLUGIN REGISTRY ===
# Shown for a unit type the registry does not know
UNKNOWN_PLUGIN_NAME = "<missing plugin>"
PLUGIN_MANIFEST_FORMAT = 1
