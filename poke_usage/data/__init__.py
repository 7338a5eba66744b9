"""Static game data used by the analysis engines."""
