"""ESC/POS protocol layer."""
