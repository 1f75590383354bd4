"""procutil command-line interface."""
