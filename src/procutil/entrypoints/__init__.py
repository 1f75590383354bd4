"""Entry points for procutil (command-line interface)."""
