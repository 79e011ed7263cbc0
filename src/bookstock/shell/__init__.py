"""Interactive line-command surface: flag parser and command loop."""
