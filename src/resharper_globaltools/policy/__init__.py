"""Exit-code policy for CLI runs."""
