"""User interface layer of the extension store."""
