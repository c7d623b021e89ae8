"""UI helpers: DPI scaling, stylesheet rendering and icon loading."""
