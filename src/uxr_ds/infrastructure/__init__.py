"""Infrastructure layer: packaged assets and the Jinja2 environment."""
