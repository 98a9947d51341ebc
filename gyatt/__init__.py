"""gyatt -- scaffolds Go + templ + htmx web projects."""

__version__ = "0.1.0"
