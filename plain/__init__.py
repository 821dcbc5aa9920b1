"""plain — fetch a web page and render its paragraphs and headers as text."""

__version__ = "0.1.0"
