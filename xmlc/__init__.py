"""xmlc — kompilator dokumentów XML z dyrektywami `<!-- #include file="..." -->`."""

__version__ = "0.1.0"
