"""WeakSelf: strong vs. weak capture of a view model in a delayed callback."""

__version__ = "0.1.0"
