"""Shell building blocks: splitting, variables, expansion, command trees and builtins."""

__version__ = "0.1.0"
__all__ = ["__version__"]