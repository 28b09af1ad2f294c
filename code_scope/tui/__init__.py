from code_scope.tui.renderers import ScopeConsoleUI

__all__ = ["ScopeConsoleUI"]
