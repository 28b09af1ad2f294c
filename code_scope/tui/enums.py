from enum import Enum

from code_scope.documents.models import ScopeKind
from code_scope.models import MatchReason


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


SCOPE_STYLE = {
    ScopeKind.ALWAYS: UIStyle.GREEN.value,
    ScopeKind.GLOB: UIStyle.CYAN.value,
    ScopeKind.INTENT: UIStyle.MAGENTA.value,
}

REASON_STYLE = {
    MatchReason.ALWAYS_APPLY: UIStyle.GREEN.value,
    MatchReason.GLOB: UIStyle.CYAN.value,
    MatchReason.INTENT: UIStyle.MAGENTA.value,
}
