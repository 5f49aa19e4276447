from .errors import ClosureError, InvalidSize
from .matrix import RelationMatrix
from .parser import parse_row, universe_size
from .closure import compute_closure, is_transitive
from .render import format_matrix, render_pairs
from .session import Session, SessionResult

__all__ = ['ClosureError', 'InvalidSize', 'RelationMatrix', 'parse_row', 'universe_size',
           'compute_closure', 'is_transitive', 'format_matrix', 'render_pairs', 'Session', 'SessionResult']
