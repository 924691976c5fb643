from .rysquad_py import RysQuad
from .rysquad_py import RysRes
from .rysquad_py import compute_roots
from .rysquad_py import compute_roots_short_range
from .rys_exceptions import *
