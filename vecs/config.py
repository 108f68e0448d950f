"""Default tolerance and array settings for vecs."""

from __future__ import annotations

import numpy as np

DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12
DEFAULT_ARRAY_DTYPE = np.float64
