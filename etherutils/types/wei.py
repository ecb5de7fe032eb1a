from __future__ import annotations

from typing import NewType

# An exact, non-negative number of Wei. Python ints are arbitrary precision so
# no amount can overflow.
Wei = NewType("Wei", int)
