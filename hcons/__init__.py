# Core type aliases for the hcons data model.
# Any hashable Python value can be interned. The table keys values by their own
# __eq__/__hash__ (structural equality); Handles compare and hash by identity.
#
# Naming guidance:
# - ConsValue: a raw value handed to InternTable.intern (structural semantics).
# - The canonical copy lives in a Cell; consumers only ever hold Handles to it.

import logging
from collections.abc import Hashable
from typing import TypeVar

# Raw value alias
ConsValue = Hashable
# Value type parameter shared by Cell, Handle and InternTable
T = TypeVar("T", bound=Hashable)

# Library logging: the host application decides where records go.
logging.getLogger(__name__).addHandler(logging.NullHandler())
