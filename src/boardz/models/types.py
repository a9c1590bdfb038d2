# boardZ type definitions
# Rev 0.1.0

from __future__ import annotations
from typing import Literal

# Lane keys; "todo" carries no hyphen, "in-progress" does
TaskStatus = Literal["todo", "in-progress", "done"]

SearchScope = Literal["header", "sidebar"]

EditState = Literal["closed", "open-clean", "open-dirty"]

Presence = Literal["online", "offline", "busy"]
