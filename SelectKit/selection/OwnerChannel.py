from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, List, Optional

from dataclasses_json import dataclass_json

from SelectKit.WidgetConfig import WIDGET_CONFIG

SELECTION = "selection"
QUERY = "query"
VALIDATE = "validate"


@dataclass_json
@dataclass
class Notification:
    """ A message sent from a select widget to its owner """

    # one of SELECTION, QUERY or VALIDATE
    kind: str
    payload: Any


class OwnerChannel:
    """
    Delivers notifications to the owner's callbacks, synchronously and in order.
    Remembers the most recent notifications so the owner (or a crash report)
    can see what was sent.
    """

    def __init__(
            self,
            on_selection_change: Optional[Callable[[Any], None]] = None,
            on_query_change: Optional[Callable[[str], None]] = None,
            on_validate: Optional[Callable[[str], None]] = None,
            history: Optional[int] = None):
        self.callbacks: Dict[str, Optional[Callable]] = {
            SELECTION: on_selection_change,
            QUERY: on_query_change,
            VALIDATE: on_validate,
        }
        self.sent: Deque[Notification] = deque(maxlen=history or WIDGET_CONFIG.notification_history)

    def notify(self, kind: str, payload: Any):
        self.sent.append(Notification(kind, payload))
        callback = self.callbacks.get(kind)
        if callback is not None:
            # the owner's return value means nothing to us
            callback(payload)

    def sent_of(self, kind: str) -> List[Notification]:
        return [n for n in self.sent if n.kind == kind]
