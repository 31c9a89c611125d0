import os
from dataclasses import dataclass

from dataclasses_json import dataclass_json

from SelectKit import BASE_WRITE_LOCATION
from SelectKit.model.PersistentFile import PersistentFile


@dataclass_json
@dataclass
class WidgetConfig(PersistentFile):
    """
    User-editable settings shared by every widget.
    Stored as JSON next to the crash reports; missing fields fall back to the defaults below.
    """

    # raise on options missing their id/name/label fields instead of dropping them
    strict_options: bool = True

    # how many notifications each owner channel remembers
    notification_history: int = 50

    select_placeholder: str = "Select an option"
    search_placeholder: str = "Search..."
    no_options_text: str = "No options available"

    log_level: str = "INFO"

    WRITE_LOCATION = os.path.join(BASE_WRITE_LOCATION, "WidgetConfig.json")

    def __post_init__(self):
        if not isinstance(self.notification_history, int) or self.notification_history < 1:
            self.notification_history = 50

    def reset(self):
        """
        Restores every setting to its default
        """
        defaults = WidgetConfig()
        for f in self.__dataclass_fields__:
            setattr(self, f, getattr(defaults, f))


WIDGET_CONFIG = WidgetConfig.load()
