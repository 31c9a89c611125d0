import os
from dataclasses_json import dataclass_json


@dataclass_json
class PersistentFile:
    WRITE_LOCATION = ""
    TEST_MODE = False

    @classmethod
    def toggle_test_mode(cls, test_mode: bool):
        cls.TEST_MODE = test_mode

    def save(self):
        # don't save while doing tests
        if PersistentFile.TEST_MODE:
            return
        os.makedirs(os.path.dirname(self.WRITE_LOCATION), exist_ok=True)
        dump = self.to_json(indent=2)
        with open(self.WRITE_LOCATION, "w+") as F:
            F.write(dump)

    @classmethod
    def load(cls):
        if not PersistentFile.TEST_MODE and os.path.exists(cls.WRITE_LOCATION):
            with open(cls.WRITE_LOCATION, "r") as F:
                dump = F.read()
            return cls.from_json(dump)
        return cls()
