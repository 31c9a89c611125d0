from SelectKit.selection.MultiSelectController import MultiSelectController
from SelectKit.selection.ScopedSelectController import ScopedSelectController
from SelectKit.selection.SingleSelectController import SingleSelectController
