import os

VmtypesDir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
