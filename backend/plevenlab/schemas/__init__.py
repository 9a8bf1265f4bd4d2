# plevenlab/schemas/__init__.py
"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .auth import *
from .user import *
from .category import *
from .event import *
from .post import *
