"""Inspect the method lookup path of any Python object.

>>> import looksee
>>> looksee.lookup_path([])
list
  ...
object
  ...

Configure output by changing fields of `looksee.config`.
"""

__version__ = "1.0.0"

from ._columnizer import columnize as columnize
from ._config import Config as Config
from ._config import LookupPathOptions as LookupPathOptions
from ._config import config as config
from ._config import config_context as config_context
from ._config import plain_styles as plain_styles
from ._config import style as style
from ._looksee import lookup_modules as lookup_modules
from ._looksee import lookup_path as lookup_path
from ._lookup_path import Entry as Entry
from ._lookup_path import LookupPath as LookupPath
from ._lookup_path import LookupPathError as LookupPathError
from ._runtime import PythonRuntime as PythonRuntime
from ._runtime import Runtime as Runtime
from ._runtime import SingletonClass as SingletonClass
from ._runtime import singleton_class as singleton_class
from ._strings import display_width as display_width
from ._warnings import LookseeWarning as LookseeWarning
