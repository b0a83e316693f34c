from newspath import exceptions as exc
from newspath import core
from newspath.url import (Address,
                          Scheme,
                          parse,
                          serialize,)
from newspath.path import (PathFlags,
                           PathRecord,)
from newspath.conventions import (Folder,
                                  Identity,
                                  abbr_folder,)
from newspath.core import (canon,
                           compare,
                           parent,
                           pretty,
                           probe,
                           tidy,)
from newspath.systems import Nntp

# register the systems that probing tries, in order
core.systems = (Nntp,)


__version__ = '0.0.1.dev0'
