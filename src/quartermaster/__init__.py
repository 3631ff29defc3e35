"""quartermaster: symlink-based installer for shared agent items.

Import from submodules:
- version: __version__
- operations: discovery, path resolution, linking, set management
- io: sets file and configuration file I/O
"""

from quartermaster.version import __version__ as __version__
