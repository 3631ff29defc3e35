"""Application context with dependency injection.

The QuartermasterContext dataclass holds the filesystem integration and the
process-wide state (cwd, home, agent directory, stdin interactivity). It is
created once at the CLI entry point and threaded through commands, so core
operations never read ambient process state themselves.
"""

import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path

from quartermaster.filesystem.abc import Filesystem
from quartermaster.io.config import AGENT_DIR_ENV_VAR, get_global_config_dir

DEBUG_ENV_VAR = "QUARTERMASTER_DEBUG"


@dataclass(frozen=True)
class QuartermasterContext:
    """Immutable context holding all dependencies for quartermaster commands.

    Attributes:
        filesystem: Filesystem integration used by the symlink engine
        cwd: Project directory; the local root is ``cwd/.pi``
        home: Home directory used for ``~`` expansion
        global_config_dir: Directory holding the global quartermaster.json
        repo_override: Shared repo path from ``--repo``
        sets_file_override: Sets file name from ``--sets-file``
        interactive: Whether the user can be prompted
        debug: Whether debug logging is enabled
    """

    filesystem: Filesystem
    cwd: Path
    home: Path
    global_config_dir: Path
    repo_override: str | None
    sets_file_override: str | None
    interactive: bool
    debug: bool

    def with_overrides(
        self, *, repo_override: str | None, sets_file_override: str | None, debug: bool
    ) -> "QuartermasterContext":
        """Return a copy with global CLI options applied; unset options keep current values."""
        return replace(
            self,
            repo_override=repo_override if repo_override is not None else self.repo_override,
            sets_file_override=(
                sets_file_override if sets_file_override is not None else self.sets_file_override
            ),
            debug=debug or self.debug,
        )

    @staticmethod
    def for_test(
        filesystem: Filesystem | None = None,
        cwd: Path | None = None,
        home: Path | None = None,
        global_config_dir: Path | None = None,
        repo_override: str | None = None,
        sets_file_override: str | None = None,
        interactive: bool = False,
        debug: bool = False,
    ) -> "QuartermasterContext":
        """Create test context with sensible defaults for unspecified values.

        Uses FakeFilesystem by default. Paths default to fixed locations under
        ``/fake`` that never touch disk.

        Example:
            >>> ctx = QuartermasterContext.for_test(cwd=tmp_path, repo_override=str(repo))
        """
        from quartermaster.filesystem.fake import FakeFilesystem

        resolved_filesystem: Filesystem = (
            filesystem if filesystem is not None else FakeFilesystem()
        )
        resolved_cwd = cwd if cwd is not None else Path("/fake/project")
        resolved_home = home if home is not None else Path("/fake/home")
        resolved_global_config_dir = (
            global_config_dir
            if global_config_dir is not None
            else get_global_config_dir(resolved_home, None)
        )

        return QuartermasterContext(
            filesystem=resolved_filesystem,
            cwd=resolved_cwd,
            home=resolved_home,
            global_config_dir=resolved_global_config_dir,
            repo_override=repo_override,
            sets_file_override=sets_file_override,
            interactive=interactive,
            debug=debug,
        )


def create_context(
    *,
    repo_override: str | None = None,
    sets_file_override: str | None = None,
    debug: bool = False,
) -> QuartermasterContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Reads the working directory, the home
    directory, PI_CODING_AGENT_DIR and whether stdin is a terminal.
    """
    from quartermaster.filesystem.real import RealFilesystem

    home = Path.home()
    return QuartermasterContext(
        filesystem=RealFilesystem(),
        cwd=Path.cwd(),
        home=home,
        global_config_dir=get_global_config_dir(home, os.environ.get(AGENT_DIR_ENV_VAR)),
        repo_override=repo_override,
        sets_file_override=sets_file_override,
        interactive=sys.stdin.isatty(),
        debug=debug or bool(os.environ.get(DEBUG_ENV_VAR)),
    )
