from quartermaster.filesystem.abc import Filesystem
from quartermaster.filesystem.fake import FakeFilesystem
from quartermaster.filesystem.real import RealFilesystem

__all__ = [
    "FakeFilesystem",
    "Filesystem",
    "RealFilesystem",
]
