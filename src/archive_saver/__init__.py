from .archive import TwitterArchive
from .config import SaveOptions, USER_ATTRIBUTES
from .errors import (
    ArchiveSaveError,
    MalformedContainerError,
    SaveFormatError,
    UnsupportedVersionError,
)
from .saver import ArchiveSave, ArchiveSaver, create_save, restore_save
from .storage import dumps_save, loads_save, read_save, write_save
from .versions import CURRENT_EXPORT_VERSION, SUPPORTED_SAVE_VERSIONS

__all__ = [
    'TwitterArchive',
    'SaveOptions',
    'USER_ATTRIBUTES',
    'ArchiveSaveError',
    'MalformedContainerError',
    'SaveFormatError',
    'UnsupportedVersionError',
    'ArchiveSave',
    'ArchiveSaver',
    'create_save',
    'restore_save',
    'dumps_save',
    'loads_save',
    'read_save',
    'write_save',
    'CURRENT_EXPORT_VERSION',
    'SUPPORTED_SAVE_VERSIONS',
]
