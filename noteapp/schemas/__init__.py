# Wire schemas package
from noteapp.schemas.note import NoteTransferRecord

__all__ = ["NoteTransferRecord"]
