# Domain model package
from noteapp.domain.note import Note, format_timestamp, to_domain, to_transfer_record

__all__ = ["Note", "format_timestamp", "to_domain", "to_transfer_record"]
