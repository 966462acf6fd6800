from .misc import now_iso, format_number, pad_count

__all__ = ["now_iso", "format_number", "pad_count"]
