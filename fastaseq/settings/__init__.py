from .config import FastaSettings, get_settings

__all__ = ["FastaSettings", "get_settings"]
