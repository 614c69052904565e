from .logging import LEVELS, LogMessage, level_index, log_to_dict

__all__ = ["LEVELS", "LogMessage", "level_index", "log_to_dict"]
