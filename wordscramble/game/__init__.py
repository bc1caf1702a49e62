from .state import RoundState
from .lifecycle import start_round, submit_word
from .messages import rejection_message

__all__ = ["RoundState", "start_round", "submit_word", "rejection_message"]
