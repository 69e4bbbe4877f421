from flagparse.parsing.flags import FlagExtractor, FlagKind, get_flags
from flagparse.parsing.tokenizer import split_words

__all__ = ["FlagExtractor", "FlagKind", "get_flags", "split_words"]
