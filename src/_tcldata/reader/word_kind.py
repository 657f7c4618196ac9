from enum import Enum, auto, unique


@unique
class WordKind(Enum):
    BARE = auto()
    QUOTED = auto()
    BRACED = auto()

    @classmethod
    def opening_delimiters(cls):
        return {
            '"': cls.QUOTED,
            "{": cls.BRACED,
        }

    @classmethod
    def from_first_char(cls, char):
        return cls.opening_delimiters().get(char, cls.BARE)
