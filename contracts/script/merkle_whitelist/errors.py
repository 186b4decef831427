class WhitelistError(ValueError):
    """Base class for whitelist build failures."""


class InvalidEncoding(WhitelistError):
    """An entry field has the wrong width, bad hex, or an out-of-range amount."""


class EmptyTree(WhitelistError):
    pass


class IndexOutOfRange(WhitelistError, IndexError):
    def __init__(self, index: int, size: int):
        super().__init__(f"leaf index {index} out of range for tree with {size} leaves")
        self.index = index
        self.size = size
