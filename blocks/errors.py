class BlockRegistryError(Exception):
    """Base class for block registration and lookup failures."""


class BlockAlreadyRegisteredError(BlockRegistryError):
    def __init__(self, name: str):
        super().__init__(f"block type {name!r} is already registered")
        self.name = name


class UnknownBlockError(BlockRegistryError):
    def __init__(self, name: str):
        super().__init__(f"block type {name!r} is not registered")
        self.name = name


class RegistryLockedError(BlockRegistryError):
    def __init__(self, name: str):
        super().__init__(f"cannot register {name!r}: the block registry is locked")
        self.name = name
