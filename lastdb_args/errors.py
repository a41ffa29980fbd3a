class ArgumentError(RuntimeError):
    """Base class for fatal problems with the lastdb command line."""
    pass


class UnrecognizedOptionError(ArgumentError):
    """An option character that is not in the grammar."""

    def __init__(self, token: str = ""):
        self.token = token
        super().__init__("bad option")


class MissingOptionValueError(ArgumentError):
    """An option that requires a value was given none."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"option requires an argument -- '{option}'")


class BadOptionValueError(ArgumentError):
    """An option value that fails its validation."""

    def __init__(self, option: str, value: str):
        self.option = option
        self.value = value
        super().__init__(f"bad option value: -{option} {value}")


class MissingPositionalError(ArgumentError):
    """No output name (and therefore no sequence files) on the command line."""

    def __init__(self, usage: str):
        self.usage = usage
        super().__init__("please give me an output name and sequence file(s)\n\n" + usage)
