class FileSizeError(ValueError):
    def __init__(self, value: object, *args: object) -> None:
        super().__init__(value, *args)
        self.value = value


class ParseError(FileSizeError):
    def __str__(self) -> str:
        return f'Could not parse "{self.value}"'


class UnitError(FileSizeError):
    def __str__(self) -> str:
        return f'Unrecognized unit "{self.value}"'


class ConfigError(FileSizeError):
    def __init__(self, value: object, reason: str) -> None:
        super().__init__(value, reason)
        self.reason = reason

    def __str__(self) -> str:
        return f'{self.reason}: {self.value!r}'
