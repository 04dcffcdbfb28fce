"""Exceptions raised by gha_core."""


class GhaCoreError(Exception):
    """Base class for every error raised by this package."""


class FileCommandError(GhaCoreError):
    pass


class MissingChannelVariable(FileCommandError):
    def __init__(self, variable: str) -> None:
        super().__init__(f'Unable to find environment variable "{variable}"')
        self.variable = variable


class MissingChannelFile(FileCommandError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Missing file at path: {path}")
        self.path = path


class InputError(GhaCoreError, ValueError):
    pass


class RequiredInputMissing(InputError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Input required and not supplied: {name}")
        self.name = name


class InputNotBoolean(InputError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f'Input does not meet YAML 1.2 "Core Schema" specification: {name}\n'
            "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
        )
        self.name = name


class InvalidPropertyKey(GhaCoreError, KeyError):
    """An annotation property outside the allowed set was passed to ``caller``."""

    def __init__(self, key: str, caller: str) -> None:
        super().__init__(f"{caller}: invalid annotation property '{key}'")
        self.key = key
        self.caller = caller

    # KeyError.__str__ repr()s the message.
    def __str__(self) -> str:
        return str(self.args[0])


class SummaryError(GhaCoreError):
    pass


class MissingSummaryTarget(SummaryError):
    def __init__(self, variable: str) -> None:
        super().__init__(
            f"Unable to find environment variable for {variable}. "
            "Check if your runtime environment supports job summaries."
        )
        self.variable = variable


class SummaryFileUnwritable(SummaryError):
    def __init__(self, path: str) -> None:
        super().__init__(
            f"Unable to access summary file: '{path}'. "
            "Check if the file has correct read/write permissions."
        )
        self.path = path


class InvalidSummaryArgument(SummaryError, ValueError):
    pass


class MissingRepositoryContext(GhaCoreError):
    def __init__(self) -> None:
        super().__init__(
            "Unable to determine repository information. "
            "Ensure GITHUB_REPOSITORY is set or the payload contains repository data."
        )
