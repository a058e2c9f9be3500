from dataclasses import dataclass
from typing import List, Optional

from scanparse.error.communicator import Communicator, ErrorRaiser
from scanparse.util import Span, split_lines


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    def __init__(self, message: str, errors: Optional[List["CompilerError"]] = None) -> None:
        super().__init__(message)
        # The error instances that were communicated through this exception
        self.errors = errors or []


@dataclass
class CompilerError:
    program: str
    span: Span

    # Call __post_init__ using dataclass, to automatically add errors to the list
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)

    def create_error(
        self, before: str = "", after: str = "", class_name="CompilerError"
    ):
        return Communicator.create_message(
            self.program, self.span, class_name, before, after
        )

    def chars(self, span: Span) -> str:
        line = split_lines(self.program)[span.start_ln - 1]
        return line[span.start_col : span.end_col]


class UnrecoverableError(CompilerError):
    # Add the error to the list, and immediately raise it
    def __post_init__(self) -> None:
        ErrorRaiser.ERRORS.append(self)
        Communicator.communicate(self.stage)
